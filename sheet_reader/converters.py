"""
字符串 → 目标类型转换
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict

from .constants import BOOL_TRUE_TEXT, BOOL_FALSE_TEXT


def parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered == BOOL_TRUE_TEXT:
        return True
    if lowered == BOOL_FALSE_TEXT:
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


def parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text)
    except InvalidOperation:
        raise ValueError(f"invalid decimal literal: {text!r}")


def parse_date(text: str) -> date:
    # 单元格中的日期时间会被转成 "YYYY-MM-DDTHH:MM:SS"，只取日期部分也视为合法
    if "T" in text:
        return datetime.fromisoformat(text).date()
    return date.fromisoformat(text)


CONVERTERS: Dict[Any, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: parse_bool,
    Decimal: parse_decimal,
    date: parse_date,
    datetime: datetime.fromisoformat,
}


def get_converter(target: Any) -> Callable[[str], Any]:
    """
    取得目标类型的转换函数
    内置类型走 CONVERTERS，其它可调用对象直接当作转换函数
    """
    if target in CONVERTERS:
        return CONVERTERS[target]
    if callable(target):
        return target
    raise TypeError(f"Unsupported parse target: {target!r}")


def convert(text: str, target: Any) -> Any:
    """转换失败抛出 ValueError"""
    converter = get_converter(target)
    try:
        return converter(text)
    except (TypeError, ArithmeticError) as e:
        raise ValueError(str(e))
