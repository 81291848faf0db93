"""
使用示例
"""
from sheet_reader import WorkbookData, ReaderConfig, NoValueError, ParseError


# 示例 1: 读取第一个有表头的 sheet
def example_first_sheet():
    data = WorkbookData.from_path("inputs/本月报表.xlsx")
    print(f"sheet: {data.sheet_name}, 表头行: {data.header_row}")
    print(f"列名: {data.columns}")

    for row in data.iter_rows():
        # 中间的空行跳过，不终止遍历
        if row.is_empty():
            continue
        try:
            qty = row.parse("数量", int)
        except NoValueError as e:
            print(f"  第 {row.number} 行缺少值: {e}")
            continue
        except ParseError as e:
            print(f"  第 {row.number} 行无法解析: {e.value!r}")
            continue
        print(f"  第 {row.number} 行: {row.get('产品')} x {qty}")


# 示例 2: 读取指定 sheet，导出为 DataFrame
def example_named_sheet():
    data = WorkbookData.from_path_with_sheet_name("inputs/本月报表.xlsx", "销售表")
    df = data.to_dataframe()
    print(df.head())


# 示例 3: 自定义配置
def example_custom_config():
    config = ReaderConfig(
        include_hidden=False,
        max_rows=10000,
        log_dir="outputs/logs",
    )
    data = WorkbookData.from_path("inputs/data.csv", config=config)
    print(len(data))


if __name__ == "__main__":
    print("Sheet Reader 使用示例")
    print("=" * 50)

    # 运行示例（需要实际文件）
    # example_first_sheet()
    # example_named_sheet()
    # example_custom_config()

    print("\n请将示例文件路径替换为实际文件路径后运行")
