"""
@File       : base.py
@Description: Pydantic 基类模块，提供自动驼峰命名转换功能.

@Time       : 2026/1/6 09:52
@Author     : hcy18
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """
    自动转换驼峰命名的 Pydantic 基类.

    特性：
    - Python 代码中使用蛇形命名（snake_case）
    - 与 RBS 服务交互的 JSON 使用驼峰命名（camelCase）
    - 支持同时接受蛇形和驼峰命名（populate_by_name=True）
    - 保留后端返回的额外字段（extra="allow"），后端新增字段不会导致解析失败

    示例：
        ```python
        class StockEntry(CamelCaseModel):
            variant_name: str
            stock_qty: int

        # RBS 返回的 JSON：{"variantName": "XL", "stockQty": 3}
        # Python 中访问：entry.variant_name, entry.stock_qty
        # 发送时：entry.model_dump(by_alias=True) -> {"variantName": "XL", "stockQty": 3}
        ```
    """

    model_config = ConfigDict(
        alias_generator=to_camel,     # 自动转换为驼峰命名
        populate_by_name=True,         # 允许同时使用蛇形和驼峰命名
        extra="allow",
    )
