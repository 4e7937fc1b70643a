"""
@File       : search_schema.py
@Description: ==================== 搜索相关模型 ====================

@Time       : 2026/1/6 10:33
@Author     : hcy18
"""
from enum import IntEnum
from typing import Optional, Tuple, List, Dict, Any

from pydantic import ConfigDict, Field, model_validator

from rbs_client.exceptions import ConfigurationError
from rbs_client.schemas.base import CamelCaseModel
from rbs_client.schemas.filter_schema import Filter
from rbs_client.schemas.product_schema import Product

DEFAULT_CULTURE = "en_US"


class SortOrder(IntEnum):
    """排序方向，以数值形式传给后端."""
    ASC = 0
    DESC = 1


class SearchInput(CamelCaseModel):
    """
    商品搜索请求参数.

    user_id 必填，缺失时在构造阶段即抛出 ConfigurationError；其余字段均有默认值。
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    user_id: Optional[str] = Field(default=None, description="用户ID（必填）")
    search_term: Optional[str] = Field(default=None, description="搜索关键词")
    category_id: str = Field(default="", description="分类范围")
    culture: str = Field(default=DEFAULT_CULTURE, description="语言")
    filters: Tuple[Filter, ...] = Field(default=(), description="过滤条件，保持顺序")
    aggs: bool = Field(default=False, description="是否走聚合接口")
    from_: int = Field(default=0, ge=0, alias="from", description="分页偏移")
    size: int = Field(default=20, ge=0, description="每页大小")
    sort_attribute: str = Field(default="price", description="排序字段")
    sort_order: SortOrder = Field(default=SortOrder.DESC, description="排序方向")
    in_stock: bool = Field(default=False, description="只返回有库存商品")

    @model_validator(mode="after")
    def require_user_id(self) -> "SearchInput":
        if not self.user_id:
            raise ConfigurationError("UserId is missing")
        return self


class SearchResult(CamelCaseModel):
    """搜索 / 聚合接口返回数据."""
    products: List[Product] = Field(default_factory=list, description="命中商品")
    total: int = Field(default=0, description="命中总数")
    aggregations: Optional[Dict[str, Any]] = Field(default=None, description="聚合结果（aggs 模式）")
