"""
@File       : product_schema.py
@Description: ==================== 商品 / 分类 / 列表相关模型 ====================

@Time       : 2026/1/6 10:41
@Author     : hcy18
"""
from decimal import Decimal
from typing import Optional, List, Dict, Any
from pydantic import Field
from rbs_client.schemas.base import CamelCaseModel


class ProductVariant(CamelCaseModel):
    """商品规格."""
    name: str = Field(..., description="规格名称")
    price: Optional[Decimal] = Field(default=None, description="价格")
    stock_qty: Optional[int] = Field(default=None, description="库存数量")


class ProductMerchant(CamelCaseModel):
    """在售商家."""
    id: str = Field(..., description="商家ID")
    price: Optional[Decimal] = Field(default=None, description="该商家售价")
    variants: List[ProductVariant] = Field(default_factory=list, description="该商家的规格及库存")


class Product(CamelCaseModel):
    """
    商品 DTO（与 ProductService2 返回保持一致）.

    culture 决定 name / description 的语言。
    """
    id: str = Field(..., description="商品ID")
    name: Optional[str] = Field(default=None, description="商品名称")
    description: Optional[str] = Field(default=None, description="商品描述")
    culture: Optional[str] = Field(default=None, description="语言")
    price: Optional[Decimal] = Field(default=None, description="价格")
    images: List[str] = Field(default_factory=list, description="图片列表")
    category_ids: List[str] = Field(default_factory=list, description="所属分类")
    variants: List[ProductVariant] = Field(default_factory=list, description="规格")
    merchants: List[ProductMerchant] = Field(default_factory=list, description="在售商家")


class Category(CamelCaseModel):
    """分类节点."""
    id: str = Field(..., description="分类ID")
    name: Optional[str] = Field(default=None, description="分类名称")
    parent_id: Optional[str] = Field(default=None, description="父分类ID")
    children: List["Category"] = Field(default_factory=list, description="子分类")


class CategoryTree(CamelCaseModel):
    """分类树."""
    culture: Optional[str] = Field(default=None, description="语言")
    categories: List[Category] = Field(default_factory=list, description="顶层分类")

    def find(self, category_id: str) -> Optional[Category]:
        """深度优先查找分类节点."""
        stack = list(self.categories)
        while stack:
            node = stack.pop()
            if node.id == category_id:
                return node
            stack.extend(node.children)
        return None


class ProductList(CamelCaseModel):
    """运营配置的商品列表."""
    id: str = Field(..., description="列表ID")
    name: Optional[str] = Field(default=None, description="列表名称")
    products: List[Product] = Field(default_factory=list, description="列表中的商品")
    meta: Dict[str, Any] = Field(default_factory=dict, description="额外信息")
