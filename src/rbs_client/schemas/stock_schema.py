"""
@File       : stock_schema.py
@Description: ==================== 库存相关模型 ====================

@Time       : 2026/1/6 11:02
@Author     : hcy18
"""
from typing import Optional, List
from pydantic import Field
from rbs_client.schemas.base import CamelCaseModel


class StockOperationStockItem(CamelCaseModel):
    """单个规格的库存变更."""
    variant: str = Field(..., description="规格名称")
    qty: int = Field(..., description="数量")


class StockOperation(CamelCaseModel):
    """一次库存操作：商品ID + 有序的 (规格, 数量) 列表，仅在单次调用内使用."""
    product_id: str = Field(..., description="商品ID")
    stocks: List[StockOperationStockItem] = Field(default_factory=list, description="规格库存变更")


# ==================== 请求体（发往 insertStockOperation / simulatedStockOperation） ====================

class MerchantRef(CamelCaseModel):
    id: str = Field(..., description="商家ID")


class StockEntry(CamelCaseModel):
    variant_name: str = Field(..., description="规格名称")
    stock_qty: int = Field(..., description="数量")


class StockOperationData(CamelCaseModel):
    merchant: MerchantRef
    product_id: str
    stocks: List[StockEntry] = Field(default_factory=list)

    @classmethod
    def from_operation(cls, merchant_id: str, operation: StockOperation) -> "StockOperationData":
        """将调用方的 StockOperation 转换为后端所需格式."""
        return cls(
            merchant=MerchantRef(id=merchant_id),
            product_id=operation.product_id,
            stocks=[StockEntry(variant_name=s.variant, stock_qty=s.qty) for s in operation.stocks],
        )


class StockOperationRequest(CamelCaseModel):
    """库存操作请求体."""
    decrease: bool = Field(default=False, description="true 为扣减，false 为增加")
    data: List[StockOperationData] = Field(default_factory=list)


# ==================== 返回数据 ====================

class StockOperationResultItem(CamelCaseModel):
    product_id: str = Field(..., description="商品ID")
    variant_name: Optional[str] = Field(default=None, description="规格名称")
    stock_qty: Optional[int] = Field(default=None, description="操作后库存")
    success: bool = Field(default=True, description="该条是否成功")
    message: Optional[str] = Field(default=None, description="失败原因")


class StockOperationResult(CamelCaseModel):
    """库存操作结果."""
    operation_id: Optional[str] = Field(default=None, description="操作ID（模拟操作可能为空）")
    items: List[StockOperationResultItem] = Field(default_factory=list, description="逐条结果")


class SingleMerchantProductStock(CamelCaseModel):
    """单商家单规格库存."""
    product_id: str = Field(..., description="商品ID")
    merchant_id: str = Field(..., description="商家ID")
    variant: str = Field(..., description="规格名称")
    stock_qty: int = Field(default=0, description="库存数量")


class BulkUpdateItem(CamelCaseModel):
    """商家批量更新条目（价格 / 库存）."""
    merchant_id: str = Field(..., description="商家ID")
    product_id: str = Field(..., description="商品ID")
    variant: Optional[str] = Field(default=None, description="规格名称")
    price: Optional[float] = Field(default=None, description="价格")
    stock_qty: Optional[int] = Field(default=None, description="库存数量")
