"""
@File       : service_response.py
@Description:

@Time       : 2026/1/6 10:03
@Author     : hcy18
"""
"""RBS 统一返回类型 ServiceResponse."""

from typing import Generic, TypeVar, Optional

from pydantic import Field, StrictBool

from rbs_client.schemas.base import CamelCaseModel

T = TypeVar("T")


class ServiceResponse(CamelCaseModel, Generic[T]):
    """
    RBS 统一返回类型（envelope 格式）.

    success 为 true 时 data 必须存在；为 false 时以 message 作为失败原因。
    """

    # 是否成功
    success: StrictBool = Field(..., description="是否成功（仅接受 JSON true / false）")

    # 返回数据
    data: Optional[T] = Field(default=None, description="返回数据")

    # 消息
    message: Optional[str] = Field(default=None, description="消息")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"success": True, "data": {"id": "p-1"}},
                {"success": False, "message": "Product not found"},
            ],
        }
    }

    # ==================== 静态工厂方法 ====================

    @staticmethod
    def ok(data: T, message: Optional[str] = None) -> "ServiceResponse[T]":
        """
        成功返回.

        Args:
            data: 返回数据
            message: 消息

        Returns:
            ServiceResponse 实例
        """
        return ServiceResponse(success=True, data=data, message=message)

    @staticmethod
    def fail(message: str) -> "ServiceResponse[T]":
        """
        失败返回.

        Args:
            message: 失败原因

        Returns:
            ServiceResponse 实例
        """
        return ServiceResponse(success=False, message=message)
