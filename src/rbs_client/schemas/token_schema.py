"""
@File       : token_schema.py
@Description: ==================== 身份 / Token 相关模型 ====================

@Time       : 2026/1/6 11:15
@Author     : hcy18
"""
from pydantic import Field
from rbs_client.schemas.base import CamelCaseModel


class CustomToken(CamelCaseModel):
    """MainService/token 返回的自定义 token."""
    custom_token: str = Field(..., description="自定义 token")


class ClientAuthenticateResponse(CamelCaseModel):
    """authenticate / refresh-token 返回."""
    access_token: str = Field(..., description="访问 token")
    refresh_token: str = Field(..., description="刷新 token")


class RbsTokenPayload(CamelCaseModel):
    """从 token 中解码出的声明（未校验签名）."""
    project_id: str = Field(..., description="项目ID")
    user_id: str = Field(..., description="用户ID")
    iat: int = Field(..., description="签发时间（秒）")
    exp: int = Field(..., description="过期时间（秒）")
