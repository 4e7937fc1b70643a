"""
@File       : exceptions.py
@Description: RBS 客户端异常定义

@Time       : 2026/1/6 10:12
@Author     : hcy18
"""
from typing import Optional

# 后端未返回 message 时使用的默认失败原因
GENERIC_FAILURE_MESSAGE = "RBS service request failed"


class RBSError(Exception):
    """RBS 客户端异常基类."""


class ConfigurationError(RBSError):
    """客户端前置条件不满足（如缺少 merchantId / userId），在发起网络请求前抛出."""


class BackendRejection(RBSError):
    """后端明确返回失败（success=false 或状态码不在 [200, 400) 内）."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or GENERIC_FAILURE_MESSAGE
        self.status_code = status_code
        super().__init__(self.message)


class MalformedResponseError(RBSError):
    """响应体既不符合 envelope 格式，也不符合状态码格式."""
