"""
@File       : logging_observer.py
@Description: 请求 / 响应观察者，以 httpx event hooks 方式挂载，只读不改

@Time       : 2026/1/6 14:52
@Author     : hcy18
"""
import logging
from typing import Dict, List, Optional, Protocol, Callable, Awaitable, Any

import httpx

from rbs_client.utils.logger import app_logger


def redact_url(url: httpx.URL) -> str:
    """去掉 auth 参数，避免 API key 出现在日志中."""
    return str(url.copy_remove_param("auth"))


class RequestObserver(Protocol):
    """请求观察者，在客户端构造时注入."""

    async def on_request(self, request: httpx.Request) -> None:
        ...

    async def on_response(self, response: httpx.Response) -> None:
        ...


class LoggingObserver:
    """将每次请求 / 响应写入日志（enable_logs=True 时默认使用）."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger or app_logger
        self.level = level

    async def on_request(self, request: httpx.Request) -> None:
        """
        记录请求.

        Args:
            request: 即将发出的请求
        """
        self.logger.log(self.level, f"RBS 请求: method={request.method}, url={redact_url(request.url)}")
        if request.content:
            self.logger.log(self.level, f"RBS 请求体: {request.content.decode('utf-8', errors='replace')}")

    async def on_response(self, response: httpx.Response) -> None:
        """
        记录响应状态（不读取 body）.

        Args:
            response: 收到的响应
        """
        self.logger.log(
            self.level,
            f"RBS 响应: status={response.status_code}, url={redact_url(response.request.url)}"
        )


def build_event_hooks(observer: Optional[RequestObserver]) -> Dict[str, List[Callable[[Any], Awaitable[None]]]]:
    """将观察者转换为 httpx.AsyncClient 的 event_hooks."""
    if observer is None:
        return {}
    return {
        "request": [observer.on_request],
        "response": [observer.on_response],
    }
