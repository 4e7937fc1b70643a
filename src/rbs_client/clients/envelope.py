"""
@File       : envelope.py
@Description: 将 RBS 的两种响应格式统一解析为结果或异常

@Time       : 2026/1/6 14:10
@Author     : hcy18
"""
import json
from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from rbs_client.exceptions import BackendRejection, MalformedResponseError
from rbs_client.schemas.service_response import ServiceResponse


class ResponseDialect(str, Enum):
    """响应格式."""
    # {success, data, message}
    ENVELOPE = "envelope"
    # 仅以 HTTP 状态码 [200, 400) 判断成功，整个 body 即结果
    STATUS = "status"


def _decode_body(response: httpx.Response) -> Optional[Any]:
    """解析 JSON body，非 JSON 返回 None."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def _body_message(body: Any) -> Optional[str]:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


def _validate(data_type: Any, data: Any, response: httpx.Response) -> Any:
    try:
        return TypeAdapter(data_type).validate_python(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Unexpected payload from {response.request.url.path}: {e}"
        ) from e


def unwrap_envelope(response: httpx.Response, data_type: Any) -> Any:
    """
    解析 envelope 格式响应.

    Args:
        response: httpx 响应
        data_type: data 的目标类型（pydantic 模型或类型注解）

    Returns:
        校验后的 data

    Raises:
        BackendRejection: success=false，或非 2xx 且 body 带 message
        MalformedResponseError: 2xx 但 body 不是 envelope，或 success=true 却没有 data
        httpx.HTTPStatusError: 非 2xx 且无法从 body 中取得 message
    """
    body = _decode_body(response)

    if isinstance(body, dict) and "success" in body:
        try:
            envelope = ServiceResponse[Any].model_validate(body)
        except ValidationError as e:
            raise MalformedResponseError(f"Invalid response envelope: {e}") from e

        if not envelope.success:
            raise BackendRejection(envelope.message, status_code=response.status_code)
        if envelope.data is None:
            raise MalformedResponseError("Response reported success without data")
        return _validate(data_type, envelope.data, response)

    if not response.is_success:
        message = _body_message(body)
        if message:
            raise BackendRejection(message, status_code=response.status_code)
        response.raise_for_status()

    raise MalformedResponseError(
        f"Response from {response.request.url.path} is not a service envelope"
    )


def unwrap_status(response: httpx.Response, data_type: Any) -> Any:
    """
    解析状态码格式响应（token 相关接口）.

    Raises:
        BackendRejection: 状态码不在 [200, 400)
        MalformedResponseError: 状态码成功但 body 不是合法 JSON 或不符合 data_type
    """
    body = _decode_body(response)

    if not 200 <= response.status_code < 400:
        raise BackendRejection(_body_message(body), status_code=response.status_code)

    if body is None:
        raise MalformedResponseError(
            f"Response from {response.request.url.path} has no JSON body"
        )
    return _validate(data_type, body, response)
