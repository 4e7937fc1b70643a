"""
@File       : token.py
@Description: 读取 RBS token 中的声明（不校验签名）

@Time       : 2026/1/6 11:20
@Author     : hcy18
"""
import base64
import binascii
import json

from pydantic import ValidationError

from rbs_client.schemas.token_schema import RbsTokenPayload


def decode_token_payload(token: str) -> RbsTokenPayload:
    """
    解码 token 的 payload 段.

    token 为三段式 header.payload.signature，payload 为 base64url 编码的 JSON。

    Args:
        token: RBS 签发的 token

    Returns:
        RbsTokenPayload

    Raises:
        ValueError: token 结构不正确或 payload 无法解析
    """
    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError("Token must have three dot-separated parts")

    segment = parts[1]
    # base64url 省略了末尾的 '='
    segment += "=" * (-len(segment) % 4)
    try:
        raw = base64.urlsafe_b64decode(segment)
        claims = json.loads(raw.decode("utf-8"))
        return RbsTokenPayload.model_validate(claims)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Token payload cannot be decoded: {e}") from e
