import base64
import json

import pytest

from rbs_client import RBSClient, decode_token_payload


def _token(claims) -> str:
    payload = base64.urlsafe_b64encode(json.dumps(claims).encode("utf-8")).decode("ascii").rstrip("=")
    return f"eyJhbGciOiJIUzI1NiJ9.{payload}.signature"


def test_decode_token_payload():
    token = _token({"projectId": "proj-1", "userId": "u-1", "iat": 1700000000, "exp": 1700003600})

    payload = decode_token_payload(token)

    assert payload.project_id == "proj-1"
    assert payload.user_id == "u-1"
    assert payload.exp - payload.iat == 3600


def test_client_exposes_token_decoding():
    token = _token({"projectId": "p", "userId": "u", "iat": 1, "exp": 2})
    assert RBSClient.get_rbs_token_payload(token).user_id == "u"


@pytest.mark.parametrize(
    "token",
    [
        "not-a-token",
        "a.b",
        "a.!!!.c",
        f"a.{base64.urlsafe_b64encode(b'[1, 2]').decode()}.c",
    ],
)
def test_malformed_tokens_raise_value_error(token):
    with pytest.raises(ValueError):
        decode_token_payload(token)
