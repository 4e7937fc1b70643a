from typing import Any, List

import httpx
import pytest

from rbs_client import (
    BackendRejection,
    MalformedResponseError,
    Product,
    ServiceResponse,
    unwrap_envelope,
    unwrap_status,
)
from rbs_client.exceptions import GENERIC_FAILURE_MESSAGE

REQUEST = httpx.Request("GET", "https://rbs.test/server/ProductService2/getProduct")


def _response(status_code=200, **kwargs) -> httpx.Response:
    return httpx.Response(status_code, request=REQUEST, **kwargs)


# ==================== envelope ====================

def test_envelope_success_yields_data():
    response = _response(json={"success": True, "data": {"x": 1}})
    assert unwrap_envelope(response, Any) == {"x": 1}


def test_envelope_success_validates_into_model():
    body = ServiceResponse.ok([{"id": "p-1", "name": "Shoe"}]).model_dump(by_alias=True)
    products = unwrap_envelope(_response(json=body), List[Product])
    assert products[0].id == "p-1"
    assert products[0].name == "Shoe"


def test_envelope_failure_uses_backend_message():
    body = ServiceResponse.fail("m").model_dump(by_alias=True)
    with pytest.raises(BackendRejection) as exc_info:
        unwrap_envelope(_response(json=body), Any)
    assert str(exc_info.value) == "m"
    assert exc_info.value.message == "m"


def test_envelope_failure_without_message_has_generic_reason():
    with pytest.raises(BackendRejection) as exc_info:
        unwrap_envelope(_response(json={"success": False}), Any)
    assert exc_info.value.message == GENERIC_FAILURE_MESSAGE
    assert str(exc_info.value)


def test_envelope_on_error_status_is_still_interpreted():
    response = _response(400, json={"success": False, "message": "Out of stock"})
    with pytest.raises(BackendRejection, match="Out of stock") as exc_info:
        unwrap_envelope(response, Any)
    assert exc_info.value.status_code == 400


def test_error_status_with_message_body_is_downgraded_to_rejection():
    response = _response(502, json={"message": "upstream unavailable"})
    with pytest.raises(BackendRejection, match="upstream unavailable"):
        unwrap_envelope(response, Any)


def test_error_status_without_message_propagates_http_error():
    with pytest.raises(httpx.HTTPStatusError):
        unwrap_envelope(_response(500, text="Internal Server Error"), Any)


@pytest.mark.parametrize("success", ["no", "true", 1, 0, None])
def test_non_boolean_success_flag_is_malformed(success):
    with pytest.raises(MalformedResponseError, match="Invalid response envelope"):
        unwrap_envelope(_response(json={"success": success, "data": 1}), Any)


def test_success_without_data_is_malformed():
    with pytest.raises(MalformedResponseError):
        unwrap_envelope(_response(json={"success": True}), Any)


def test_non_envelope_body_is_malformed():
    with pytest.raises(MalformedResponseError):
        unwrap_envelope(_response(json={"items": []}), Any)
    with pytest.raises(MalformedResponseError):
        unwrap_envelope(_response(text="<html>ok</html>"), Any)


def test_payload_not_matching_type_is_malformed():
    with pytest.raises(MalformedResponseError):
        unwrap_envelope(_response(json={"success": True, "data": {"name": "no id"}}), Product)


# ==================== status code ====================

def test_status_dialect_success_yields_whole_body():
    body = {"customToken": "abc", "extra": 1}
    assert unwrap_status(_response(201, json=body), Any) == body


def test_status_dialect_failure_uses_message():
    with pytest.raises(BackendRejection, match="^m$") as exc_info:
        unwrap_status(_response(404, json={"message": "m"}), Any)
    assert exc_info.value.status_code == 404


def test_status_dialect_failure_without_message_is_generic():
    with pytest.raises(BackendRejection) as exc_info:
        unwrap_status(_response(401, text="denied"), Any)
    assert exc_info.value.message == GENERIC_FAILURE_MESSAGE


def test_status_dialect_non_json_success_is_malformed():
    with pytest.raises(MalformedResponseError):
        unwrap_status(_response(200, text="not json"), Any)
