import json

import pytest
from prometheus_client import REGISTRY

from product_api.api.errors import translate
from product_api.core.security import check_api_key
from product_api.domain.errors import AuthError, NotFoundError, ValidationError


def _body(exc: Exception) -> tuple[int, dict]:
    response = translate(exc)
    return response.status_code, json.loads(response.body)


@pytest.mark.parametrize(
    ("exc", "status_code", "name"),
    [
        (NotFoundError("Product not found"), 404, "NotFoundError"),
        (ValidationError("bad payload"), 400, "ValidationError"),
        (AuthError("Invalid or missing API key"), 401, "AuthError"),
    ],
)
def test_translate_known_errors(exc: Exception, status_code: int, name: str) -> None:
    code, body = _body(exc)
    assert code == status_code
    assert body == {"error": {"name": name, "message": str(exc), "statusCode": status_code}}


def test_translate_unknown_error_defaults_to_500() -> None:
    code, body = _body(RuntimeError("boom"))
    assert code == 500
    assert body == {"error": {"name": "Error", "message": "boom", "statusCode": 500}}


def test_translate_unknown_error_without_message() -> None:
    _, body = _body(RuntimeError())
    assert body["error"]["message"] == "Internal Server Error"


def test_translate_counts_errors_by_name() -> None:
    def count() -> float:
        return REGISTRY.get_sample_value("api_errors_total", {"name": "AuthError"}) or 0.0

    initial = count()
    translate(AuthError("nope"))
    assert count() == initial + 1


# ---------------------------------------------------------------------------
# Shared-secret check
# ---------------------------------------------------------------------------


def test_check_api_key_accepts_exact_match() -> None:
    assert check_api_key("s3cret", "s3cret") is None


@pytest.mark.parametrize("provided", [None, "", "S3CRET", "s3cret ", "wrong", "säcret"])
def test_check_api_key_rejects(provided: str | None) -> None:
    error = check_api_key(provided, "s3cret")
    assert isinstance(error, AuthError)
    assert error.status_code == 401
    assert error.message == "Invalid or missing API key"
