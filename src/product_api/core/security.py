# src/product_api/core/security.py
import secrets

from fastapi.security import APIKeyHeader

from product_api.domain.errors import AuthError

API_KEY_HEADER_NAME = "X-API-Key"

# auto_error=False: a missing header must produce our own AuthError envelope.
api_key_header = APIKeyHeader(name=API_KEY_HEADER_NAME, auto_error=False)


def check_api_key(provided: str | None, expected: str) -> AuthError | None:
    """
    Compares the supplied credential with the shared secret.
    Returns an AuthError when it is missing or wrong, None otherwise.
    """
    if not provided or not secrets.compare_digest(provided.encode(), expected.encode()):
        return AuthError("Invalid or missing API key")
    return None
