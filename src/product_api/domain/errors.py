# src/product_api/domain/errors.py
from __future__ import annotations


class ApiError(Exception):
    """
    Base class for every failure that maps to a client-facing HTTP error.

    ``name`` and ``status_code`` end up verbatim in the error envelope.
    """

    name = "Error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ApiError):
    name = "NotFoundError"
    status_code = 404


class ValidationError(ApiError):
    name = "ValidationError"
    status_code = 400


class AuthError(ApiError):
    name = "AuthError"
    status_code = 401
