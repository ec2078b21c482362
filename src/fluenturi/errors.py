"""Exceptions raised while building or parsing URIs."""

from __future__ import annotations


class InvalidUriError(ValueError):
    """Raised when a URI cannot be built or parsed."""


class PasswordNotAllowedError(InvalidUriError):
    """Raised when a password is set without ``allow_password_in_userinfo``."""


class MalformedQueryError(InvalidUriError):
    """Raised when a query string contains a parameter without a key."""

    def __init__(self, message: str, token: str) -> None:
        super().__init__(message)
        self.token = token


__all__ = ["InvalidUriError", "PasswordNotAllowedError", "MalformedQueryError"]
