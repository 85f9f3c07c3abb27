"""Bearer token check applied to protected routes."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

AUTHORIZATION_HEADER_KEY = "authorization"
AUTHORIZATION_TYPE_BEARER = "bearer"
AUTHORIZATION_PAYLOAD_KEY = "authorization_payload"


class AuthError(Exception):
    """The request could not be authorized."""

    status = HTTPStatus.UNAUTHORIZED


def authorize(header: str | None, token_maker: Any) -> Any:
    """Check an Authorization header value and return the token payload."""
    if not header:
        raise AuthError("authorization header is not provided")

    fields = header.split()
    if len(fields) < 2:
        raise AuthError("invalid authorization header format")

    authorization_type = fields[0].lower()
    if authorization_type != AUTHORIZATION_TYPE_BEARER:
        raise AuthError(f"unsupported authorization type {authorization_type}")

    try:
        return token_maker.verify_token(fields[1])
    except Exception as exc:
        raise AuthError(str(exc)) from exc