"""Identifying which authentication provider issued an access token."""

from __future__ import annotations

import jwt

YOUAUTH_PROVIDER = "youauth"
YOUPLUS_AUTH_PROVIDER = "YouPlusService"

_PROVIDERS = frozenset({YOUAUTH_PROVIDER, YOUPLUS_AUTH_PROVIDER})


class InvalidTokenError(ValueError):
    """The access token is malformed or from an unknown provider."""


def get_token_issuer(access_token: str) -> str:
    """Return the ``iss`` claim of ``access_token`` without verifying it.

    Raises ``InvalidTokenError`` when the token cannot be decoded or has no
    string issuer.
    """
    try:
        claims = jwt.decode(access_token, options={"verify_signature": False})
    except jwt.PyJWTError as exc:
        raise InvalidTokenError(str(exc)) from exc
    issuer = claims.get("iss")
    if not isinstance(issuer, str):
        raise InvalidTokenError("token has no issuer")
    return issuer


def resolve_provider(access_token: str) -> str:
    """Return the provider that issued ``access_token``.

    Raises ``InvalidTokenError`` for tokens from any other issuer.
    """
    issuer = get_token_issuer(access_token)
    if issuer not in _PROVIDERS:
        raise InvalidTokenError("invalid token")
    return issuer