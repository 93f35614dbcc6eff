"""
Inspection of the backend session token.

The backend signs its JWTs with a key this dashboard does not hold, so
tokens are decoded without signature verification. The result is only
used to skip the backend round-trip for tokens that are already expired;
identity always comes from ``/api/auth/me``.
"""
from __future__ import annotations

import time
from typing import Any

import jwt
from jwt import PyJWTError

ROLE_PREFIX = "ROLE_"


def decode_token(token: str) -> dict[str, Any] | None:
    if not token:
        return None
    try:
        payload = jwt.decode(
            token,
            options={"verify_signature": False, "verify_exp": False},
            algorithms=["HS256", "HS384", "HS512", "RS256"],
        )
    except PyJWTError:
        return None
    return payload if isinstance(payload, dict) else None


def is_token_expired(token: str, now: float | None = None) -> bool:
    """
    True when the token is unreadable or its ``exp`` claim is in the past.

    Tokens without an ``exp`` claim never expire on the client side.
    """
    payload = decode_token(token)
    if payload is None:
        return True
    exp = payload.get("exp")
    if exp is None:
        return False
    try:
        exp = float(exp)
    except (TypeError, ValueError):
        return True
    return exp <= (time.time() if now is None else now)


def normalize_role(role: str | None) -> str:
    """``ROLE_ADMIN`` -> ``admin``; empty roles default to ``user``."""
    if not role:
        return "user"
    role = str(role).strip()
    if role.upper().startswith(ROLE_PREFIX):
        role = role[len(ROLE_PREFIX):]
    return role.lower() or "user"


def has_role(roles: list[str] | None, role: str) -> bool:
    """True when ``roles`` holds ``role``, with or without the ``ROLE_`` prefix."""
    wanted = normalize_role(role)
    return any(normalize_role(r) == wanted for r in roles or [])


def display_name(username: str | None) -> str:
    """E-mail style usernames are shown without the domain."""
    username = (username or "").strip()
    return username.split("@", 1)[0] if "@" in username else username
