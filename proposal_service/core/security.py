"""Security primitives for the shared internal API key."""

from __future__ import annotations

import hmac


def extract_bearer_token(authorization: str) -> str:
    """Extract bearer token from authorization header value."""
    parts = (authorization or "").strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return ""
    return parts[1].strip()


def api_key_matches(received: str, expected: str) -> bool:
    """Compare API keys in constant time; blank keys never match."""
    received = (received or "").strip()
    expected = (expected or "").strip()
    if not received or not expected:
        return False
    return hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8"))
