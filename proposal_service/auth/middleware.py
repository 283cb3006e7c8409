"""HTTP middleware that enforces the internal API key on protected routes."""

from __future__ import annotations

from typing import Any, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from proposal_service.api.contracts import ApiErrorResponse
from proposal_service.api.errors import ApiErrorCode
from proposal_service.core.config import AuthConfig
from proposal_service.core.security import api_key_matches, extract_bearer_token

API_KEY_HEADER = "x-internal-api-key"
PUBLIC_PATHS = {"/api/health", "/docs", "/openapi.json"}


def _deny(status_code: int, error_code: ApiErrorCode, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiErrorResponse(error_code=error_code, message=message).model_dump(),
    )


def received_api_key(request: Request) -> str:
    """Read the key from ``X-Internal-API-Key`` or a bearer token."""
    header_key = (request.headers.get(API_KEY_HEADER) or "").strip()
    if header_key:
        return header_key
    return extract_bearer_token(request.headers.get("authorization", ""))


def create_auth_middleware(config: AuthConfig, *, logger: Any) -> Callable:
    """Create middleware function that checks the shared key when enabled."""

    async def auth_middleware(request: Request, call_next: Callable):
        """Reject requests without a matching internal API key."""
        if not config.enabled or request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        if not config.internal_api_key:
            logger.error(
                "auth_not_configured",
                extra={"path": request.url.path, "status_code": 503},
            )
            return _deny(
                503,
                ApiErrorCode.AUTH_NOT_CONFIGURED,
                "Internal API key is not configured",
            )

        received = received_api_key(request)
        if not received:
            return _deny(401, ApiErrorCode.AUTH_MISSING_KEY, "Missing API key")
        if not api_key_matches(received, config.internal_api_key):
            return _deny(401, ApiErrorCode.AUTH_INVALID_KEY, "Invalid API key")

        return await call_next(request)

    return auth_middleware
