"""Shared API error types and helpers."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ApiErrorCode(StrEnum):
    """Machine-readable API error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    MALFORMED_ADDRESS_PAYLOAD = "MALFORMED_ADDRESS_PAYLOAD"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    AUTH_MISSING_KEY = "AUTH_MISSING_KEY"
    AUTH_INVALID_KEY = "AUTH_INVALID_KEY"
    AUTH_NOT_CONFIGURED = "AUTH_NOT_CONFIGURED"
    REQUEST_TOO_LARGE = "REQUEST_TOO_LARGE"
    PDF_RENDER_FAILED = "PDF_RENDER_FAILED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


def to_error_payload(detail: Any, status_code: int) -> dict[str, str]:
    """Normalize HTTP exception detail into stable error payload."""
    if isinstance(detail, dict):
        error_code = str(detail.get("error_code") or f"HTTP_{status_code}")
        message = str(detail.get("message") or detail.get("detail") or "HTTP error")
        return {"error_code": error_code, "message": message}
    return {
        "error_code": f"HTTP_{status_code}",
        "message": str(detail or "HTTP error"),
    }
