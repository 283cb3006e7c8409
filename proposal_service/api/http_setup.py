"""HTTP middleware and exception handler wiring for FastAPI apps."""

from __future__ import annotations

import uuid
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from proposal_service.api.contracts import ApiErrorResponse
from proposal_service.api.errors import ApiErrorCode, to_error_payload
from proposal_service.core.config import AppConfig
from proposal_service.core.logging import set_correlation_id
from proposal_service.documents.renderer import ProposalRenderError
from proposal_service.proposals.address import MalformedAddressPayload
from proposal_service.proposals.models import InvalidProposalPayload
from proposal_service.proposals.validation import ProposalValidationError


def _error_response(
    status_code: int, error_code: ApiErrorCode, message: str
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ApiErrorResponse(error_code=error_code, message=message).model_dump(),
    )


def register_http_middleware(app: FastAPI, *, config: AppConfig, logger: Any) -> None:
    """Attach common security and observability middleware to an app."""

    @app.middleware("http")
    async def request_size_limit_middleware(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length:
            try:
                parsed_length = int(content_length)
            except ValueError:
                parsed_length = 0
            if parsed_length > config.security.request_max_bytes:
                return _error_response(
                    413,
                    ApiErrorCode.REQUEST_TOO_LARGE,
                    "Request size exceeds configured limit "
                    f"({config.security.request_max_bytes} bytes).",
                )
        return await call_next(request)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        correlation_id = (
            request.headers.get("x-request-id")
            or request.headers.get("x-correlation-id")
            or uuid.uuid4().hex
        )
        set_correlation_id(correlation_id)
        response = await call_next(request)
        response.headers["X-Request-ID"] = correlation_id
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        response.headers["Content-Security-Policy"] = (
            "default-src 'none'; frame-ancestors 'none'; base-uri 'none'"
        )
        response.headers["Permissions-Policy"] = (
            "geolocation=(), microphone=(), camera=()"
        )
        logger.info(
            "request_completed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
            },
        )
        return response


def register_exception_handlers(app: FastAPI, *, logger: Any) -> None:
    """Attach API exception handlers that return stable error contracts."""

    def _reject(
        request: Request,
        error_code: ApiErrorCode,
        message: str,
        field: str = "",
    ) -> JSONResponse:
        logger.warning(
            "proposal_rejected",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": 400,
                "error_code": str(error_code),
                "field": field,
            },
        )
        return _error_response(400, error_code, message)

    @app.exception_handler(ProposalValidationError)
    async def handle_proposal_validation(
        request: Request, exc: ProposalValidationError
    ) -> JSONResponse:
        return _reject(request, ApiErrorCode.VALIDATION_ERROR, exc.reason, exc.field)

    @app.exception_handler(MalformedAddressPayload)
    async def handle_malformed_address(
        request: Request, exc: MalformedAddressPayload
    ) -> JSONResponse:
        return _reject(
            request,
            ApiErrorCode.MALFORMED_ADDRESS_PAYLOAD,
            str(exc),
            "propertyAddress",
        )

    @app.exception_handler(InvalidProposalPayload)
    async def handle_invalid_payload(
        request: Request, exc: InvalidProposalPayload
    ) -> JSONResponse:
        return _reject(request, ApiErrorCode.INVALID_PAYLOAD, str(exc))

    @app.exception_handler(ProposalRenderError)
    async def handle_render_error(
        request: Request, exc: ProposalRenderError
    ) -> JSONResponse:
        logger.exception(
            "proposal_render_failed",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": 500,
            },
        )
        return _error_response(
            500, ApiErrorCode.PDF_RENDER_FAILED, "Failed to generate PDF."
        )

    @app.exception_handler(HTTPException)
    async def handle_http_exception(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        payload = to_error_payload(exc.detail, exc.status_code)
        logger.warning(
            "http_exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
            },
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=ApiErrorResponse(**payload).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_exception(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        return _reject(request, ApiErrorCode.INVALID_PAYLOAD, "Invalid payload.")

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "unexpected_exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": 500,
            },
        )
        return _error_response(
            500,
            ApiErrorCode.INTERNAL_SERVER_ERROR,
            str(exc) or "Internal server error",
        )
