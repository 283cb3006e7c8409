from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from proposal_service.api.contracts import HealthResponse
from proposal_service.api.http_setup import (
    register_exception_handlers,
    register_http_middleware,
)
from proposal_service.auth.middleware import create_auth_middleware
from proposal_service.core.config import AppConfig
from proposal_service.core.logging import setup_logging
from proposal_service.proposals.router import create_proposals_router
from proposal_service.proposals.service import ProposalService

load_dotenv()
APP_CONFIG = AppConfig.from_env()
setup_logging(APP_CONFIG.logging.level)
LOGGER = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    *,
    service: ProposalService | None = None,
) -> FastAPI:
    config = config or APP_CONFIG
    app = FastAPI(title="Proposal PDF API", version="1.0.0")
    if config.security.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.security.cors_allowed_origins,
            allow_credentials=False,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Authorization", "Content-Type", "X-Internal-API-Key"],
        )
    register_http_middleware(app, config=config, logger=LOGGER)
    register_exception_handlers(app, logger=LOGGER)

    if config.auth.enabled and not config.auth.internal_api_key:
        LOGGER.error("INTERNAL_API_KEY must be configured when AUTH_ENABLED is on")
    app.middleware("http")(create_auth_middleware(config.auth, logger=LOGGER))

    @app.get("/api/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    app.include_router(create_proposals_router(service=service or ProposalService()))
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=APP_CONFIG.server.host, port=APP_CONFIG.server.port)
