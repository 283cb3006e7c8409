"""Public API response contracts."""

from proposal_service.api.contracts.models import (
    ApiErrorResponse,
    HealthResponse,
    PaymentAmountsResponse,
    ProposalDocumentResponse,
    ResolvedProposalResponse,
)

__all__ = [
    "ApiErrorResponse",
    "HealthResponse",
    "PaymentAmountsResponse",
    "ProposalDocumentResponse",
    "ResolvedProposalResponse",
]
