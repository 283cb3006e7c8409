"""FastAPI router for proposal endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import Response

from proposal_service.api.contracts import (
    ApiErrorResponse,
    PaymentAmountsResponse,
    ProposalDocumentResponse,
    ResolvedProposalResponse,
)
from proposal_service.proposals.service import PreparedProposal, ProposalService

PDF_FILENAME = "proposta_compra_imovel.pdf"
PROPOSAL_BODY = Body(..., description="Legacy and/or structured proposal payload")

_REJECTIONS: dict[int | str, dict[str, Any]] = {
    400: {"model": ApiErrorResponse},
    401: {"model": ApiErrorResponse},
    413: {"model": ApiErrorResponse},
    503: {"model": ApiErrorResponse},
}


def to_resolved_response(prepared: PreparedProposal) -> ResolvedProposalResponse:
    """Map a prepared proposal onto its JSON contract."""
    proposal = prepared.proposal
    document = prepared.document
    payment = proposal.payment
    return ResolvedProposalResponse(
        client_name=proposal.client_name,
        client_cpf=proposal.client_cpf,
        broker_name=proposal.broker_name,
        selling_broker_name=proposal.selling_broker_name,
        total_value=proposal.total_value,
        payment=PaymentAmountsResponse(
            cash=payment.cash,
            trade_in=payment.trade_in,
            financing=payment.financing,
            others=payment.others,
            total=payment.total,
        ),
        validity_days=proposal.validity_days,
        property_address=proposal.property_address,
        property_city=proposal.property_city,
        property_state=proposal.property_state,
        document=ProposalDocumentResponse(
            intro_address=document.intro_address,
            city=document.city,
            state=document.state,
            broker_signature=document.broker_signature,
            selling_broker_name=document.selling_broker_name,
            total_value=document.total_value,
            cash=document.cash,
            trade_in=document.trade_in,
            financing=document.financing,
            others=document.others,
        ),
    )


class ProposalsRouter:
    """Router factory wrapper for proposal endpoints."""

    def __init__(self, service: ProposalService) -> None:
        """Store service dependency used by handlers."""
        self._service = service

    def build(self) -> APIRouter:
        """Create configured API router."""
        router = APIRouter(tags=["proposals"])

        pdf_responses: dict[int | str, dict[str, Any]] = {
            200: {"content": {"application/pdf": {}}},
            500: {"model": ApiErrorResponse},
            **_REJECTIONS,
        }

        @router.post(
            "/generate-proposal",
            response_class=Response,
            responses=pdf_responses,
        )
        @router.post(
            "/api/proposals/pdf",
            response_class=Response,
            responses=pdf_responses,
        )
        def generate_proposal(payload: Any = PROPOSAL_BODY) -> Response:
            """Render the purchase proposal PDF."""
            _, pdf_bytes = self._service.generate_pdf(payload)
            return Response(
                content=pdf_bytes,
                media_type="application/pdf",
                headers={
                    "Content-Disposition": f'attachment; filename="{PDF_FILENAME}"'
                },
            )

        @router.post(
            "/api/proposals/resolve",
            response_model=ResolvedProposalResponse,
            responses=_REJECTIONS,
        )
        def resolve_proposal(payload: Any = PROPOSAL_BODY) -> ResolvedProposalResponse:
            """Return the resolved record and display values without rendering."""
            return to_resolved_response(self._service.prepare(payload))

        return router


def create_proposals_router(service: ProposalService) -> APIRouter:
    """Create router for proposal endpoints."""
    return ProposalsRouter(service=service).build()
