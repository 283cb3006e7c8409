"""Proposal pipeline: decode, resolve, validate, render."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from proposal_service.documents.renderer import ProposalPdfRenderer
from proposal_service.documents.view import ProposalDocumentView, build_document_view
from proposal_service.proposals.models import ResolvedProposal, parse_proposal_payload
from proposal_service.proposals.resolver import resolve_proposal
from proposal_service.proposals.validation import validate_resolved_proposal

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedProposal:
    """Validated record together with its display values."""

    proposal: ResolvedProposal
    document: ProposalDocumentView


class ProposalService:
    """Turn a raw request body into a validated proposal and its PDF."""

    def __init__(self, renderer: ProposalPdfRenderer | None = None) -> None:
        self._renderer = renderer or ProposalPdfRenderer()

    def prepare(self, data: Any) -> PreparedProposal:
        """Resolve and validate ``data``.

        Raises ``InvalidProposalPayload``, ``MalformedAddressPayload`` or
        ``ProposalValidationError``; all three are request rejections.
        """
        payload = parse_proposal_payload(data)
        proposal = resolve_proposal(payload)
        validate_resolved_proposal(proposal)
        document = build_document_view(proposal)
        LOGGER.info("proposal_resolved")
        return PreparedProposal(proposal=proposal, document=document)

    def generate_pdf(self, data: Any) -> tuple[PreparedProposal, bytes]:
        prepared = self.prepare(data)
        pdf_bytes = self._renderer.render(prepared.document)
        LOGGER.info("proposal_rendered", extra={"size_bytes": len(pdf_bytes)})
        return prepared, pdf_bytes
