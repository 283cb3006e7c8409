"""Validation of a resolved proposal before it is rendered."""

from __future__ import annotations

import math

from proposal_service.proposals.models import ResolvedProposal

# 100.01 - 100.00 is slightly above 0.01 in binary floats.
PAYMENT_TOLERANCE = 0.01 + 1e-9


class ProposalValidationError(Exception):
    """Resolved proposal failed one of the required checks."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(reason)


def validate_resolved_proposal(proposal: ResolvedProposal) -> None:
    """Raise :class:`ProposalValidationError` on the first failing check.

    Amounts that overflow to infinity fail the value or payment check.
    """
    if not proposal.client_name.strip():
        raise ProposalValidationError("client_name", "client_name is required")
    if not proposal.property_address.strip():
        raise ProposalValidationError(
            "property_address", "property_address is required"
        )
    if not math.isfinite(proposal.total_value) or proposal.total_value <= 0:
        raise ProposalValidationError("value", "value must be greater than zero")
    if proposal.validity_days <= 0:
        raise ProposalValidationError(
            "validity_days", "validity_days must be greater than zero"
        )

    payment_sum = proposal.payment.total
    if payment_sum <= 0:
        raise ProposalValidationError("payment", "payment breakdown is required")
    if (
        not math.isfinite(payment_sum)
        or abs(payment_sum - proposal.total_value) > PAYMENT_TOLERANCE
    ):
        raise ProposalValidationError(
            "payment", "payment breakdown must match total value"
        )
