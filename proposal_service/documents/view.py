"""Display values for the proposal document.

Placeholders replace blank values here only; validation always runs on the
resolved record.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal

from proposal_service.proposals.decomposition import decompose_address
from proposal_service.proposals.models import ResolvedProposal
from proposal_service.proposals.resolver import SELLING_BROKER_PLACEHOLDER

ADDRESS_PLACEHOLDER = "______________________"
CITY_PLACEHOLDER = "____________"
STATE_PLACEHOLDER = "__"
BROKER_SIGNATURE_FALLBACK = "Proprietário/Corretor"
# Wide enough for any finite float.
MONEY_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def fallback(value: str, placeholder: str) -> str:
    """Return trimmed ``value`` or ``placeholder`` when blank."""
    trimmed = (value or "").strip()
    return trimmed or placeholder


def format_brl(value: float) -> str:
    """Format a number as Brazilian currency, e.g. ``R$ 1.234,50``."""
    amount = Decimal(str(abs(value))).quantize(Decimal("0.01"), context=MONEY_CONTEXT)
    integer, _, cents = f"{amount:.2f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    sign = "-" if value < 0 and amount else ""
    return f"R$ {sign}{grouped},{cents}"


@dataclass(frozen=True)
class ProposalDocumentView:
    """Strings and numbers the renderer lays out verbatim."""

    client_name: str
    client_cpf: str
    intro_address: str
    city: str
    state: str
    broker_signature: str
    selling_broker_name: str
    selling_broker_caption: str
    total_value: str
    cash: str
    trade_in: str
    financing: str
    others: str
    validity_days: int


def build_document_view(proposal: ResolvedProposal) -> ProposalDocumentView:
    """Decompose the address and substitute placeholders for display."""
    parts = decompose_address(
        proposal.property_address,
        city=proposal.property_city,
        state=proposal.property_state,
    )
    payment = proposal.payment
    selling_broker = proposal.selling_broker_name
    if selling_broker == SELLING_BROKER_PLACEHOLDER:
        selling_caption = selling_broker
    else:
        selling_caption = f"{selling_broker} ({SELLING_BROKER_PLACEHOLDER})"

    return ProposalDocumentView(
        client_name=proposal.client_name,
        client_cpf=proposal.client_cpf,
        intro_address=fallback(parts.street, ADDRESS_PLACEHOLDER),
        city=fallback(parts.city, CITY_PLACEHOLDER),
        state=fallback(parts.state, STATE_PLACEHOLDER),
        broker_signature=fallback(proposal.broker_name, BROKER_SIGNATURE_FALLBACK),
        selling_broker_name=selling_broker,
        selling_broker_caption=selling_caption,
        total_value=format_brl(proposal.total_value),
        cash=format_brl(payment.cash),
        trade_in=format_brl(payment.trade_in) if payment.trade_in > 0 else "",
        financing=format_brl(payment.financing) if payment.financing > 0 else "",
        others=format_brl(payment.others) if payment.others > 0 else "",
        validity_days=proposal.validity_days,
    )
