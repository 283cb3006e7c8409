"""Field-by-field resolution of competing legacy and modern values."""

from __future__ import annotations

from functools import cached_property

from proposal_service.proposals.aliasing import first_non_blank, first_positive
from proposal_service.proposals.models import (
    PaymentAmounts,
    RawProposalPayload,
    ResolvedProposal,
)
from proposal_service.proposals.payment_text import extract_legacy_payment_amounts

DEFAULT_VALIDITY_DAYS = 10
SELLING_BROKER_PLACEHOLDER = "Corretor Vendedor"


class FieldResolver:
    """Resolve each semantic field of a raw payload on demand.

    Modern fields win over legacy ones; see each method for the fallback used
    when every source is blank or zero. Nothing here raises, blank results
    are left for the validator.
    """

    def __init__(self, payload: RawProposalPayload) -> None:
        self._payload = payload

    @property
    def payload(self) -> RawProposalPayload:
        return self._payload

    def client_name(self) -> str:
        p = self._payload
        return first_non_blank(p.client_name, p.client_name_legacy)

    def client_cpf(self) -> str:
        p = self._payload
        return first_non_blank(p.client_cpf, p.client_cpf_legacy)

    def broker_name(self) -> str:
        p = self._payload
        return first_non_blank(p.broker_name, p.broker_name_legacy)

    def selling_broker_name(self) -> str:
        name = first_non_blank(self._payload.selling_broker_name)
        return name or SELLING_BROKER_PLACEHOLDER

    def validity_days(self) -> int:
        p = self._payload
        return int(
            first_positive(p.validity_days, p.validity_days_legacy)
            or DEFAULT_VALIDITY_DAYS
        )

    @cached_property
    def _payments(self) -> PaymentAmounts:
        payment = self._payload.payment
        amounts = PaymentAmounts(
            cash=first_positive(payment.cash, payment.dinheiro),
            trade_in=first_positive(payment.trade_in, payment.permuta),
            financing=first_positive(payment.financing, payment.financiamento),
            others=first_positive(payment.others, payment.outros),
        )
        if amounts.total > 0:
            return amounts

        legacy = first_non_blank(self._payload.payment_method_legacy)
        if not legacy:
            return amounts

        cash, trade_in, financing, others = extract_legacy_payment_amounts(legacy)
        return PaymentAmounts(
            cash=cash, trade_in=trade_in, financing=financing, others=others
        )

    def payments(self) -> PaymentAmounts:
        return self._payments

    def total_value(self) -> float:
        p = self._payload
        total = first_positive(p.total_value, p.total_value_legacy)
        return total or self._payments.total

    def property_address(self) -> str:
        address = self._payload.property_address
        return first_non_blank(
            address.raw,
            self._payload.property_address_legacy,
            address.composed_line(),
        )

    def property_city(self) -> str:
        return first_non_blank(
            self._payload.property_address.city, self._payload.property_city
        )

    def property_state(self) -> str:
        return first_non_blank(
            self._payload.property_address.state, self._payload.property_state
        ).upper()

    def resolve(self) -> ResolvedProposal:
        return ResolvedProposal(
            client_name=self.client_name(),
            client_cpf=self.client_cpf(),
            broker_name=self.broker_name(),
            selling_broker_name=self.selling_broker_name(),
            total_value=float(self.total_value()),
            payment=self.payments(),
            validity_days=self.validity_days(),
            property_address=self.property_address(),
            property_city=self.property_city(),
            property_state=self.property_state(),
        )


def resolve_proposal(payload: RawProposalPayload) -> ResolvedProposal:
    """Resolve every field of ``payload`` into a :class:`ResolvedProposal`."""
    return FieldResolver(payload).resolve()
