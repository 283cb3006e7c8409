"""Raw and resolved proposal records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from proposal_service.proposals.address import Address, decode_address_payload


class InvalidProposalPayload(Exception):
    """Request body does not deserialize into a proposal payload."""


class PaymentBreakdown(BaseModel):
    """Structured ``payment`` object; English and Portuguese keys per amount."""

    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    cash: float | None = None
    trade_in: float | None = Field(default=None, alias="tradeIn")
    financing: float | None = None
    others: float | None = None
    dinheiro: float | None = None
    permuta: float | None = None
    financiamento: float | None = None
    outros: float | None = None


class RawProposalPayload(BaseModel):
    """As-received proposal body carrying both the legacy and modern fields.

    Attributes suffixed ``_legacy`` map the original flat schema; the rest map
    the structured schema. Fields are matched by JSON name only.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, allow_inf_nan=False)

    client_name_legacy: str | None = Field(default=None, alias="client_name")
    client_cpf_legacy: str | None = Field(default=None, alias="client_cpf")
    property_address_legacy: str | None = Field(default=None, alias="property_address")
    broker_name_legacy: str | None = Field(default=None, alias="broker_name")
    total_value_legacy: float | None = Field(default=None, alias="value")
    payment_method_legacy: str | None = Field(default=None, alias="payment_method")
    validity_days_legacy: int | None = Field(default=None, alias="validity_days")

    client_name: str | None = Field(default=None, alias="clientName")
    client_cpf: str | None = Field(default=None, alias="clientCpf")
    property_address: Address = Field(default_factory=Address, alias="propertyAddress")
    broker_name: str | None = Field(default=None, alias="brokerName")
    selling_broker_name: str | None = Field(default=None, alias="sellingBrokerName")
    total_value: float | None = Field(default=None, alias="totalValue")
    payment: PaymentBreakdown = Field(default_factory=PaymentBreakdown)
    validity_days: int | None = Field(default=None, alias="validadeDias")

    property_city: str | None = Field(default=None, alias="propertyCity")
    property_state: str | None = Field(default=None, alias="propertyState")

    @field_validator("property_address", mode="before")
    @classmethod
    def decode_address(cls, value: Any) -> Address:
        return decode_address_payload(value)

    @field_validator("payment", mode="before")
    @classmethod
    def null_payment_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value


def parse_proposal_payload(data: Any) -> RawProposalPayload:
    """Build a :class:`RawProposalPayload` from a deserialized JSON body.

    ``MalformedAddressPayload`` propagates unchanged; any other shape problem
    is reported as :class:`InvalidProposalPayload`.
    """
    if not isinstance(data, Mapping):
        raise InvalidProposalPayload("Proposal payload must be a JSON object.")
    try:
        return RawProposalPayload.model_validate(dict(data))
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) for error in exc.errors()}
        )
        raise InvalidProposalPayload(
            f"Invalid proposal payload fields: {', '.join(fields)}"
        ) from exc


@dataclass(frozen=True)
class PaymentAmounts:
    """Resolved payment components."""

    cash: float = 0.0
    trade_in: float = 0.0
    financing: float = 0.0
    others: float = 0.0

    @property
    def total(self) -> float:
        return self.cash + self.trade_in + self.financing + self.others


@dataclass(frozen=True)
class ResolvedProposal:
    """One authoritative value per semantic field, before placeholders."""

    client_name: str
    client_cpf: str
    broker_name: str
    selling_broker_name: str
    total_value: float
    payment: PaymentAmounts
    validity_days: int
    property_address: str
    property_city: str
    property_state: str

    def as_payload(self) -> dict[str, Any]:
        """Serialize back into the request schema.

        The address line goes into the legacy flat field, so resolving the
        result again yields the same record.
        """
        return {
            "clientName": self.client_name,
            "clientCpf": self.client_cpf,
            "brokerName": self.broker_name,
            "sellingBrokerName": self.selling_broker_name,
            "totalValue": self.total_value,
            "payment": {
                "cash": self.payment.cash,
                "tradeIn": self.payment.trade_in,
                "financing": self.payment.financing,
                "others": self.payment.others,
            },
            "validadeDias": self.validity_days,
            "property_address": self.property_address,
            "propertyCity": self.property_city,
            "propertyState": self.property_state,
        }
