"""Pydantic API response models used in OpenAPI contracts."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ApiErrorResponse(BaseModel):
    """Stable error envelope for API responses."""

    error_code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Health check response payload."""

    status: Literal["ok"]


class PaymentAmountsResponse(BaseModel):
    """Resolved payment breakdown."""

    cash: float
    trade_in: float
    financing: float
    others: float
    total: float


class ProposalDocumentResponse(BaseModel):
    """Display values the PDF renderer receives, placeholders included."""

    intro_address: str
    city: str
    state: str
    broker_signature: str
    selling_broker_name: str
    total_value: str
    cash: str
    trade_in: str = ""
    financing: str = ""
    others: str = ""


class ResolvedProposalResponse(BaseModel):
    """Resolved proposal record plus its document view."""

    client_name: str
    client_cpf: str = ""
    broker_name: str = ""
    selling_broker_name: str
    total_value: float
    payment: PaymentAmountsResponse
    validity_days: int
    property_address: str
    property_city: str = ""
    property_state: str = ""
    document: ProposalDocumentResponse
