"""Decoding of the ``propertyAddress`` field into a normalized address.

The field arrives either as a bare string or as an object whose keys may use
English or Brazilian (ViaCEP-style) spellings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from proposal_service.proposals.aliasing import clean_text

STREET_KEYS = ("street", "logradouro", "address", "line1")
NUMBER_KEYS = ("number", "numero")
NEIGHBORHOOD_KEYS = ("neighborhood", "bairro")
CITY_KEYS = ("city", "localidade")
STATE_KEYS = ("state", "uf")
COMPLEMENT_KEYS = ("complement", "complemento")
RAW_KEYS = ("formatted", "full", "raw")

NUMBER_PREFIX = "Nº "


class MalformedAddressPayload(Exception):
    """Address value is neither a string, an object nor absent."""

    def __init__(self, value: Any) -> None:
        self.value_type = type(value).__name__
        super().__init__(
            f"propertyAddress must be a string or an object, got {self.value_type}"
        )


@dataclass(frozen=True)
class Address:
    """Normalized property address."""

    raw: str = ""
    street: str = ""
    number: str = ""
    neighborhood: str = ""
    city: str = ""
    state: str = ""
    complement: str = ""

    def is_blank(self) -> bool:
        return not any(
            [
                self.raw,
                self.street,
                self.number,
                self.neighborhood,
                self.city,
                self.state,
                self.complement,
            ]
        )

    def composed_line(self) -> str:
        """Join the non-blank components in display order."""
        number = f"{NUMBER_PREFIX}{self.number.strip()}" if self.number.strip() else ""
        parts = [
            self.street,
            number,
            self.neighborhood,
            self.city,
            self.state,
            self.complement,
        ]
        return ", ".join(part.strip() for part in parts if part and part.strip())

    def line(self) -> str:
        """Return the single display line; raw text wins over components."""
        return self.raw.strip() or self.composed_line()


@dataclass(frozen=True)
class RawAddressText:
    """Address sent as a bare string."""

    text: str


@dataclass(frozen=True)
class StructuredAddress:
    """Address sent as a JSON object."""

    fields: Mapping[str, Any]


AddressPayload = RawAddressText | StructuredAddress | None


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return clean_text(value)


def classify_address_payload(value: Any) -> AddressPayload:
    """Sort the raw JSON value into one of the accepted address shapes."""
    if value is None:
        return None
    if isinstance(value, str):
        if not value.strip():
            return None
        return RawAddressText(text=value.strip())
    if isinstance(value, Mapping):
        return StructuredAddress(fields=value)
    raise MalformedAddressPayload(value)


def read_first(fields: Mapping[str, Any], keys: tuple[str, ...]) -> str:
    """Return the first key present with a non-null, non-blank value."""
    for key in keys:
        value = fields.get(key)
        if value is None:
            continue
        parsed = _stringify(value)
        if parsed:
            return parsed
    return ""


def decode_address_payload(value: Any) -> Address:
    """Decode the ``propertyAddress`` JSON value into an :class:`Address`."""
    if isinstance(value, Address):
        return value

    payload = classify_address_payload(value)
    if payload is None:
        return Address()
    if isinstance(payload, RawAddressText):
        return Address(raw=payload.text)

    fields = payload.fields
    return Address(
        raw=read_first(fields, RAW_KEYS),
        street=read_first(fields, STREET_KEYS),
        number=read_first(fields, NUMBER_KEYS),
        neighborhood=read_first(fields, NEIGHBORHOOD_KEYS),
        city=read_first(fields, CITY_KEYS),
        state=read_first(fields, STATE_KEYS).upper(),
        complement=read_first(fields, COMPLEMENT_KEYS),
    )
