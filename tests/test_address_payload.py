from __future__ import annotations

import pytest

from proposal_service.proposals.address import (
    Address,
    MalformedAddressPayload,
    RawAddressText,
    StructuredAddress,
    classify_address_payload,
    decode_address_payload,
)


def test_absent_or_empty_address_decodes_blank() -> None:
    assert decode_address_payload(None) == Address()
    assert decode_address_payload("") == Address()
    assert decode_address_payload("   ").is_blank()
    assert decode_address_payload({}).is_blank()


def test_string_address_is_stored_as_raw_text() -> None:
    address = decode_address_payload("  Rua B, 45, Campinas, SP  ")

    assert address.raw == "Rua B, 45, Campinas, SP"
    assert address.street == ""
    assert address.line() == "Rua B, 45, Campinas, SP"


def test_object_address_synthesizes_line_and_uppercases_state() -> None:
    address = decode_address_payload(
        {"street": "Rua A", "number": "123", "city": "São Paulo", "state": "sp"}
    )

    assert address.state == "SP"
    assert address.raw == ""
    assert address.line() == "Rua A, Nº 123, São Paulo, SP"


def test_object_address_accepts_portuguese_keys_and_stringifies_numbers() -> None:
    address = decode_address_payload(
        {
            "logradouro": "Av. Paulista",
            "numero": 1578,
            "bairro": "Bela Vista",
            "localidade": "São Paulo",
            "uf": "sp",
            "complemento": "Apto 12",
        }
    )

    assert address.street == "Av. Paulista"
    assert address.number == "1578"
    assert address.neighborhood == "Bela Vista"
    assert address.complement == "Apto 12"
    assert (
        address.line()
        == "Av. Paulista, Nº 1578, Bela Vista, São Paulo, SP, Apto 12"
    )


def test_english_key_wins_and_blank_values_fall_through() -> None:
    address = decode_address_payload(
        {"street": "  ", "logradouro": "Rua Fallback", "city": "Campinas", "localidade": "Outra"}
    )

    assert address.street == "Rua Fallback"
    assert address.city == "Campinas"


def test_raw_alias_group_takes_precedence_for_line() -> None:
    address = decode_address_payload(
        {"full": "Rua Completa, 10, Santos, SP", "street": "Rua Completa", "city": "Santos"}
    )

    assert address.raw == "Rua Completa, 10, Santos, SP"
    assert address.city == "Santos"
    assert address.line() == "Rua Completa, 10, Santos, SP"


def test_classify_address_payload_variants() -> None:
    assert classify_address_payload(None) is None
    assert classify_address_payload("Rua X") == RawAddressText(text="Rua X")
    assert isinstance(classify_address_payload({"city": "X"}), StructuredAddress)


@pytest.mark.parametrize("value", [42, 4.2, True, ["Rua A"]])
def test_non_string_non_object_address_is_malformed(value: object) -> None:
    with pytest.raises(MalformedAddressPayload):
        decode_address_payload(value)


def test_object_address_reads_street_from_address_or_line1() -> None:
    from_address = decode_address_payload({"address": "Av. Brasil", "number": 10})
    from_line1 = decode_address_payload({"line1": "Rua das Flores", "city": "Campinas"})
    preferred = decode_address_payload({"line1": "Rua X", "logradouro": "Rua Y"})

    assert from_address.street == "Av. Brasil"
    assert from_address.line() == "Av. Brasil, Nº 10"
    assert from_line1.line() == "Rua das Flores, Campinas"
    assert preferred.street == "Rua Y"
