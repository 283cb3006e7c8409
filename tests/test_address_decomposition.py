from __future__ import annotations

from proposal_service.proposals.decomposition import (
    AddressDecomposition,
    decompose_address,
    normalize_state_token,
    split_segments,
)
from proposal_service.proposals.models import parse_proposal_payload
from proposal_service.proposals.resolver import resolve_proposal


def test_free_text_address_is_split_into_street_city_state() -> None:
    parts = decompose_address("Rua B, 45, Bairro C, Campinas, SP")

    assert parts == AddressDecomposition(
        street="Rua B, 45, Bairro C", city="Campinas", state="SP"
    )


def test_uf_label_and_dashes_are_stripped_from_state_token() -> None:
    assert normalize_state_token(" UF: sp ") == "SP"
    assert normalize_state_token("uf rj") == "RJ"
    assert normalize_state_token("- MG -") == "MG"

    parts = decompose_address("Av. Brasil, 500, Belo Horizonte, UF: mg")
    assert parts.state == "MG"
    assert parts.city == "Belo Horizonte"
    assert parts.street == "Av. Brasil, 500"


def test_state_scan_runs_from_the_end() -> None:
    parts = decompose_address("Rua X, 12, Centro, Niterói, RJ, Bloco 3")

    assert parts.state == "RJ"
    assert parts.city == "Niterói"
    assert parts.street == "Rua X, 12, Centro, Bloco 3"


def test_city_falls_back_to_second_to_last_segment_without_state_segment() -> None:
    parts = decompose_address("Rua Longa, 100, Campinas, Sao Paulo")

    assert parts.state == ""
    assert parts.city == "Campinas"
    assert parts.street == "Rua Longa, 100, Sao Paulo"


def test_resolved_city_and_state_are_kept() -> None:
    parts = decompose_address(
        "Rua A, Nº 123, São Paulo, SP", city="São Paulo", state="SP"
    )

    assert parts == AddressDecomposition(
        street="Rua A, Nº 123, São Paulo, SP", city="São Paulo", state="SP"
    )


def test_only_missing_component_is_inferred() -> None:
    parts = decompose_address("Rua C, 9, Santos, SP", city="Santos")

    assert parts.state == "SP"
    assert parts.city == "Santos"
    assert parts.street == "Rua C, 9, Santos"


def test_two_character_segments_are_accepted_permissively() -> None:
    parts = decompose_address("Rua D, 10")

    assert parts.state == "10"
    assert parts.city == "Rua D"
    assert parts.street == "Rua D, 10"


def test_single_state_segment_keeps_full_line_as_street() -> None:
    parts = decompose_address("SP")

    assert parts == AddressDecomposition(street="SP", city="", state="SP")


def test_blank_address_stays_blank() -> None:
    assert decompose_address("   ") == AddressDecomposition(street="", city="", state="")
    assert split_segments(" , ,a, ") == ["a"]


def test_state_at_first_segment_falls_back_to_second_to_last_city() -> None:
    parts = decompose_address("SP, Rua Sem Cidade")

    assert parts.state == "SP"
    assert parts.city == "SP"
    assert parts.street == "Rua Sem Cidade"


def test_resolving_serialized_record_keeps_city_and_state() -> None:
    first = resolve_proposal(
        parse_proposal_payload(
            {
                "clientName": "Maria",
                "propertyAddress": {
                    "street": "Rua A",
                    "number": "123",
                    "city": "São Paulo",
                    "state": "sp",
                },
                "totalValue": 100.0,
                "payment": {"cash": 100.0},
            }
        )
    )
    second = resolve_proposal(parse_proposal_payload(first.as_payload()))

    assert second == first
    assert decompose_address(
        second.property_address, second.property_city, second.property_state
    ) == decompose_address(
        first.property_address, first.property_city, first.property_state
    )


def test_heuristic_output_is_stable_when_fed_back() -> None:
    line = "Rua B, 45, Bairro C, Campinas, SP"
    first = decompose_address(line)
    again = decompose_address(line, city=first.city, state=first.state)

    assert (again.city, again.state) == (first.city, first.state)
