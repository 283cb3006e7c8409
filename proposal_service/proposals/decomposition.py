"""Split a free-text address line into street remainder, city and state.

Used only for the document's introductory sentence when city and/or state
were not supplied separately. Any trailing two-character segment is taken as
the state code; there is no lookup against real state codes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_UF_PREFIX = re.compile(r"^UF(?::|\s)")


@dataclass(frozen=True)
class AddressDecomposition:
    """Result of splitting an address line; blank parts stay blank."""

    street: str
    city: str
    state: str


def split_segments(address_line: str) -> list[str]:
    """Return the trimmed, non-empty comma-separated segments in order."""
    return [part.strip() for part in (address_line or "").split(",") if part.strip()]


def normalize_state_token(segment: str) -> str:
    """Upper-case a segment and strip a leading ``UF``/``UF:`` label."""
    token = segment.upper().strip(" -")
    token = _UF_PREFIX.sub("", token, count=1)
    return token.strip(" -")


def decompose_address(
    address_line: str, city: str = "", state: str = ""
) -> AddressDecomposition:
    """Infer missing city/state from the trailing segments of ``address_line``.

    Already-resolved ``city``/``state`` values are kept as given. Segments
    consumed as city or state are dropped from the street remainder; if
    nothing remains the whole line is returned as the street.
    """
    address_line = (address_line or "").strip()
    city = (city or "").strip()
    state = (state or "").strip()

    segments = split_segments(address_line)
    consumed: set[int] = set()
    state_index: int | None = None

    if not state:
        for index in range(len(segments) - 1, -1, -1):
            token = normalize_state_token(segments[index])
            if len(token) == 2:
                state = token
                state_index = index
                consumed.add(index)
                break

    if not city:
        city_index: int | None = None
        if state_index is not None and state_index > 0:
            city_index = state_index - 1
        elif len(segments) >= 2:
            city_index = len(segments) - 2
        if city_index is not None:
            city = segments[city_index]
            consumed.add(city_index)

    street = ", ".join(
        segment for index, segment in enumerate(segments) if index not in consumed
    )
    if not street:
        street = address_line

    return AddressDecomposition(street=street, city=city, state=state)
