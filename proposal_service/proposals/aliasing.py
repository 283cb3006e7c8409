"""First-present / first-positive resolution over prioritized candidates.

Argument order is source priority: the modern field is passed before its
legacy counterpart, and callers rely on that tie-break.
"""

from __future__ import annotations

from typing import Any


def clean_text(value: Any) -> str:
    """Convert optional value to trimmed string."""
    if value is None:
        return ""
    return str(value).strip()


def first_non_blank(*candidates: Any) -> str:
    """Return the first candidate that is non-empty after trimming."""
    for candidate in candidates:
        trimmed = clean_text(candidate)
        if trimmed:
            return trimmed
    return ""


def first_positive(*candidates: float | int | None) -> float:
    """Return the first candidate strictly greater than zero, else ``0``."""
    for candidate in candidates:
        if candidate is not None and candidate > 0:
            return candidate
    return 0
