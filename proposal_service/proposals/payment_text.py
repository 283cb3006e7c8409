"""Parse the legacy free-text ``payment_method`` description.

The legacy form sent lines such as ``"Dinheiro: R$ 10.000,50; Permuta: R$
200.000,00"``. Missing or unparseable segments count as zero.
"""

from __future__ import annotations

import re
from functools import lru_cache

CASH_LABEL = "Dinheiro"
TRADE_IN_LABEL = "Permuta"
FINANCING_LABEL = "Financiamento"
OTHERS_LABEL = "Outros"


@lru_cache(maxsize=None)
def _label_pattern(label: str) -> re.Pattern[str]:
    return re.compile(re.escape(label) + r"\s*:\s*R\$\s*([0-9.,]+)")


def parse_brl_amount(value: str) -> float:
    """Parse ``10.000,50`` style amounts, returning ``0`` when invalid."""
    normalized = (value or "").replace(".", "").replace(",", ".")
    try:
        return float(normalized)
    except ValueError:
        return 0.0


def extract_legacy_payment_value(source: str, label: str) -> float:
    """Return the amount following the first ``<label>: R$`` occurrence."""
    match = _label_pattern(label).search(source or "")
    if not match:
        return 0.0
    return parse_brl_amount(match.group(1))


def extract_legacy_payment_amounts(source: str) -> tuple[float, float, float, float]:
    """Return ``(cash, trade_in, financing, others)`` from legacy text."""
    return (
        extract_legacy_payment_value(source, CASH_LABEL),
        extract_legacy_payment_value(source, TRADE_IN_LABEL),
        extract_legacy_payment_value(source, FINANCING_LABEL),
        extract_legacy_payment_value(source, OTHERS_LABEL),
    )
