"""Formatting helpers for estimation output.

Reports show whole purchase units (bags, cft, kg rounded up) and the
cost in taka.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from probuild.models.estimate import EstimationResult

CURRENCY_SYMBOL = "৳"


def format_currency(amount: float) -> str:
    """Format an amount in taka.

    - Amounts >= 10,000: no paisa, with comma separators (e.g., '৳ 12,345')
    - Amounts < 10,000: with paisa (e.g., '৳ 4,570.00')
    """
    if amount >= 10_000:
        return f"{CURRENCY_SYMBOL} {amount:,.0f}"
    return f"{CURRENCY_SYMBOL} {amount:,.2f}"


def purchase_quantities(result: EstimationResult) -> dict[str, int]:
    """Whole units to buy for each material."""
    return {
        "cement_bags": math.ceil(result.cement_bags),
        "sand_cft": math.ceil(result.sand_cft),
        "aggregate_cft": math.ceil(result.aggregate_cft),
        "steel_kg": math.ceil(result.steel_kg),
    }
