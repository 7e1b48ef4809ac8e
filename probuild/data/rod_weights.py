"""Unit weights of deformed reinforcement bars.

Weights are kilograms per linear foot for the nominal diameters stocked
by local suppliers. Untabulated diameters use the D²/533 rule of thumb
(the metric D²/162 expressed per foot).
"""

from __future__ import annotations

from collections.abc import Mapping

# Nominal diameter (mm) -> kg per foot.
ROD_WEIGHTS: dict[int, float] = {
    8: 0.12,
    10: 0.19,
    12: 0.27,
    16: 0.48,
    20: 0.75,
    22: 0.90,
    25: 1.17,
    32: 2.47,
}

ROD_WEIGHT_DIVISOR = 533.0


def rod_weight(diameter_mm: float, weights: Mapping[int, float] | None = None) -> float:
    """Return the unit weight (kg/ft) of a bar of the given diameter.

    Tabulated diameters return the table value exactly; anything else
    falls back to ``diameter² / 533``.
    """
    table = ROD_WEIGHTS if weights is None else weights
    tabulated = table.get(diameter_mm)  # type: ignore[call-overload]
    if tabulated:
        return tabulated
    return (diameter_mm * diameter_mm) / ROD_WEIGHT_DIVISOR
