"""Parse concrete and mortar mix ratios such as ``"1:1.5:3 (M20)"``."""

from __future__ import annotations

import math

from probuild.models.estimate import MixRatio

DEFAULT_MIX = MixRatio(cement=1.0, sand=2.0, aggregate=4.0)


def _ratio_part(token: str | None) -> float:
    """Parse one colon-separated component; unparseable text reads as 0."""
    if token is None:
        return 0.0
    token = token.strip()
    if not token:
        return 0.0
    try:
        value = float(token)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def parse_mix_ratio(raw: str | float | None) -> MixRatio:
    """Parse the leading ``C:S:A`` portion of a mix ratio choice.

    Anything after the first space (a grade label like ``(M20)``) is
    ignored. A bare number is a legacy single ratio and reads as
    ``1 : value : 0``; an empty value yields the 1:2:4 default. Missing or
    malformed components read as 0, except cement which reads as 1.
    Never raises.
    """
    if isinstance(raw, bool):
        raw = float(raw)
    if isinstance(raw, int | float):
        sand = float(raw) if math.isfinite(raw) else 0.0
        return MixRatio(cement=1.0, sand=sand, aggregate=0.0)
    if not raw:
        return DEFAULT_MIX

    head = str(raw).split(" ")[0]
    parts = head.split(":")
    padded = [*parts, None, None, None]

    return MixRatio(
        cement=_ratio_part(padded[0]) or 1.0,
        sand=_ratio_part(padded[1]),
        aggregate=_ratio_part(padded[2]),
    )
