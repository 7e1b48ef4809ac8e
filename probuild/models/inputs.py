"""Input schema and typed input values for element estimation.

Raw form values arrive as a ``{key: number | str}`` mapping. Each element
type declares its fields in the catalog; :class:`ElementInputs` resolves a
raw mapping against that schema so formulas read typed values and never
have to guess whether a string is a number, a bar diameter, or a mix ratio.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from pydantic import BaseModel, Field

from probuild.models.enums import ElementType, FieldKind

logger = logging.getLogger(__name__)

RawValue = float | int | str
RawInputs = dict[str, RawValue]

MIX_RATIO_KEY = "mix_ratio"

# Leading decimal number, the way a browser's parseFloat reads "20 mm" as 20.
_LEADING_NUMBER = re.compile(r"^\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def coerce_number(value: Any) -> float:
    """Coerce a raw input value to a finite float.

    Numbers pass through, numeric-looking strings are parsed from their
    leading number, and everything else (ratio strings containing ``:``,
    free text, NaN, infinities, ``None``) becomes 0.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        if ":" in value:
            return 0.0
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return 0.0
        number = float(match.group(0))
    else:
        return 0.0
    return number if math.isfinite(number) else 0.0


class InputField(BaseModel):
    """One entry of an element type's input form."""

    key: str
    label: str
    unit: str | None = None
    default: float | str
    kind: FieldKind = FieldKind.NUMBER
    options: list[str] = Field(default_factory=list)
    highlight_key: str | None = None
    full_width: bool = False


class ElementInputs:
    """Typed view over the inputs of one element.

    Numeric fields (including bar-diameter selects) are stored as floats;
    the mix ratio choice keeps its raw value for the ratio parser. Keys the
    element type does not declare are dropped.
    """

    def __init__(
        self,
        element_type: ElementType,
        numbers: dict[str, float],
        mix_ratio: RawValue | None = None,
    ) -> None:
        self.element_type = element_type
        self._numbers = numbers
        self.mix_ratio = mix_ratio

    @classmethod
    def from_raw(cls, element_type: ElementType, raw: dict[str, Any]) -> ElementInputs:
        """Resolve a raw form mapping against the element type's field catalog."""
        from probuild.data.catalog import ELEMENT_FIELDS

        fields = {f.key: f for f in ELEMENT_FIELDS[element_type]}
        numbers: dict[str, float] = {}
        mix_ratio: RawValue | None = None

        for key, value in raw.items():
            field = fields.get(key)
            if field is None:
                logger.debug("Ignoring unrecognised input %r for %s", key, element_type)
                continue
            if key == MIX_RATIO_KEY:
                mix_ratio = value
                continue
            number = coerce_number(value)
            if number == 0.0 and value not in (0, "0"):
                logger.debug("Input %r=%r for %s coerced to 0", key, value, element_type)
            numbers[key] = number

        return cls(element_type, numbers, mix_ratio)

    def number(self, key: str, fallback: float = 0.0) -> float:
        """Return a numeric input, or ``fallback`` when it is missing or zero."""
        return self._numbers.get(key) or fallback

    def positive(self, key: str, fallback: float) -> float:
        """Return a numeric input, or ``fallback`` unless it is strictly positive.

        Used for spacings and pitches, which end up as denominators.
        """
        value = self._numbers.get(key, 0.0)
        return value if value > 0 else fallback

    def as_dict(self) -> RawInputs:
        """Return the resolved values as a plain mapping."""
        resolved: RawInputs = dict(self._numbers)
        if self.mix_ratio is not None:
            resolved[MIX_RATIO_KEY] = self.mix_ratio
        return resolved
