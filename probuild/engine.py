"""Core estimation engine for the ProBuild material estimator.

The EstimationEngine turns an element type and its form inputs into an
EstimationResult:

1. **Input resolution**: Resolve the raw form mapping against the element
   type's field catalog; unparseable numbers read as 0, never an error.
2. **Takeoff**: Dispatch to the element's formula for wet volume and
   reinforcement steel (bar bending schedule geometry).
3. **Dry volume**: Scale the wet volume by the concrete (1.54) or mortar
   (1.33) coefficient to get the volume of the dry constituents.
4. **Allocation**: Split the dry volume in proportion to the mix ratio;
   cement is converted to bags.
5. **Costing**: Round every quantity *up* to whole purchase units and
   price it at the configured unit rates.

The engine holds no state besides its configuration and never mutates its
inputs, so one instance can serve any number of concurrent callers.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from probuild.exceptions import UnknownElementTypeError
from probuild.formulas import ELEMENT_FORMULAS
from probuild.mix_ratio import parse_mix_ratio
from probuild.models.config import DEFAULT_CONFIG, GlobalConfig
from probuild.models.enums import ElementType, MixKind
from probuild.models.estimate import EstimationResult
from probuild.models.inputs import ElementInputs

if TYPE_CHECKING:
    from probuild.formulas import Takeoff
    from probuild.models.estimate import SavedItem

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


def _round2(value: float) -> float:
    return round(value, 2)


def _quantity(value: float) -> float:
    """Floor a quantity at 0; overflowed or undefined values read as 0."""
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def _whole_units(value: float) -> int:
    """Purchase units for a quantity, rounded up."""
    return math.ceil(_quantity(value))


class EstimationEngine:
    """Estimate materials and cost for structural elements.

    Args:
        config: Constants and unit rates used by every calculation. Pass a
            different config (e.g. regional rates) to a separate engine
            rather than changing one in place.

    Example::

        engine = EstimationEngine(DEFAULT_CONFIG)
        result = engine.calculate_estimation(
            ElementType.BEAM, {"width": 10, "depth": 18, "length": 15}
        )
    """

    def __init__(self, config: GlobalConfig = DEFAULT_CONFIG) -> None:
        self._config = config

    @property
    def config(self) -> GlobalConfig:
        return self._config

    def calculate_estimation(
        self,
        element_type: ElementType | str,
        inputs: Mapping[str, Any],
    ) -> EstimationResult:
        """Estimate one element.

        Args:
            element_type: One of the ElementType members (or its value).
            inputs: Raw form values keyed by field name. Unknown keys are
                ignored and missing ones take the formula's fallback.

        Returns:
            Quantities and total cost, each rounded to two decimals.

        Raises:
            UnknownElementTypeError: If ``element_type`` is not an ElementType.
        """
        resolved_type = self._resolve_type(element_type)
        element_inputs = ElementInputs.from_raw(resolved_type, dict(inputs))
        takeoff = ELEMENT_FORMULAS[resolved_type](element_inputs, self._config)
        return self._price_takeoff(takeoff, element_inputs)

    def calculate_grand_total(self, items: Iterable[SavedItem]) -> EstimationResult:
        """Sum the stored results of saved items.

        Results are added as stored (already rounded); nothing is
        re-derived from the items' inputs.
        """
        cement = sand = aggregate = steel = cost = 0.0
        item_count = 0
        for item in items:
            cement += item.result.cement_bags
            sand += item.result.sand_cft
            aggregate += item.result.aggregate_cft
            steel += item.result.steel_kg
            cost += item.result.total_cost
            item_count += 1

        return EstimationResult(
            cement_bags=_round2(cement),
            sand_cft=_round2(sand),
            aggregate_cft=_round2(aggregate),
            steel_kg=_round2(steel),
            total_cost=_round2(cost),
            details=[f"Total Items: {item_count}"],
        )

    @staticmethod
    def _resolve_type(element_type: ElementType | str) -> ElementType:
        try:
            resolved = ElementType(element_type)
        except ValueError as exc:
            msg = (
                f"Unknown element type '{element_type}'. "
                f"Available: {[t.value for t in ElementType]}"
            )
            raise UnknownElementTypeError(msg) from exc
        if resolved not in ELEMENT_FORMULAS:
            msg = f"No formula registered for element type '{resolved}'"
            raise UnknownElementTypeError(msg)
        return resolved

    def _dry_volume_coefficient(self, mix_kind: MixKind) -> float:
        if mix_kind == MixKind.BRICK_MORTAR:
            return self._config.dry_volume_coeff_brick_mortar
        if mix_kind == MixKind.PLASTER_MORTAR:
            return self._config.dry_volume_coeff_plaster
        return self._config.dry_volume_coeff_concrete

    def _price_takeoff(self, takeoff: Takeoff, inputs: ElementInputs) -> EstimationResult:
        """Allocate the dry volume across the mix and price the materials."""
        config = self._config
        mix = parse_mix_ratio(inputs.mix_ratio)
        ratio_sum = mix.total
        wet_vol = _quantity(takeoff.wet_volume_cft)
        dry_vol = _quantity(wet_vol * self._dry_volume_coefficient(takeoff.mix_kind))

        cement_bags = sand_cft = aggregate_cft = 0.0
        if ratio_sum > 0:
            cement_bags = (dry_vol * mix.cement / ratio_sum) / config.cement_bag_volume
            sand_cft = dry_vol * mix.sand / ratio_sum
            # Mortar has no coarse aggregate whatever the ratio says.
            if takeoff.mix_kind == MixKind.CONCRETE:
                aggregate_cft = dry_vol * mix.aggregate / ratio_sum
        else:
            logger.debug("Mix ratio %r sums to %s; materials set to 0", inputs.mix_ratio, ratio_sum)

        # Negative mix parts and overflowed products read as 0.
        cement_bags = _quantity(cement_bags)
        sand_cft = _quantity(sand_cft)
        aggregate_cft = _quantity(aggregate_cft)
        steel_kg = _quantity(takeoff.steel_kg)

        rates = config.rates
        total_cost = (
            _whole_units(cement_bags) * rates.cement
            + _whole_units(sand_cft) * rates.sand
            + _whole_units(aggregate_cft) * rates.aggregate
            + _whole_units(steel_kg) * rates.steel
        )
        total_cost = _quantity(total_cost)

        logger.debug(
            "%s: wet=%.3f cft dry=%.3f cft steel=%.3f kg cost=%.2f",
            inputs.element_type,
            wet_vol,
            dry_vol,
            steel_kg,
            total_cost,
        )

        return EstimationResult(
            cement_bags=_round2(cement_bags),
            sand_cft=_round2(sand_cft),
            aggregate_cft=_round2(aggregate_cft),
            steel_kg=_round2(steel_kg),
            total_cost=_round2(total_cost),
            details=list(takeoff.details),
        )


def calculate_estimation(
    element_type: ElementType | str,
    inputs: Mapping[str, Any],
    config: GlobalConfig = DEFAULT_CONFIG,
) -> EstimationResult:
    """Estimate one element with an explicit configuration."""
    return EstimationEngine(config).calculate_estimation(element_type, inputs)


def calculate_grand_total(items: Iterable[SavedItem]) -> EstimationResult:
    """Sum the stored results of saved items."""
    return EstimationEngine().calculate_grand_total(items)
