"""Per-element takeoff formulas.

Each formula turns the typed inputs of one element type into a
:class:`Takeoff`: the wet volume of concrete or mortar, which dry-volume
coefficient applies to it, and the reinforcement steel mass from a bar
bending schedule. Material allocation and costing are uniform across
types and live in the engine.

Conventions: volumes are cubic feet, bar lengths are feet, unit weights
are kg/ft. Cover and spacing inputs are inches and are divided by 12
before being combined with feet.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from probuild.models.enums import ElementType, MixKind

if TYPE_CHECKING:
    from probuild.models.config import GlobalConfig
    from probuild.models.inputs import ElementInputs

# Extra bar length for the two hooks of a beam stirrup (inches).
STIRRUP_HOOK_IN = 4.0
# Anchorage of sunshade cantilever bars into the supporting lintel (feet).
SUNSHADE_ANCHORAGE_FT = 0.5
# Lap and wastage allowance on slab grid steel.
SLAB_WASTAGE_FACTOR = 1.1
# Stair steel is taken as a fraction of concrete volume at this density.
STAIR_STEEL_RATIO = 0.012
STEEL_DENSITY_KG_PER_CFT = 222.0
# Share of a brick wall occupied by mortar joints.
BRICK_MORTAR_FRACTION = 0.30
# 9.5" x 4.5" x 2.75" brick, in cubic feet.
BRICK_UNIT_VOLUME_CFT = (9.5 * 4.5 * 2.75) / 1728
MM_PER_FOOT = 304.8


@dataclass
class Takeoff:
    """Geometric quantities for one element, before materials and cost."""

    wet_volume_cft: float
    steel_kg: float = 0.0
    mix_kind: MixKind = MixKind.CONCRETE
    details: list[str] = field(default_factory=list)


Formula = Callable[["ElementInputs", "GlobalConfig"], Takeoff]


def _clear(length: float) -> float:
    """Floor a derived length at zero so degenerate input gives zero steel."""
    return max(length, 0.0)


def _count_up(value: float) -> int:
    """Round a bar or ring count up; a non-finite count reads as 0."""
    return math.ceil(value) if math.isfinite(value) else 0


def _mesh_bars(span_ft: float, spacing_ft: float) -> int:
    """Bars needed to cover a span at a spacing, counting both end bars."""
    bays = span_ft / spacing_ft
    return (math.floor(bays) if math.isfinite(bays) else 0) + 1


def pile(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    count = inputs.number("count", 1)
    dia_ft = inputs.number("diameter", 20) / 12
    length_ft = inputs.number("length", 60)

    wet_vol = (math.pi * dia_ft * dia_ft * length_ft) / 4 * count

    main_steel = (
        inputs.number("main_rod_nos")
        * length_ft
        * config.rod_weight(inputs.number("main_rod_dia"))
        * count
    )

    pitch_ft = inputs.positive("spiral_pitch", 6) / 12
    rings = _count_up(length_ft / pitch_ft)
    spiral_dia_ft = _clear(dia_ft - 2 * inputs.number("clear_cover", 3) / 12)
    spiral_len = rings * math.pi * spiral_dia_ft
    spiral_steel = spiral_len * config.rod_weight(inputs.number("spiral_dia")) * count

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=main_steel + spiral_steel,
        details=[
            f"Wet Vol: {wet_vol:.2f} cft",
            f"Dry Vol: {wet_vol * config.dry_volume_coeff_concrete:.2f} cft",
        ],
    )


def footing_box(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    count = inputs.number("count", 1)
    length_ft = inputs.number("length")
    breadth_ft = inputs.number("breadth")
    thick_ft = inputs.number("thickness") / 12

    wet_vol = length_ft * breadth_ft * thick_ft * count

    cover_ft = inputs.number("clear_cover", 3) / 12
    clear_long = _clear(length_ft - 2 * cover_ft)
    clear_short = _clear(breadth_ft - 2 * cover_ft)

    long_spacing_in = inputs.positive("long_rod_spacing", 5)
    short_spacing_in = inputs.positive("short_rod_spacing", 6)

    long_nos = _mesh_bars(clear_short, long_spacing_in / 12)
    short_nos = _mesh_bars(clear_long, short_spacing_in / 12)

    long_steel = long_nos * clear_long * config.rod_weight(inputs.number("long_rod_dia"))
    short_steel = short_nos * clear_short * config.rod_weight(inputs.number("short_rod_dia"))

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=(long_steel + short_steel) * count,
        details=[
            f"Long Bars: {long_nos} nos @ {long_spacing_in:g}\" c/c",
            f"Short Bars: {short_nos} nos @ {short_spacing_in:g}\" c/c",
        ],
    )


def footing_trapezoidal(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Rectangular pad plus a sloped frustum, bottom mesh only."""
    count = inputs.number("count", 1)
    length_ft = inputs.number("length")
    breadth_ft = inputs.number("breadth")
    top_length_ft = inputs.number("top_length") / 12
    top_breadth_ft = inputs.number("top_breadth") / 12
    rect_h_ft = inputs.number("rect_height") / 12
    slope_h_ft = inputs.number("slope_height") / 12

    rect_vol = length_ft * breadth_ft * rect_h_ft

    # Prismoidal formula for the frustum between the base and the pedestal.
    base_area = length_ft * breadth_ft
    top_area = top_length_ft * top_breadth_ft
    slope_vol = (slope_h_ft / 3) * (
        base_area + top_area + math.sqrt(max(base_area * top_area, 0.0))
    )

    wet_vol = (rect_vol + slope_vol) * count

    cover_ft = inputs.number("clear_cover", 3) / 12
    clear_long = _clear(length_ft - 2 * cover_ft)
    clear_short = _clear(breadth_ft - 2 * cover_ft)
    spacing_ft = inputs.positive("rod_spacing", 5) / 12

    bars_along_long = _mesh_bars(clear_short, spacing_ft)
    bars_along_short = _mesh_bars(clear_long, spacing_ft)
    unit_wt = config.rod_weight(inputs.number("rod_dia"))
    steel_one = (bars_along_long * clear_long + bars_along_short * clear_short) * unit_wt

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=steel_one * count,
        details=[
            f"Rect Vol: {rect_vol:.2f} cft",
            f"Slope Vol: {slope_vol:.2f} cft",
        ],
    )


def column_rectangular(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Rectangular (and short) columns with closed ties."""
    count = inputs.number("count", 1)
    length_in = inputs.number("length")
    width_in = inputs.number("width")
    height_ft = inputs.number("height")

    wet_vol = (length_in * width_in / 144) * height_ft * count

    main_steel = (
        inputs.number("main_rod_nos")
        * height_ft
        * config.rod_weight(inputs.number("main_rod_dia"))
        * count
    )

    cover_in = inputs.number("clear_cover", 1.5)
    tie_len_ft = _clear(((length_in + width_in) * 2 - 8 * cover_in) / 12)
    spacing_ft = inputs.positive("tie_spacing", 6) / 12
    num_ties = _count_up(height_ft / spacing_ft) + 1
    tie_steel = num_ties * tie_len_ft * config.rod_weight(inputs.number("tie_dia")) * count

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=main_steel + tie_steel,
        details=[
            f"Wet Vol: {wet_vol:.2f} cft",
            f"Ties: {num_ties} nos per column",
        ],
    )


def column_circular(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Circular columns with a helical spiral."""
    count = inputs.number("count", 1)
    dia_ft = inputs.number("diameter") / 12
    height_ft = inputs.number("height")

    wet_vol = (math.pi * dia_ft * dia_ft) / 4 * height_ft * count

    main_steel = (
        inputs.number("main_rod_nos")
        * height_ft
        * config.rod_weight(inputs.number("main_rod_dia"))
        * count
    )

    pitch_ft = inputs.positive("spiral_pitch", 6) / 12
    cover_ft = inputs.number("clear_cover", 1.5) / 12
    core_dia_ft = _clear(dia_ft - 2 * cover_ft)

    turns = height_ft / pitch_ft
    # One helix turn unrolls to the hypotenuse of circumference and pitch.
    len_per_turn = math.hypot(math.pi * core_dia_ft, pitch_ft)
    spiral_len = _clear(turns * len_per_turn)
    spiral_steel = spiral_len * config.rod_weight(inputs.number("spiral_dia")) * count

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=main_steel + spiral_steel,
        details=[
            f"Vol: {wet_vol:.2f} cft",
            f"Spiral Len: {spiral_len:.1f} ft",
        ],
    )


def beam(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    count = inputs.number("count", 1)
    width_in = inputs.number("width")
    depth_in = inputs.number("depth")
    length_ft = inputs.number("length")

    wet_vol = length_ft * (width_in / 12) * (depth_in / 12) * count

    main_steel = (
        inputs.number("main_rod_nos")
        * length_ft
        * config.rod_weight(inputs.number("main_rod_dia"))
        * count
    )

    cover_in = inputs.number("clear_cover", 1.5)
    ring_in = 2 * ((width_in - 2 * cover_in) + (depth_in - 2 * cover_in)) + STIRRUP_HOOK_IN
    ring_ft = _clear(ring_in / 12)
    spacing_ft = inputs.positive("stirrup_spacing", 6) / 12
    num_stirrups = _count_up(length_ft / spacing_ft) + 1
    stirrup_steel = num_stirrups * ring_ft * config.rod_weight(inputs.number("tie_dia")) * count

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=main_steel + stirrup_steel,
        details=[
            f"Wet Vol: {wet_vol:.2f} cft",
            f"Stirrups: {num_stirrups} nos per beam",
        ],
    )


def stair(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Steps, waist slab and landing.

    Steel is a flat percentage of concrete volume rather than a bar
    takeoff; there are no bar inputs for stairs.
    """
    steps = inputs.number("steps")
    width_ft = inputs.number("step_length")
    riser_ft = inputs.number("riser") / 12
    tread_ft = inputs.number("tread") / 12
    waist_ft = inputs.number("waist_thickness") / 12

    steps_vol = 0.5 * riser_ft * tread_ft * width_ft * steps

    step_hyp = math.hypot(riser_ft, tread_ft)
    waist_vol = step_hyp * steps * width_ft * waist_ft

    landing_vol = inputs.number("landing_area") * waist_ft

    wet_vol = steps_vol + waist_vol + landing_vol

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=wet_vol * STAIR_STEEL_RATIO * STEEL_DENSITY_KG_PER_CFT,
        details=[f"Wet Vol: {wet_vol:.2f} cft"],
    )


def lintel(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    count = inputs.number("count", 1)
    length_ft = inputs.number("length")
    width_in = inputs.number("width")
    thick_in = inputs.number("thickness")

    wet_vol = length_ft * (width_in / 12) * (thick_in / 12) * count

    main_steel = (
        inputs.number("main_rod_nos", 4)
        * length_ft
        * config.rod_weight(inputs.number("main_rod_dia", 10))
    )

    spacing_ft = inputs.positive("stirrup_spacing", 6) / 12
    perim_ft = 2 * (width_in + thick_in) / 12
    num_stirrups = _count_up(length_ft / spacing_ft)
    stirrup_steel = num_stirrups * perim_ft * config.rod_weight(inputs.number("stirrup_dia", 8))

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=(main_steel + stirrup_steel) * count,
        details=[f"Wet Vol: {wet_vol:.2f} cft"],
    )


def sunshade(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Cantilevered chajja: main bars across the projection, distribution along it."""
    count = inputs.number("count", 1)
    length_ft = inputs.number("length")
    proj_ft = inputs.number("projection") / 12
    thick_ft = inputs.number("avg_thickness") / 12

    wet_vol = length_ft * proj_ft * thick_ft * count

    main_spacing_ft = inputs.positive("main_rod_spacing", 6) / 12
    num_main = _count_up(length_ft / main_spacing_ft)
    main_len = proj_ft + SUNSHADE_ANCHORAGE_FT
    main_steel = num_main * main_len * config.rod_weight(inputs.number("main_rod_dia", 10))

    dist_spacing_ft = inputs.positive("dist_rod_spacing", 8) / 12
    num_dist = _count_up(proj_ft / dist_spacing_ft)
    dist_steel = num_dist * length_ft * config.rod_weight(inputs.number("dist_rod_dia", 8))

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=(main_steel + dist_steel) * count,
        details=[
            f"Main Bars: {num_main} nos",
            f"Dist. Bars: {num_dist} nos",
        ],
    )


def slab(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Two-way grid over a square of the same area."""
    area_sft = inputs.number("area")
    wet_vol = area_sft * (inputs.number("thickness") / 12)

    side_ft = math.sqrt(max(area_sft, 0.0))
    spacing_ft = inputs.positive("rod_spacing", 6) / 12
    bars_per_side = _mesh_bars(side_ft, spacing_ft)
    total_len = bars_per_side * side_ft * 2

    return Takeoff(
        wet_volume_cft=wet_vol,
        steel_kg=total_len * SLAB_WASTAGE_FACTOR * config.rod_weight(inputs.number("rod_dia")),
        details=[
            f"Wet Vol: {wet_vol:.2f} cft",
            f"Dry Vol: {wet_vol * config.dry_volume_coeff_concrete:.2f} cft",
        ],
    )


def brick_work(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    """Mortar for a brick wall; the brick count is reported in the details."""
    net_area = _clear(inputs.number("area") - inputs.number("opening_deduction"))
    wall_vol = net_area * inputs.number("thickness") / 12

    mortar_vol = wall_vol * BRICK_MORTAR_FRACTION
    brick_count = (wall_vol - mortar_vol) / BRICK_UNIT_VOLUME_CFT

    return Takeoff(
        wet_volume_cft=mortar_vol,
        mix_kind=MixKind.BRICK_MORTAR,
        details=[
            f"Wall Vol: {wall_vol:.1f} cft",
            f"Est. Bricks: {_count_up(brick_count)} Nos",
        ],
    )


def plaster(inputs: ElementInputs, config: GlobalConfig) -> Takeoff:
    wet_vol = inputs.number("area") * inputs.number("thickness") / MM_PER_FOOT
    return Takeoff(
        wet_volume_cft=wet_vol,
        mix_kind=MixKind.PLASTER_MORTAR,
        details=[f"Wet Vol: {wet_vol:.2f} cft"],
    )


ELEMENT_FORMULAS: dict[ElementType, Formula] = {
    ElementType.PILE: pile,
    ElementType.FOOTING_BOX: footing_box,
    ElementType.FOOTING_TRAPEZOIDAL: footing_trapezoidal,
    ElementType.COLUMN_RECTANGULAR: column_rectangular,
    ElementType.COLUMN_SHORT: column_rectangular,
    ElementType.COLUMN_CIRCULAR: column_circular,
    ElementType.BEAM: beam,
    ElementType.SLAB: slab,
    ElementType.STAIR: stair,
    ElementType.LINTEL: lintel,
    ElementType.SUNSHADE: sunshade,
    ElementType.BRICK_WORK: brick_work,
    ElementType.PLASTER: plaster,
}
