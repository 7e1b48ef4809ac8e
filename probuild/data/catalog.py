"""Input field catalog for every element type.

Each entry lists the form fields in display order with their units and
the values a fresh form is pre-filled with. Linear dimensions are feet or
inches exactly as labelled; bar diameters are millimetres.
"""

from __future__ import annotations

from probuild.models.enums import ElementType, FieldKind
from probuild.models.inputs import InputField, RawInputs

CONCRETE_MIX_OPTIONS: list[str] = [
    "1:1:2 (M25)",
    "1:1.5:3 (M20)",
    "1:2:4 (M15)",
    "1:3:6 (M10)",
    "1:4:8 (M7.5)",
    "1:5:10 (PCC)",
]

MORTAR_MIX_OPTIONS: list[str] = [
    "1:3 (Rich - Ceiling/Ext)",
    "1:4 (Standard - Walls)",
    "1:5 (Medium - Partition)",
    "1:6 (Lean - Brickwork)",
]

ROD_DIA_OPTIONS: list[str] = ["8", "10", "12", "16", "20", "22", "25", "32"]

# Prefix used when auto-naming saved items, e.g. "C-3".
ELEMENT_PREFIXES: dict[ElementType, str] = {
    ElementType.PILE: "P",
    ElementType.FOOTING_BOX: "F",
    ElementType.FOOTING_TRAPEZOIDAL: "TF",
    ElementType.COLUMN_RECTANGULAR: "C",
    ElementType.COLUMN_CIRCULAR: "CC",
    ElementType.COLUMN_SHORT: "SC",
    ElementType.BEAM: "B",
    ElementType.SLAB: "S",
    ElementType.STAIR: "STR",
    ElementType.LINTEL: "L",
    ElementType.SUNSHADE: "SS",
    ElementType.BRICK_WORK: "BW",
    ElementType.PLASTER: "PL",
}


def _count(default: float, label: str = "Quantity") -> InputField:
    return InputField(key="count", label=label, unit="Nos", default=default)


def _concrete_mix(default: str = "1:1.5:3 (M20)", full_width: bool = False) -> InputField:
    return InputField(
        key="mix_ratio",
        label="Concrete Mix",
        default=default,
        kind=FieldKind.SELECT,
        options=CONCRETE_MIX_OPTIONS,
        full_width=full_width,
    )


def _mortar_mix(default: str) -> InputField:
    return InputField(
        key="mix_ratio",
        label="Mortar Mix",
        default=default,
        kind=FieldKind.SELECT,
        options=MORTAR_MIX_OPTIONS,
        full_width=True,
    )


def _bar(key: str, label: str, default: str, full_width: bool = False) -> InputField:
    return InputField(
        key=key,
        label=label,
        unit="mm",
        default=default,
        kind=FieldKind.SELECT,
        options=ROD_DIA_OPTIONS,
        full_width=full_width,
    )


def _num(
    key: str,
    label: str,
    unit: str,
    default: float,
    highlight_key: str | None = None,
    full_width: bool = False,
) -> InputField:
    return InputField(
        key=key,
        label=label,
        unit=unit,
        default=default,
        highlight_key=highlight_key,
        full_width=full_width,
    )


ELEMENT_FIELDS: dict[ElementType, list[InputField]] = {
    ElementType.PILE: [
        _count(10, label="No. of Piles"),
        _concrete_mix(),
        _num("diameter", "Diameter (D)", "Inch", 20, "diameter"),
        _num("length", "Length (L)", "Feet", 60, "length"),
        _num("clear_cover", "Clear Cover", "Inch", 3),
        _num("spiral_pitch", "Spiral Spacing", "Inch", 5, "spacing"),
        _bar("main_rod_dia", "Main Bar Dia", "20"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 7),
        _bar("spiral_dia", "Spiral Dia", "10"),
    ],
    ElementType.FOOTING_BOX: [
        _count(1),
        _concrete_mix(),
        _num("length", "Length (L)", "Feet", 6, "length"),
        _num("breadth", "Breadth (B)", "Feet", 6, "width"),
        _num("thickness", "Thickness (H)", "Inch", 18, "height"),
        _num("clear_cover", "Clear Cover", "Inch", 3),
        _bar("long_rod_dia", "Long Bar Dia", "16"),
        _num("long_rod_spacing", "Long Spacing", "Inch", 5),
        _bar("short_rod_dia", "Short Bar Dia", "16"),
        _num("short_rod_spacing", "Short Spacing", "Inch", 6),
    ],
    ElementType.FOOTING_TRAPEZOIDAL: [
        _count(1),
        _concrete_mix(),
        _num("length", "Bottom Length (L)", "Feet", 6, "length"),
        _num("breadth", "Bottom Width (B)", "Feet", 6, "width"),
        _num("top_length", "Top Length (l)", "Inch", 18, "top_length"),
        _num("top_breadth", "Top Width (b)", "Inch", 18, "top_width"),
        _num("rect_height", "Rect. Height (h1)", "Inch", 12, "height_rect"),
        _num("slope_height", "Slope Height (h2)", "Inch", 12, "height_slope"),
        _bar("rod_dia", "Bar Dia", "16", full_width=True),
        _num("rod_spacing", "Bar Spacing", "Inch", 5),
        _num("clear_cover", "Clear Cover", "Inch", 3),
    ],
    ElementType.COLUMN_RECTANGULAR: [
        _count(5),
        _concrete_mix(),
        _num("length", "Size (L)", "Inch", 12, "length"),
        _num("width", "Size (B)", "Inch", 15, "width"),
        _num("height", "Clear Height", "Feet", 10, "height"),
        _num("clear_cover", "Clear Cover", "Inch", 1.5),
        _bar("main_rod_dia", "Main Bar Dia", "20"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 6),
        _bar("tie_dia", "Tie Bar Dia", "10"),
        _num("tie_spacing", "Tie Spacing", "Inch", 6, "spacing"),
    ],
    ElementType.COLUMN_SHORT: [
        _count(5),
        _concrete_mix(),
        _num("length", "Size (L)", "Inch", 12, "length"),
        _num("width", "Size (B)", "Inch", 12, "width"),
        _num("height", "Clear Height", "Feet", 4, "height"),
        _num("clear_cover", "Clear Cover", "Inch", 1.5),
        _bar("main_rod_dia", "Main Bar Dia", "16"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 4),
        _bar("tie_dia", "Tie Bar Dia", "10"),
        _num("tie_spacing", "Tie Spacing", "Inch", 6, "spacing"),
    ],
    ElementType.COLUMN_CIRCULAR: [
        _count(5),
        _concrete_mix(),
        _num("diameter", "Diameter", "Inch", 18, "diameter"),
        _num("height", "Clear Height", "Feet", 10, "height"),
        _num("clear_cover", "Clear Cover", "Inch", 1.5),
        _num("spiral_pitch", "Spiral Pitch", "Inch", 6, "spacing"),
        _bar("main_rod_dia", "Main Bar Dia", "20"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 8),
        _bar("spiral_dia", "Spiral Dia", "8"),
    ],
    ElementType.BEAM: [
        _count(1),
        _concrete_mix(),
        _num("width", "Width (B)", "Inch", 10, "width"),
        _num("depth", "Depth (D)", "Inch", 18, "height"),
        _num("length", "Total Length", "Feet", 15, "length"),
        _num("clear_cover", "Clear Cover", "Inch", 1.5),
        _bar("main_rod_dia", "Main Bar Dia", "16"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 4),
        _bar("tie_dia", "Stirrup Dia", "10"),
        _num("stirrup_spacing", "Stirrup Spacing", "Inch", 6, "spacing"),
    ],
    ElementType.SLAB: [
        _num("area", "Slab Area", "Sq. Ft", 1200, "area"),
        _num("thickness", "Thickness", "Inch", 5, "height"),
        _concrete_mix("1:2:4 (M15)", full_width=True),
        _bar("rod_dia", "Bar Dia", "10"),
        _num("rod_spacing", "Grid Spacing", "Inch", 6, "spacing"),
        _num("clear_cover", "Clear Cover", "Inch", 0.75),
    ],
    ElementType.STAIR: [
        _num("steps", "No. of Steps", "Nos", 10),
        _concrete_mix(),
        _num("step_length", "Step Width", "Feet", 4, "width"),
        _num("waist_thickness", "Waist Thick.", "Inch", 6),
        _num("riser", "Riser (R)", "Inch", 6, "height"),
        _num("tread", "Tread (T)", "Inch", 10, "length"),
        _num("landing_area", "Landing Area", "Sq. Ft", 16, full_width=True),
    ],
    ElementType.LINTEL: [
        _count(5),
        _concrete_mix(),
        _num("length", "Length", "Feet", 5, "length"),
        _num("width", "Width", "Inch", 10, "width"),
        _num("thickness", "Thickness", "Inch", 6, "height"),
        _bar("main_rod_dia", "Main Bar Dia", "10"),
        _num("main_rod_nos", "Main Bar Nos", "Nos", 4),
        _bar("stirrup_dia", "Stirrup Dia", "8"),
        _num("stirrup_spacing", "Stirrup Spacing", "Inch", 6),
    ],
    ElementType.SUNSHADE: [
        _count(5),
        _concrete_mix(),
        _num("length", "Length", "Feet", 5, "length"),
        _num("projection", "Projection", "Inch", 18, "width"),
        _num("avg_thickness", "Avg Thickness", "Inch", 3, "height", full_width=True),
        _bar("main_rod_dia", "Main Bar Dia", "10"),
        _num("main_rod_spacing", "Main Spacing", "Inch", 6),
        _bar("dist_rod_dia", "Dist. Bar Dia", "8"),
        _num("dist_rod_spacing", "Dist. Spacing", "Inch", 8),
    ],
    ElementType.BRICK_WORK: [
        _num("area", "Wall Area", "Sq. Ft", 500, "area"),
        _num("thickness", "Wall Thickness", "Inch (5/10)", 5, "width"),
        _mortar_mix("1:5 (Medium - Partition)"),
        _num("opening_deduction", "Openings (Door/Win)", "Sq. Ft", 20, full_width=True),
    ],
    ElementType.PLASTER: [
        _num("area", "Plaster Area", "Sq. Ft", 1000, "area"),
        _num("thickness", "Thickness", "mm", 12, "width"),
        _mortar_mix("1:4 (Standard - Walls)"),
    ],
}


def default_inputs(element_type: ElementType) -> RawInputs:
    """Return the pre-filled form values for an element type."""
    return {f.key: f.default for f in ELEMENT_FIELDS[element_type]}
