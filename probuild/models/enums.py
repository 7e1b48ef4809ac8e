"""Enums for the ProBuild domain models."""

from enum import StrEnum


class ElementType(StrEnum):
    """Structural element types the engine can estimate."""

    PILE = "PILE"
    FOOTING_BOX = "FOOTING_BOX"
    FOOTING_TRAPEZOIDAL = "FOOTING_TRAPEZOIDAL"
    COLUMN_RECTANGULAR = "COLUMN_RECTANGULAR"
    COLUMN_CIRCULAR = "COLUMN_CIRCULAR"
    COLUMN_SHORT = "COLUMN_SHORT"
    BEAM = "BEAM"
    SLAB = "SLAB"
    STAIR = "STAIR"
    LINTEL = "LINTEL"
    SUNSHADE = "SUNSHADE"
    BRICK_WORK = "BRICK_WORK"
    PLASTER = "PLASTER"


class FieldKind(StrEnum):
    """How an input field is entered and interpreted."""

    NUMBER = "number"
    SELECT = "select"


class MixKind(StrEnum):
    """Which dry-volume coefficient applies to a wet volume."""

    CONCRETE = "concrete"
    BRICK_MORTAR = "brick_mortar"
    PLASTER_MORTAR = "plaster_mortar"
