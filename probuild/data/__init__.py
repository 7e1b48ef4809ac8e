"""Reference data for the ProBuild estimation engine."""

from probuild.data.catalog import (
    CONCRETE_MIX_OPTIONS,
    ELEMENT_FIELDS,
    ELEMENT_PREFIXES,
    MORTAR_MIX_OPTIONS,
    ROD_DIA_OPTIONS,
    default_inputs,
)
from probuild.data.rod_weights import ROD_WEIGHTS, rod_weight

__all__ = [
    "CONCRETE_MIX_OPTIONS",
    "ELEMENT_FIELDS",
    "ELEMENT_PREFIXES",
    "MORTAR_MIX_OPTIONS",
    "ROD_DIA_OPTIONS",
    "ROD_WEIGHTS",
    "default_inputs",
    "rod_weight",
]
