"""Domain models for the ProBuild estimation engine."""

from probuild.models.config import DEFAULT_CONFIG, GlobalConfig, MaterialRates
from probuild.models.enums import ElementType, FieldKind, MixKind
from probuild.models.estimate import EstimationResult, MixRatio, SavedItem
from probuild.models.inputs import ElementInputs, InputField, RawInputs, RawValue
from probuild.models.project import Project

__all__ = [
    "DEFAULT_CONFIG",
    "ElementInputs",
    "ElementType",
    "EstimationResult",
    "FieldKind",
    "GlobalConfig",
    "InputField",
    "MaterialRates",
    "MixKind",
    "MixRatio",
    "Project",
    "RawInputs",
    "RawValue",
    "SavedItem",
]
