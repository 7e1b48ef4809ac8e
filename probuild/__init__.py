"""ProBuild construction material estimation engine.

Usage::

    from probuild import ElementType, create_default_engine

    engine = create_default_engine()
    result = engine.calculate_estimation(ElementType.BEAM, {"width": 10, "depth": 18})
"""

from probuild.data.rod_weights import rod_weight
from probuild.engine import EstimationEngine, calculate_estimation, calculate_grand_total
from probuild.exceptions import (
    ConfigurationError,
    ItemNotFoundError,
    ProBuildError,
    UnknownElementTypeError,
)
from probuild.factory import create_default_engine
from probuild.mix_ratio import parse_mix_ratio
from probuild.models.config import DEFAULT_CONFIG, GlobalConfig, MaterialRates
from probuild.models.enums import ElementType, FieldKind, MixKind
from probuild.models.estimate import EstimationResult, MixRatio, SavedItem
from probuild.models.project import Project

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "ElementType",
    "EstimationEngine",
    "EstimationResult",
    "FieldKind",
    "GlobalConfig",
    "ItemNotFoundError",
    "MaterialRates",
    "MixKind",
    "MixRatio",
    "ProBuildError",
    "Project",
    "SavedItem",
    "UnknownElementTypeError",
    "calculate_estimation",
    "calculate_grand_total",
    "create_default_engine",
    "parse_mix_ratio",
    "rod_weight",
]
