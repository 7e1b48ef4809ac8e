"""Factory functions for creating pre-configured EstimationEngine instances."""

from __future__ import annotations

from probuild.engine import EstimationEngine
from probuild.models.config import DEFAULT_CONFIG, GlobalConfig


def create_default_engine(config: GlobalConfig | None = None) -> EstimationEngine:
    """Create an EstimationEngine with the standard constants and rates.

    Args:
        config: Optional replacement configuration, e.g. regional rates
            built with ``DEFAULT_CONFIG.with_rates(cement=600)``.

    Returns:
        An EstimationEngine ready to produce estimates.

    Example::

        from probuild import ElementType, create_default_engine

        engine = create_default_engine()
        result = engine.calculate_estimation(ElementType.SLAB, {"area": 1200})
    """
    return EstimationEngine(config if config is not None else DEFAULT_CONFIG)
