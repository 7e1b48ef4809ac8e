"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from typing import TYPE_CHECKING

from probuild.exceptions import ConfigurationError
from probuild.factory import create_default_engine
from probuild.models.config import DEFAULT_CONFIG, GlobalConfig

if TYPE_CHECKING:
    from probuild.engine import EstimationEngine

logger = logging.getLogger(__name__)

# Environment variable -> MaterialRates field.
RATE_ENV_VARS: dict[str, str] = {
    "PROBUILD_CEMENT_RATE": "cement",
    "PROBUILD_SAND_RATE": "sand",
    "PROBUILD_AGGREGATE_RATE": "aggregate",
    "PROBUILD_STEEL_RATE": "steel",
}


def load_config(environ: Mapping[str, str] | None = None) -> GlobalConfig:
    """Build the API's GlobalConfig from optional rate overrides.

    Reads ``PROBUILD_*_RATE`` variables; unset variables keep the default
    rates. Raises ConfigurationError for values that are not non-negative
    numbers.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, float] = {}
    for var, rate_name in RATE_ENV_VARS.items():
        raw = env.get(var, "").strip()
        if not raw:
            continue
        try:
            value = float(raw)
        except ValueError as exc:
            msg = f"{var} must be a number, got {raw!r}"
            raise ConfigurationError(msg) from exc
        if value < 0 or not math.isfinite(value):
            msg = f"{var} must be a non-negative number, got {raw!r}"
            raise ConfigurationError(msg)
        overrides[rate_name] = value

    if not overrides:
        return DEFAULT_CONFIG
    logger.info("Using rate overrides from environment: %s", overrides)
    return DEFAULT_CONFIG.with_rates(**overrides)


def create_engine() -> EstimationEngine:
    """Create the API's engine from environment configuration."""
    return create_default_engine(load_config())
