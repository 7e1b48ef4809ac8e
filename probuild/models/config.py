"""Process-wide estimation constants and unit rates."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from probuild.data.rod_weights import ROD_WEIGHTS, rod_weight


class MaterialRates(BaseModel):
    """Unit purchase rates: per bag of cement, per cft of sand/aggregate, per kg of steel."""

    model_config = ConfigDict(frozen=True)

    cement: float = Field(default=550.0, ge=0)
    sand: float = Field(default=45.0, ge=0)
    aggregate: float = Field(default=160.0, ge=0)
    steel: float = Field(default=95.0, ge=0)


class GlobalConfig(BaseModel):
    """Constants every calculation reads.

    Instances are frozen. Swap rates by building a new config with
    :meth:`with_rates`; a calculation never sees a half-updated value.
    """

    model_config = ConfigDict(frozen=True)

    cement_bag_volume: float = Field(default=1.25, gt=0)
    dry_volume_coeff_concrete: float = Field(default=1.54, ge=0)
    dry_volume_coeff_brick_mortar: float = Field(default=1.33, ge=0)
    dry_volume_coeff_plaster: float = Field(default=1.33, ge=0)
    rod_weights: dict[int, float] = Field(default_factory=lambda: dict(ROD_WEIGHTS))
    rates: MaterialRates = Field(default_factory=MaterialRates)

    def rod_weight(self, diameter_mm: float) -> float:
        """Unit weight (kg/ft) for a bar diameter using this config's table."""
        return rod_weight(diameter_mm, self.rod_weights)

    def with_rates(self, **overrides: float) -> GlobalConfig:
        """Return a copy of this config with some unit rates replaced."""
        rates = MaterialRates(**{**self.rates.model_dump(), **overrides})
        return self.model_copy(update={"rates": rates})


DEFAULT_CONFIG = GlobalConfig()
