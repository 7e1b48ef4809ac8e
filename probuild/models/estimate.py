"""Estimation output models for the ProBuild engine."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from probuild.models.enums import ElementType
from probuild.models.inputs import RawValue


class MixRatio(BaseModel):
    """Proportions by volume of cement : sand : aggregate."""

    model_config = ConfigDict(frozen=True)

    cement: float
    sand: float
    aggregate: float

    @property
    def total(self) -> float:
        return self.cement + self.sand + self.aggregate


class EstimationResult(BaseModel):
    """Material quantities and cost for one element or a whole project.

    Quantities are rounded to two decimals. ``details`` carries free-form
    computation notes for display only.
    """

    model_config = ConfigDict(frozen=True)

    cement_bags: float = 0.0
    sand_cft: float = 0.0
    aggregate_cft: float = 0.0
    steel_kg: float = 0.0
    total_cost: float = 0.0
    details: list[str] = Field(default_factory=list)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat dict of display strings for the results card.

        Purchase quantities are rounded up, matching how materials are bought.
        """
        from probuild.formatting import format_currency, purchase_quantities

        purchase = purchase_quantities(self)
        return {
            "cement_bags_formatted": f"{purchase['cement_bags']:,} Bags",
            "sand_cft_formatted": f"{purchase['sand_cft']:,} cft",
            "aggregate_cft_formatted": f"{purchase['aggregate_cft']:,} cft",
            "steel_kg_formatted": f"{purchase['steel_kg']:,} kg",
            "total_cost_formatted": format_currency(self.total_cost),
            "details": list(self.details),
        }


class SavedItem(BaseModel):
    """A committed estimation: the inputs used and the result they produced."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    element_type: ElementType
    inputs: dict[str, RawValue]
    result: EstimationResult
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
