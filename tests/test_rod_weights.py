"""Tests for reinforcement bar unit weights."""

from __future__ import annotations

import pytest

from probuild.data.rod_weights import ROD_WEIGHT_DIVISOR, ROD_WEIGHTS, rod_weight
from probuild.models.config import DEFAULT_CONFIG


class TestRodWeight:
    @pytest.mark.parametrize(("diameter", "expected"), sorted(ROD_WEIGHTS.items()))
    def test_tabulated_diameters_are_exact(self, diameter: int, expected: float) -> None:
        assert rod_weight(diameter) == expected

    def test_float_diameter_hits_table(self) -> None:
        assert rod_weight(16.0) == 0.48

    def test_untabulated_uses_rule_of_thumb(self) -> None:
        assert rod_weight(14) == pytest.approx(14 * 14 / ROD_WEIGHT_DIVISOR)
        assert rod_weight(6) == pytest.approx(36 / 533)

    def test_zero_diameter_weighs_nothing(self) -> None:
        assert rod_weight(0) == 0.0

    def test_custom_table(self) -> None:
        assert rod_weight(12, {12: 0.3}) == 0.3
        # Not in the custom table, so the formula applies even for stock sizes.
        assert rod_weight(16, {12: 0.3}) == pytest.approx(256 / 533)

    def test_config_uses_its_table(self) -> None:
        assert DEFAULT_CONFIG.rod_weight(20) == 0.75
        assert DEFAULT_CONFIG.rod_weight(18) == pytest.approx(324 / 533)
