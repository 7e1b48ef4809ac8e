"""Tests for the element field catalog."""

from __future__ import annotations

import pytest

from probuild.data.catalog import (
    CONCRETE_MIX_OPTIONS,
    ELEMENT_FIELDS,
    ELEMENT_PREFIXES,
    MORTAR_MIX_OPTIONS,
    ROD_DIA_OPTIONS,
    default_inputs,
)
from probuild.data.rod_weights import ROD_WEIGHTS
from probuild.mix_ratio import parse_mix_ratio
from probuild.models.enums import ElementType, FieldKind


class TestCatalog:
    def test_every_type_has_fields_and_prefix(self) -> None:
        assert set(ELEMENT_FIELDS) == set(ElementType)
        assert set(ELEMENT_PREFIXES) == set(ElementType)

    def test_prefixes_are_unique(self) -> None:
        assert len(set(ELEMENT_PREFIXES.values())) == len(ELEMENT_PREFIXES)

    @pytest.mark.parametrize("element_type", list(ElementType))
    def test_field_keys_unique(self, element_type: ElementType) -> None:
        keys = [f.key for f in ELEMENT_FIELDS[element_type]]
        assert len(keys) == len(set(keys))

    @pytest.mark.parametrize("element_type", list(ElementType))
    def test_select_defaults_are_options(self, element_type: ElementType) -> None:
        for field in ELEMENT_FIELDS[element_type]:
            if field.kind == FieldKind.SELECT:
                assert field.default in field.options

    def test_rod_options_match_weight_table(self) -> None:
        assert [int(d) for d in ROD_DIA_OPTIONS] == sorted(ROD_WEIGHTS)

    def test_mix_options_parse(self) -> None:
        for option in CONCRETE_MIX_OPTIONS:
            assert parse_mix_ratio(option).aggregate > 0
        for option in MORTAR_MIX_OPTIONS:
            assert parse_mix_ratio(option).aggregate == 0

    def test_masonry_uses_mortar_mixes(self) -> None:
        for element_type in (ElementType.BRICK_WORK, ElementType.PLASTER):
            mix = next(f for f in ELEMENT_FIELDS[element_type] if f.key == "mix_ratio")
            assert mix.options == MORTAR_MIX_OPTIONS

    def test_default_inputs(self) -> None:
        pile = default_inputs(ElementType.PILE)
        assert pile["count"] == 10
        assert pile["mix_ratio"] == "1:1.5:3 (M20)"
        assert default_inputs(ElementType.BRICK_WORK)["mix_ratio"] == "1:5 (Medium - Partition)"
        assert default_inputs(ElementType.PLASTER)["mix_ratio"] == "1:4 (Standard - Walls)"

    def test_default_inputs_returns_fresh_dict(self) -> None:
        first = default_inputs(ElementType.SLAB)
        first["area"] = 1
        assert default_inputs(ElementType.SLAB)["area"] == 1200
