"""Tests for the plant size taxonomy and power tier constants."""

from __future__ import annotations

import pytest

from grow_light_advisor.taxonomy.size_taxonomy import (
    HIGH_POWER_THRESHOLD_W,
    LOW_POWER_THRESHOLD_W,
    SizeCategory,
)


class TestSizeCategoryEnum:
    def test_closed_member_set(self):
        assert {m.value for m in SizeCategory} == {"Small", "Medium", "Large"}

    def test_values_match_payload_labels(self):
        assert SizeCategory("Medium") is SizeCategory.MEDIUM

    def test_members_compare_equal_to_strings(self):
        assert SizeCategory.LARGE == "Large"


class TestSizeCategoryParse:
    @pytest.mark.parametrize("raw", ["small", "SMALL", " Small "])
    def test_case_insensitive(self, raw):
        assert SizeCategory.parse(raw) is SizeCategory.SMALL

    def test_unknown_label_raises(self):
        with pytest.raises(ValueError, match="Unknown size category"):
            SizeCategory.parse("Huge")


def test_power_thresholds_are_ordered():
    assert LOW_POWER_THRESHOLD_W < HIGH_POWER_THRESHOLD_W
    assert (LOW_POWER_THRESHOLD_W, HIGH_POWER_THRESHOLD_W) == (10.0, 24.0)
