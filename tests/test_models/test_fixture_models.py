"""Tests for DistanceSample and Fixture models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grow_light_advisor.models.fixture import DistanceSample, Fixture


class TestDistanceSample:
    def test_valid_construction(self):
        s = DistanceSample(distance_cm=30, intensity=469, illuminance=28189)
        assert s.distance_cm == 30.0
        assert s.intensity == 469.0
        assert s.illuminance == 28189.0

    def test_illuminance_defaults_to_zero(self):
        assert DistanceSample(distance_cm=30, intensity=10).illuminance == 0.0

    @pytest.mark.parametrize("distance", [0, -5])
    def test_non_positive_distance_raises(self, distance):
        with pytest.raises(ValidationError, match="distance_cm must be positive"):
            DistanceSample(distance_cm=distance, intensity=100)

    def test_negative_intensity_raises(self):
        with pytest.raises(ValidationError, match="non-negative"):
            DistanceSample(distance_cm=30, intensity=-1)

    def test_zero_intensity_allowed(self):
        assert DistanceSample(distance_cm=300, intensity=0).intensity == 0.0

    def test_frozen(self):
        s = DistanceSample(distance_cm=30, intensity=100)
        with pytest.raises(ValidationError):
            s.intensity = 200


class TestFixture:
    def test_samples_keep_sheet_order(self):
        f = Fixture(
            power_rating=24,
            samples=[
                DistanceSample(distance_cm=60, intensity=277),
                DistanceSample(distance_cm=20, intensity=2266),
            ],
        )
        assert [s.distance_cm for s in f.samples] == [60.0, 20.0]
        assert isinstance(f.samples, tuple)

    def test_empty_samples_raises(self):
        with pytest.raises(ValidationError, match="at least one distance sample"):
            Fixture(power_rating=24, samples=())

    def test_duplicate_distance_raises(self):
        with pytest.raises(ValidationError, match="Duplicate distance"):
            Fixture(
                power_rating=24,
                samples=(
                    DistanceSample(distance_cm=30, intensity=100),
                    DistanceSample(distance_cm=30, intensity=120),
                ),
            )

    def test_non_positive_power_raises(self):
        with pytest.raises(ValidationError, match="power_rating must be positive"):
            Fixture(power_rating=0, samples=(DistanceSample(distance_cm=30, intensity=1),))

    @pytest.mark.parametrize("power, label", [(24, "24W"), (7.5, "7.5W")])
    def test_label(self, power, label):
        f = Fixture(power_rating=power, samples=(DistanceSample(distance_cm=30, intensity=1),))
        assert f.label == label
