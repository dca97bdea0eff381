"""Tests for harvest loss equations."""

import pytest

from forage.core.validation import InvalidInputError
from forage.harvest.curing import curing
from forage.harvest.losses import (
    estimate_harvest_losses,
    loss_mowing,
    loss_rain,
    loss_raking,
    loss_respiration,
    loss_tedding,
)


class TestRespirationLoss:
    """Tests for respiration loss during curing."""

    def test_known_value(self):
        expected = 0.000047 * 20 * 10 * (0.8**3.6 - 0.5**3.6) / (0.8 - 0.5)
        assert loss_respiration(0.8, 0.5, 20, 10) == pytest.approx(expected)
        assert loss_respiration(0.8, 0.5, 20, 10) == pytest.approx(0.01145, abs=1e-5)

    def test_symmetric_in_moisture(self):
        assert loss_respiration(0.5, 0.8, 20, 10) == pytest.approx(loss_respiration(0.8, 0.5, 20, 10))

    def test_scales_with_temperature_and_time(self):
        base = loss_respiration(0.8, 0.5, 10, 10)
        assert loss_respiration(0.8, 0.5, 20, 10) == pytest.approx(2 * base)
        assert loss_respiration(0.8, 0.5, 10, 20) == pytest.approx(2 * base)

    def test_wetter_forage_respires_more(self):
        assert loss_respiration(0.8, 0.7, 20, 10) > loss_respiration(0.4, 0.3, 20, 10)

    def test_equal_moisture_divides_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            loss_respiration(0.6, 0.6, 20, 10)

    def test_strict_equal_moisture(self):
        with pytest.raises(InvalidInputError, match="must differ from m_initial"):
            loss_respiration(0.6, 0.6, 20, 10, strict=True)

    def test_from_curing_series(self, mowing_day):
        series = curing(**mowing_day)
        loss = loss_respiration(series[0], series[-1], 18, 10)
        assert 0 < loss < 0.05


class TestRainLoss:
    """Tests for rain leaching loss."""

    def test_known_value(self):
        assert loss_rain(0.5, True, 0.4, 10, 500) == pytest.approx(0.0061 * 0.6 * 0.4 * 10 / 0.5)

    def test_unconditioned_factor(self):
        conditioned = loss_rain(0.5, True, 0.4, 10, 500)
        assert loss_rain(0.5, False, 0.4, 10, 500) == pytest.approx(0.8 * conditioned)

    def test_no_rain_no_loss(self):
        assert loss_rain(0.5, True, 0.4, 0, 500) == 0.0

    def test_linear_in_rainfall(self):
        assert loss_rain(0.5, True, 0.4, 20, 500) == pytest.approx(2 * loss_rain(0.5, True, 0.4, 10, 500))

    def test_decreases_with_swath_density(self):
        losses = [loss_rain(0.5, True, 0.4, 10, sd) for sd in (100, 200, 400, 800, 1600)]
        assert losses == sorted(losses, reverse=True)
        assert len(set(losses)) == len(losses)

    def test_high_fiber_leaches_less(self):
        assert loss_rain(0.5, True, 0.6, 10, 500) < loss_rain(0.5, True, 0.3, 10, 500)

    def test_zero_swath_density(self):
        with pytest.raises(ZeroDivisionError):
            loss_rain(0.5, True, 0.4, 10, 0)
        with pytest.raises(InvalidInputError, match="swath_density"):
            loss_rain(0.5, True, 0.4, 10, 0, strict=True)


class TestMowingLoss:
    """Tests for mowing and conditioning shatter loss."""

    def test_unconditioned_scenario(self):
        assert loss_mowing(1.0, False, 0.5) == pytest.approx(0.006)

    def test_conditioned_doubles(self):
        assert loss_mowing(1.0, True, 0.5) == pytest.approx(0.012)

    def test_grass_only(self):
        assert loss_mowing(1.0, True, 0.0) == pytest.approx(0.006)

    def test_linear_in_stage_factor(self):
        assert loss_mowing(2.0, True, 0.3) == pytest.approx(2 * loss_mowing(1.0, True, 0.3))

    def test_strict_legume_fraction(self):
        with pytest.raises(InvalidInputError, match="legume_fraction"):
            loss_mowing(1.0, True, 1.5, strict=True)


class TestTeddingLoss:
    """Tests for tedding shatter loss."""

    def test_known_value(self):
        assert loss_tedding(0.25, 0.5) == pytest.approx(0.154)

    def test_bone_dry_grass(self):
        assert loss_tedding(0.0, 0.0) == pytest.approx(0.044)

    def test_drier_forage_shatters_more(self):
        assert loss_tedding(0.3, 0.2) > loss_tedding(0.7, 0.2)

    def test_legumes_shatter_more(self):
        assert loss_tedding(0.5, 0.4) > loss_tedding(0.5, 0.1)


class TestRakingLoss:
    """Tests for raking shatter loss."""

    def test_known_value(self):
        assert loss_raking(0.25, 0.5, 500) == pytest.approx(0.07)

    def test_decreases_with_swath_density(self):
        losses = [loss_raking(0.4, 0.3, sd) for sd in (100, 200, 400, 800, 1600)]
        assert losses == sorted(losses, reverse=True)
        assert len(set(losses)) == len(losses)

    def test_drier_forage_shatters_more(self):
        assert loss_raking(0.2, 0.3, 500) > loss_raking(0.6, 0.3, 500)

    def test_strict_moisture(self):
        with pytest.raises(InvalidInputError, match="m_initial"):
            loss_raking(1.2, 0.3, 500, strict=True)


class TestEstimateHarvestLosses:
    """Tests for the combined harvest loss estimate."""

    @pytest.fixture
    def event(self):
        return {
            "conditioned": True,
            "ndf": 0.4,
            "rainfall": 5,
            "swath_density": 500,
            "stage_factor": 1.0,
            "legume_fraction": 0.3,
        }

    def test_components_match_functions(self, event):
        losses = estimate_harvest_losses(0.8, 0.4, 20, 30, **event, tedded=True, raked=True)
        assert losses["respiration"] == pytest.approx(loss_respiration(0.8, 0.4, 20, 30))
        assert losses["rain"] == pytest.approx(loss_rain(0.8, True, 0.4, 5, 500))
        assert losses["mowing"] == pytest.approx(loss_mowing(1.0, True, 0.3))
        assert losses["tedding"] == pytest.approx(loss_tedding(0.8, 0.3))
        assert losses["raking"] == pytest.approx(loss_raking(0.4, 0.3, 500))

    def test_total_is_sum(self, event):
        losses = estimate_harvest_losses(0.8, 0.4, 20, 30, **event, tedded=True, raked=True)
        components = ("respiration", "rain", "mowing", "tedding", "raking")
        assert losses["total"] == pytest.approx(sum(losses[c] for c in components))

    def test_operations_not_performed(self, event):
        losses = estimate_harvest_losses(0.8, 0.4, 20, 30, **event)
        assert losses["tedding"] == 0.0
        assert losses["raking"] == 0.0

    def test_operation_moisture_override(self, event):
        losses = estimate_harvest_losses(
            0.8, 0.4, 20, 30, **event, tedded=True, raked=True, tedding_moisture=0.7, raking_moisture=0.5
        )
        assert losses["tedding"] == pytest.approx(loss_tedding(0.7, 0.3))
        assert losses["raking"] == pytest.approx(loss_raking(0.5, 0.3, 500))

    def test_unchanged_moisture_respiration_limit(self, event):
        """Equal moistures use the limit of the respiration equation."""
        losses = estimate_harvest_losses(0.6, 0.6, 20, 10, **event)
        assert losses["respiration"] == pytest.approx(0.000047 * 20 * 10 * 3.6 * 0.6**2.6)
        assert losses["respiration"] == pytest.approx(0.0089665, abs=1e-7)

    def test_unchanged_moisture_continuous(self, event):
        """The limit matches a vanishingly small moisture change."""
        losses = estimate_harvest_losses(0.6, 0.6, 20, 10, **event)
        assert losses["respiration"] == pytest.approx(loss_respiration(0.6, 0.6 - 1e-6, 20, 10), rel=1e-4)

    def test_strict_propagates(self, event):
        with pytest.raises(InvalidInputError):
            estimate_harvest_losses(0.8, 0.4, 20, 30, **{**event, "ndf": 2.0}, strict=True)
