import numpy as np
import pytest

from core.errors import InvalidConfigurationError
from glidepath.profiles import GLIDEPATHS, available_profiles, get_glidepath
from glidepath.resolver import allocation_schedule, interpolate_allocations, resolve_allocation


@pytest.mark.parametrize("years", [15.0001, 20, 45.1])
def test_growth_phase_beyond_growth_end(balanced_glidepath, years):
    assert resolve_allocation(years, balanced_glidepath) == dict(balanced_glidepath.growth.weights)


def test_boundary_at_growth_end_is_growth_weights(balanced_glidepath):
    assert resolve_allocation(15, balanced_glidepath) == dict(balanced_glidepath.growth.weights)


def test_boundary_at_pre_retirement_end_is_pre_retirement_weights(balanced_glidepath):
    got = resolve_allocation(10, balanced_glidepath)
    assert got == dict(balanced_glidepath.pre_retirement.weights)


def test_at_retirement_weights_at_zero_years(balanced_glidepath):
    got = resolve_allocation(0, balanced_glidepath)
    for name, w in balanced_glidepath.at_retirement.weights.items():
        assert got[name] == pytest.approx(w)


def test_midpoint_of_first_segment(balanced_glidepath):
    got = resolve_allocation(12.5, balanced_glidepath)
    assert got["Equity"] == pytest.approx(0.65)
    assert got["Bonds"] == pytest.approx(0.275)
    assert got["Cash"] == pytest.approx(0.075)


def test_second_segment_progress(balanced_glidepath):
    # 2.5 of 10 years into the pre-retirement -> at-retirement segment
    got = resolve_allocation(7.5, balanced_glidepath)
    assert got["Equity"] == pytest.approx(0.5 + 0.25 * (0.25 - 0.5))


@pytest.mark.parametrize("years", np.linspace(0, 20, 81))
def test_interpolation_preserves_unit_sum(balanced_glidepath, years):
    assert sum(resolve_allocation(years, balanced_glidepath).values()) == pytest.approx(1.0)


def test_interpolate_treats_missing_asset_as_zero():
    got = interpolate_allocations({"A": 1.0}, {"B": 1.0}, 0.25)
    assert got == pytest.approx({"A": 0.75, "B": 0.25})


def test_allocation_schedule_rows(three_asset_catalog, balanced_glidepath):
    months = 20 * 12 + 1
    schedule = allocation_schedule(months, balanced_glidepath, three_asset_catalog.names)
    assert schedule.shape == (months, 3)
    # first month is beyond growth_end
    np.testing.assert_array_equal(schedule[0], [0.8, 0.15, 0.05])
    # row m uses horizon (months - m) / 12
    m = 200
    expected = resolve_allocation((months - m) / 12, balanced_glidepath)
    np.testing.assert_allclose(schedule[m], [expected[n] for n in three_asset_catalog.names])


def test_allocation_schedule_unknown_asset(balanced_glidepath):
    with pytest.raises(InvalidConfigurationError, match="not in the asset catalog"):
        allocation_schedule(12, balanced_glidepath, ["Gold"])


def test_builtin_profiles():
    assert available_profiles() == ["SMA", "SMAHighGrowth"]
    sma = get_glidepath("SMA")
    assert sma.growth_end == 15
    assert sma.pre_retirement_end == 10
    assert sma.growth.weights["Global Equity"] == 0.793
    assert GLIDEPATHS["SMAHighGrowth"].growth.weights["Global Equity"] == 0.927


def test_unknown_profile():
    with pytest.raises(InvalidConfigurationError, match="Available"):
        get_glidepath("Aggressive")


def test_custom_profile_catalog(balanced_glidepath):
    assert get_glidepath("mine", {"mine": balanced_glidepath}) is balanced_glidepath
