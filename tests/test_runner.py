import logging

import numpy as np
import pytest

from core.config import SimulationConfig
from core.errors import InvalidConfigurationError, SimulationCancelled
from core.schema import Glidepath, LifestylePhase
from engine.cancellation import CancellationToken
from engine.runner import run_profile, run_simulations
from engine.trajectory import simulate_one_run
from glidepath.resolver import allocation_schedule


def test_single_run_ensemble_is_the_trajectory(make_user, catalog, sma):
    user = make_user(num_simulations=1, percentiles=[0, 5, 50, 95, 100])
    result = run_simulations(user, catalog, sma, config=SimulationConfig(seed=7))

    child = np.random.SeedSequence(7).spawn(1)[0]
    path = simulate_one_run(
        user, catalog, sma,
        rng=np.random.default_rng(child),
        schedule=allocation_schedule(user.months, sma, catalog.names),
    )
    for p in user.percentiles:
        np.testing.assert_array_equal(result[p], path)


def test_result_length_matches_trajectory(make_user, catalog, sma):
    user = make_user(age=39, num_simulations=20)
    result = run_simulations(user, catalog, sma, config=SimulationConfig(seed=1))
    for p in user.percentiles:
        assert len(result[p]) == (67 - 39) * 12 + 2


def test_percentiles_are_monotone(make_user, catalog, sma):
    user = make_user(num_simulations=200, percentiles=[25, 50, 75])
    result = run_simulations(user, catalog, sma, config=SimulationConfig(seed=3))
    assert np.all(result[25] <= result[50])
    assert np.all(result[50] <= result[75])


def test_zero_inputs_give_zero_bands(make_user, catalog, sma):
    user = make_user(
        age=22, retirement_age=67, existing_pot=0, contribution_rate=0,
        starting_salary=0, num_simulations=25,
    )
    result = run_simulations(user, catalog, sma, config=SimulationConfig(seed=0))
    for p in user.percentiles:
        np.testing.assert_array_equal(result[p], 0.0)


def test_deterministic_ensemble_collapses(make_user, cash_only_catalog, cash_only_glidepath):
    user = make_user(age=60, retirement_age=65, num_simulations=10)
    result = run_simulations(user, cash_only_catalog, cash_only_glidepath)
    np.testing.assert_allclose(result[5], result[95])


def test_same_seed_reproduces(make_user, catalog, sma):
    user = make_user(num_simulations=50)
    a = run_simulations(user, catalog, sma, config=SimulationConfig(seed=123))
    b = run_simulations(user, catalog, sma, config=SimulationConfig(seed=123))
    assert a == b


def test_different_seeds_differ(make_user, catalog, sma):
    user = make_user(num_simulations=50)
    a = run_simulations(user, catalog, sma, config=SimulationConfig(seed=1))
    b = run_simulations(user, catalog, sma, config=SimulationConfig(seed=2))
    assert a != b


def test_run_profile_resolves_named_glidepath(make_user, catalog, sma):
    user = make_user(num_simulations=30, profile_name="SMA")
    cfg = SimulationConfig(seed=5)
    assert run_profile(user, config=cfg) == run_simulations(user, catalog, sma, config=cfg)


def test_run_profile_unknown_name(make_user):
    with pytest.raises(InvalidConfigurationError, match="Unknown glidepath"):
        run_profile(make_user(profile_name="Nope"))


def test_invalid_glidepath_fails_before_simulating(make_user, catalog):
    phase = LifestylePhase("growth", {"Gold": 1.0})
    gp = Glidepath(phase, phase, phase, growth_end=15, pre_retirement_end=10)
    with pytest.raises(InvalidConfigurationError, match="Gold"):
        run_simulations(make_user(num_simulations=5), catalog, gp)


def test_too_many_percentiles_for_config(make_user, catalog, sma):
    user = make_user(percentiles=[5, 50, 95])
    with pytest.raises(InvalidConfigurationError, match="at most 2"):
        run_simulations(user, catalog, sma, config=SimulationConfig(max_percentiles=2))


def test_cancelled_before_start(make_user, catalog, sma):
    token = CancellationToken()
    token.cancel()
    with pytest.raises(SimulationCancelled) as exc:
        run_simulations(make_user(num_simulations=10), catalog, sma, cancel_token=token)
    assert exc.value.completed_runs == 0
    assert exc.value.requested_runs == 10


class _CancelAfter(CancellationToken):
    def __init__(self, checks: int):
        super().__init__()
        self._remaining = checks

    @property
    def cancelled(self) -> bool:
        self._remaining -= 1
        return self._remaining < 0


def test_cancelled_between_runs(make_user, catalog, sma):
    with pytest.raises(SimulationCancelled) as exc:
        run_simulations(make_user(num_simulations=10), catalog, sma, cancel_token=_CancelAfter(3))
    assert exc.value.completed_runs == 3


def test_summary_attached(make_user, catalog, sma):
    user = make_user(num_simulations=40)
    result = run_simulations(user, catalog, sma, config=SimulationConfig(seed=9))
    summary = result.summary
    assert summary["Runs"].iloc[0] == 40
    assert summary["P50"].iloc[0] == pytest.approx(result.final_values()[50])


def test_logs_run_start(make_user, catalog, sma, caplog):
    with caplog.at_level(logging.INFO, logger="engine.runner"):
        run_simulations(make_user(num_simulations=5), catalog, sma, config=SimulationConfig(seed=0))
    assert "Running 5 simulations" in caplog.text
