"""
Projection runner — orchestrates N independent trajectories and aggregates them.

  1. Validate catalog, glidepath and user inputs (fail fast, before any draws)
  2. Build the allocation schedule once; it is the same for every run
  3. Spawn one child seed per run from a SeedSequence, so every run has its own
     independent Generator and a fixed seed reproduces the whole ensemble
  4. Run the trajectories into one (n_runs, n_points) array, checking the
     cancellation token between runs
  5. Percentile trajectories + terminal pot summary -> SimulationResult
"""

from __future__ import annotations

import logging
import time
from typing import Mapping, Optional

import numpy as np

from core.config import SimulationConfig
from core.errors import SimulationCancelled
from core.schema import AssetCatalog, Glidepath, UserInputs
from glidepath.profiles import get_glidepath
from glidepath.resolver import allocation_schedule
from market.catalog import get_asset_catalog
from outcomes.aggregator import percentile_trajectories
from outcomes.metrics import summarize_final_pots
from outcomes.result import SimulationResult
from validation.validators import validate_simulation_inputs

from .cancellation import CancellationToken
from .trajectory import simulate_one_run

logger = logging.getLogger(__name__)


def run_simulations(
    user: UserInputs,
    catalog: AssetCatalog,
    glidepath: Glidepath,
    *,
    config: Optional[SimulationConfig] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> SimulationResult:
    """
    Run the full Monte Carlo projection.

    Parameters
    ----------
    user : UserInputs
        Per-projection parameters (num_simulations, percentiles, ...)
    catalog : AssetCatalog
        Asset classes and the reference asset
    glidepath : Glidepath
        Allocation profile to follow
    config : SimulationConfig, optional
        Engine settings; config.seed=None draws from OS entropy
    cancel_token : CancellationToken, optional
        Checked between runs; raises SimulationCancelled when set

    Returns
    -------
    SimulationResult mapping each requested percentile to a trajectory of
    length user.trajectory_length
    """
    cfg = config or SimulationConfig()
    validate_simulation_inputs(user, catalog, glidepath, cfg).raise_if_invalid()

    months = user.months
    n_runs = user.num_simulations
    logger.info(
        "Running %d simulations over %d months (profile=%s, seed=%s)",
        n_runs, months, user.profile_name, cfg.seed,
    )
    started = time.perf_counter()

    schedule = allocation_schedule(months, glidepath, catalog.names)
    child_seeds = np.random.SeedSequence(cfg.seed).spawn(n_runs)

    trajectories = np.empty((n_runs, user.trajectory_length), dtype=float)
    for i, child in enumerate(child_seeds):
        if cancel_token is not None and cancel_token.cancelled:
            logger.warning("Simulation cancelled after %d of %d runs", i, n_runs)
            raise SimulationCancelled(i, n_runs)

        trajectories[i] = simulate_one_run(
            user,
            catalog,
            glidepath,
            rng=np.random.default_rng(child),
            schedule=schedule,
        )
        if cfg.progress_every and (i + 1) % cfg.progress_every == 0:
            logger.debug("Completed %d/%d runs", i + 1, n_runs)

    bands = percentile_trajectories(trajectories, user.percentiles)
    summary = summarize_final_pots(trajectories, percentiles=user.percentiles)

    logger.info(
        "Finished %d simulations in %.2fs; median final pot %.0f",
        n_runs, time.perf_counter() - started, float(np.median(trajectories[:, -1])),
    )
    return SimulationResult(bands, start_age=user.age, summary=summary)


def run_profile(
    user: UserInputs,
    catalog: Optional[AssetCatalog] = None,
    profiles: Optional[Mapping[str, Glidepath]] = None,
    *,
    config: Optional[SimulationConfig] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> SimulationResult:
    """
    Run a projection for the glidepath named by user.profile_name.

    Defaults to the built-in asset catalog and glidepath profiles.
    """
    glidepath = get_glidepath(user.profile_name, profiles)
    return run_simulations(
        user,
        catalog if catalog is not None else get_asset_catalog(),
        glidepath,
        config=config,
        cancel_token=cancel_token,
    )
