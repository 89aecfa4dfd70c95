"""
Short-horizon price-threshold probabilities under Geometric Brownian Motion.

With log S_t ~ N(log S_0 + (mu - sigma^2/2) t, sigma^2 t),

    P(S_t <= K) = Φ( (ln(K/S_0) - (mu - sigma^2/2) t) / (sigma √t) ).

The drift term uses the Itô (variance) correction sigma^2/2. An older
minute-horizon variant subtracted 0.5·√sigma·t from mu instead; that is not
a valid log drift and is not offered here.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging
import math
from typing import Sequence
import numpy as np
from .normaldist import normcdf, normcdf_array
from .conventions import MINUTES_PER_YEAR, DEFAULT_DRIFT

logger = logging.getLogger(__name__)


def _require_prices(current_price: float, target_price) -> None:
    if current_price <= 0 or np.any(np.asarray(target_price) <= 0):
        raise ValueError("Current and target prices must be positive")


def _point_mass(current_price: float, target_price: float) -> float:
    # no diffusion: S_t == S_0 almost surely
    return 1.0 if target_price >= current_price else 0.0


def minutes_to_years(minutes: float) -> float:
    return minutes / MINUTES_PER_YEAR


def prob_price_gbm(current_price: float, target_price: float, time_in_years: float,
                   annual_vol: float, annual_drift: float = DEFAULT_DRIFT) -> float:
    """Probability that the price at `time_in_years` is at or below `target_price`."""
    _require_prices(current_price, target_price)
    if time_in_years <= 0 or annual_vol <= 0:
        logger.debug("degenerate GBM (t=%g, vol=%g); using point mass at spot", time_in_years, annual_vol)
        return _point_mass(current_price, target_price)
    drift_adj = (annual_drift - 0.5 * annual_vol * annual_vol) * time_in_years
    log_moneyness = math.log(target_price / current_price)
    denom = annual_vol * math.sqrt(time_in_years)
    if denom == 0:
        # only reachable through underflow
        logger.debug("GBM horizon std underflowed to zero; using point mass at spot")
        return _point_mass(current_price, target_price)
    return normcdf((log_moneyness - drift_adj) / denom)


def prob_price_below_in_minutes(current_price: float, target_price: float, minutes: float,
                                annual_vol: float, annual_drift: float = DEFAULT_DRIFT) -> float:
    return prob_price_gbm(current_price, target_price, minutes_to_years(minutes), annual_vol, annual_drift)


def prob_price_above_in_minutes(current_price: float, target_price: float, minutes: float,
                                annual_vol: float, annual_drift: float = DEFAULT_DRIFT) -> float:
    return 1.0 - prob_price_below_in_minutes(current_price, target_price, minutes, annual_vol, annual_drift)


def prob_price_gbm_grid(current_price: float, targets: Sequence[float], time_in_years: float,
                        annual_vol: float, annual_drift: float = DEFAULT_DRIFT) -> np.ndarray:
    """P(S_t <= K) for each K in `targets` (a discrete terminal CDF)."""
    k = np.asarray(targets, dtype=float)
    _require_prices(current_price, k)
    denom = annual_vol * math.sqrt(time_in_years) if time_in_years > 0 and annual_vol > 0 else 0.0
    if denom == 0:
        logger.debug("degenerate GBM grid (t=%g, vol=%g); using point mass at spot", time_in_years, annual_vol)
        return np.where(k >= current_price, 1.0, 0.0)
    drift_adj = (annual_drift - 0.5 * annual_vol * annual_vol) * time_in_years
    return normcdf_array((np.log(k / current_price) - drift_adj) / denom)


# ---- Diagnostics ----

@dataclass(frozen=True)
class ThresholdStats:
    """
    How far a target sits from spot in horizon standard deviations.
    - sigma_sqrt_t: std of the log price over the horizon
    - log_move: ln(target/current), the required log move
    - z_score: log_move / sigma_sqrt_t (nan when there is no diffusion)
    """
    time_in_years: float
    sigma_sqrt_t: float
    log_move: float
    z_score: float


def threshold_stats(current_price: float, target_price: float, minutes: float,
                    annual_vol: float) -> ThresholdStats:
    _require_prices(current_price, target_price)
    t = minutes_to_years(max(minutes, 0.0))
    sigma_sqrt_t = max(annual_vol, 0.0) * math.sqrt(t)
    log_move = math.log(target_price / current_price)
    z = log_move / sigma_sqrt_t if sigma_sqrt_t > 0 else float("nan")
    return ThresholdStats(time_in_years=t, sigma_sqrt_t=sigma_sqrt_t, log_move=log_move, z_score=z)
