"""
Dynamic pm-AMM (prediction-market AMM) driven by Gaussian score dynamics.

Reserves x (YES) and y (NO) sit on the curve

    (y - x) Φ(z) + L√(T-t) φ(z) - y = 0,     z = (y - x) / (L√(T-t))

which keeps expected loss-versus-rebalancing, as a fraction of pool value,
constant over the remaining life of the market. Liquidity decays like
L√(T-t) as t -> T, and at expiry the pool settles to the winning side.
"""
from __future__ import annotations
import logging
import math
from typing import Sequence
import numpy as np
from .normaldist import normpdf, normcdf
from .conventions import DEFAULT_TOLERANCE, DEFAULT_BISECTION_TOL, DEFAULT_BISECTION_ITER

logger = logging.getLogger(__name__)


def _require_liquidity(L: float) -> None:
    if L <= 0:
        raise ValueError("Liquidity parameter L must be positive")


def effective_liquidity(L: float, T: float, t: float) -> float:
    """L√(T-t), or 0 once the market has expired. L itself is not validated."""
    time_to_expiry = T - t
    if time_to_expiry <= 0:
        return 0.0
    return L * math.sqrt(time_to_expiry)


def dynamic_pm_amm_invariant(x: float, y: float, L: float, T: float, t: float) -> float:
    """
    Residual of the reserve invariant; zero exactly on the no-arbitrage curve.

    After expiry the invariant collapses to (y - x) - y = -x, i.e. the x
    reserve must be exhausted at settlement.
    """
    time_to_expiry = T - t
    if time_to_expiry <= 0:
        logger.debug("invariant evaluated at/after expiry (T-t=%g); settling to -x", time_to_expiry)
        return (y - x) - y
    _require_liquidity(L)
    scale = L * math.sqrt(time_to_expiry)
    if scale == 0:
        # only reachable through underflow
        logger.debug("effective liquidity underflowed to zero; settling to -x")
        return (y - x) - y
    z = (y - x) / scale
    return (y - x) * normcdf(z) + scale * normpdf(z) - y


def check_dynamic_pm_amm_invariant(x: float, y: float, L: float, T: float, t: float,
                                   tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return abs(dynamic_pm_amm_invariant(x, y, L, T, t)) < tolerance


def dynamic_pm_amm_price(x: float, y: float, L: float, T: float, t: float) -> float:
    """
    Marginal price of token X, Φ((y - x)/(L√(T-t))), in [0,1].

    At or after expiry the price snaps to 1 if y > x and 0 otherwise
    (ties settle to 0).
    """
    time_to_expiry = T - t
    if time_to_expiry <= 0:
        logger.debug("price evaluated at/after expiry (T-t=%g); hard settlement", time_to_expiry)
        return 1.0 if y > x else 0.0
    _require_liquidity(L)
    scale = L * math.sqrt(time_to_expiry)
    if scale == 0:
        # only reachable through underflow
        logger.debug("effective liquidity underflowed to zero; hard settlement")
        return 1.0 if y > x else 0.0
    return normcdf((y - x) / scale)


# ---- Schedules over time ----

def price_schedule(x: float, y: float, L: float, T: float, times: Sequence[float]) -> np.ndarray:
    """Implied price of X for fixed reserves at each time in `times`."""
    return np.array([dynamic_pm_amm_price(x, y, L, T, float(ti)) for ti in times], dtype=float)


def effective_liquidity_schedule(L: float, T: float, times: Sequence[float]) -> np.ndarray:
    return np.array([effective_liquidity(L, T, float(ti)) for ti in times], dtype=float)


# ---- Reserve curve ----

def reserve_curve_y(x: float, L: float, T: float, t: float,
                    tol: float = DEFAULT_BISECTION_TOL,
                    max_iter: int = DEFAULT_BISECTION_ITER) -> float:
    """
    The y reserve that puts (x, y) on the invariant curve at time t.

    The invariant is strictly decreasing in y (d/dy = Φ(z) - 1), positive at
    y = 0 and tends to -x as y grows, so for x > 0 the root is unique and
    positive. We bracket it by doubling and then bisect.
    """
    if x <= 0:
        raise ValueError("Reserve x must be positive to solve for the curve.")
    if T - t <= 0:
        raise ValueError("Reserve curve is undefined at or after expiry.")
    _require_liquidity(L)

    def f(y: float) -> float:
        return dynamic_pm_amm_invariant(x, y, L, T, t)

    lo = 0.0
    hi = max(x, effective_liquidity(L, T, t))
    n_double = 0
    while f(hi) >= 0:
        lo = hi
        hi *= 2.0
        n_double += 1
        if n_double > max_iter:
            raise ValueError("Could not bracket the reserve curve root.")
    logger.debug("reserve_curve_y bracket [%g, %g] after %d doublings", lo, hi, n_double)

    for k in range(max_iter):
        mid = 0.5 * (lo + hi)
        if f(mid) > 0:
            lo = mid
        else:
            hi = mid
        if hi - lo <= tol * max(1.0, hi):
            logger.debug("reserve_curve_y converged in %d iterations", k + 1)
            return 0.5 * (lo + hi)
    raise ValueError(f"Reserve curve bisection did not converge in {max_iter} iterations.")
