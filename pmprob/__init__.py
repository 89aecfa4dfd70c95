
from .normaldist import normpdf, normcdf, normcdf_array
from .pmamm import (
    dynamic_pm_amm_invariant, check_dynamic_pm_amm_invariant, dynamic_pm_amm_price,
    effective_liquidity, price_schedule, effective_liquidity_schedule, reserve_curve_y
)
from .gbm import (
    prob_price_gbm, prob_price_below_in_minutes, prob_price_above_in_minutes,
    prob_price_gbm_grid, minutes_to_years, threshold_stats, ThresholdStats
)
from .conventions import (
    MINUTES_PER_YEAR, DEFAULT_TOLERANCE, DEFAULT_DRIFT,
    DEFAULT_BISECTION_TOL, DEFAULT_BISECTION_ITER
)

__all__ = [
    "normpdf", "normcdf", "normcdf_array",
    "dynamic_pm_amm_invariant", "check_dynamic_pm_amm_invariant", "dynamic_pm_amm_price",
    "effective_liquidity", "price_schedule", "effective_liquidity_schedule", "reserve_curve_y",
    "prob_price_gbm", "prob_price_below_in_minutes", "prob_price_above_in_minutes",
    "prob_price_gbm_grid", "minutes_to_years", "threshold_stats", "ThresholdStats",
    "MINUTES_PER_YEAR", "DEFAULT_TOLERANCE", "DEFAULT_DRIFT",
    'DEFAULT_BISECTION_TOL','DEFAULT_BISECTION_ITER'
]
