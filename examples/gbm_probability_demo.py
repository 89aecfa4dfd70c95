"""
Example: chance that an asset trades above/below a threshold within a day.

- spot 2304, target 2500, horizon 1400 minutes, 54% annualized vol
- prints the horizon std, the required log move and its z-score, then the
  GBM probabilities and a small terminal CDF over nearby targets

Run:
    python examples/gbm_probability_demo.py
"""
import numpy as np

from pmprob import (
    prob_price_above_in_minutes, prob_price_below_in_minutes, prob_price_gbm,
    prob_price_gbm_grid, threshold_stats
)


def main():
    current = 2304.0
    target = 2500.0
    minutes = 1400.0
    vol = 0.54

    print("=== Parameters ===")
    print(f"Current: ${current}, Target: ${target}, Time: {minutes} min, Vol: {vol * 100:.0f}%")

    s = threshold_stats(current, target, minutes, vol)
    print(f"\nσ√T = {s.sigma_sqrt_t * 100:.4f}% (horizon std dev)")
    print(f"Required log move = {s.log_move * 100:.4f}%")
    print(f"Z-score = {s.z_score:.2f} standard deviations\n")

    p_above = prob_price_above_in_minutes(current, target, minutes, vol, 0.0)
    p_below = prob_price_below_in_minutes(current, target, minutes, vol, 0.0)
    p_raw = prob_price_gbm(current, target, s.time_in_years, vol, 0.0)
    print(f"P(S ≥ ${target} in {minutes:.0f} min) = {p_above * 100:.6f}%")
    print(f"P(S ≤ ${target} in {minutes:.0f} min) = {p_below * 100:.6f}%")
    print(f"P(S_T ≤ ${target}) (raw GBM)   = {p_raw * 100:.6f}%")

    print("\n=== Terminal CDF ===")
    targets = np.linspace(2100.0, 2500.0, 9)
    for k, p in zip(targets, prob_price_gbm_grid(current, targets, s.time_in_years, vol)):
        print(f"  K={k:8.2f}  P(S_T ≤ K) = {p:.4f}")


if __name__ == "__main__":
    main()
