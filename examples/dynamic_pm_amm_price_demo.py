"""
Example: implied prices of a dynamic pm-AMM pool.

- L = 100, expiry T = 1
- balanced, bullish and bearish reserves at t = 0
- a fixed pool (x=90, y=110) as expiry approaches: effective liquidity
  L√(T-t) shrinks and the price is pushed toward the winning side

Run:
    python examples/dynamic_pm_amm_price_demo.py
"""
import numpy as np

from pmprob import dynamic_pm_amm_price, dynamic_pm_amm_invariant, price_schedule, effective_liquidity_schedule


def main():
    L = 100.0
    T = 1.0

    print("=== Dynamic pm-AMM price examples ===\n")
    for label, x, y in [("Equal reserves", 100, 100), ("Bullish market", 80, 120), ("Bearish market", 120, 80)]:
        t = 0.0
        price = dynamic_pm_amm_price(x, y, L, T, t)
        print(f"--- {label} (x={x}, y={y}) ---")
        print(f"Time to expiry: {T - t}")
        print(f"Implied price (P(YES)): {price * 100:.2f}%")
        print(f"Invariant value: {dynamic_pm_amm_invariant(x, y, L, T, t):.6f}\n")

    print("--- Price sensitivity near expiration ---")
    x, y = 90, 110
    times = np.array([0.0, 0.25, 0.5, 0.75, 0.9, 0.99])
    prices = price_schedule(x, y, L, T, times)
    eff = effective_liquidity_schedule(L, T, times)
    print(f"Fixed reserves: x={x}, y={y}, L={L}")
    print("\nTime(t)  | Time-to-Expiry | Eff. Liquidity | Price")
    print("-" * 55)
    for ti, ei, pi in zip(times, eff, prices):
        print(f"{ti:7.2f} | {T - ti:14.2f} | {ei:14.2f} | {pi * 100:.2f}%")


if __name__ == "__main__":
    main()
