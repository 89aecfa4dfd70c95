# Package-wide conventions and defaults (feel free to tune per application)

# Calendar used to convert short horizons to years (no leap days, 24h trading)
MINUTES_PER_YEAR = 365 * 24 * 60

# |invariant| below this counts as "on the reserve curve"
DEFAULT_TOLERANCE = 1e-10

# Annualized log drift; zero is the neutral short-horizon choice
DEFAULT_DRIFT = 0.0

# Reserve-curve root finding
DEFAULT_BISECTION_TOL  = 1e-12
DEFAULT_BISECTION_ITER = 200
