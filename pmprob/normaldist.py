"""Standard normal Φ and φ on top of the C library erf (double precision)."""
import math
import numpy as np

SQRT2 = math.sqrt(2.0)
SQRT2PI = math.sqrt(2.0*math.pi)

def normpdf(z: float) -> float:
    return math.exp(-0.5*z*z) / SQRT2PI

def normcdf(z: float) -> float:
    # math.erf is accurate to a few ulp over the whole real line
    return 0.5 * (1.0 + math.erf(z / SQRT2))

# elementwise over arrays of z-scores
normcdf_array = np.vectorize(normcdf, otypes=[float])
