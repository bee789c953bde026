"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
SQRT_2 = math.sqrt(2.0)
SQRT_2_PI = math.sqrt(2.0 * math.pi)

# double precision machine epsilon, used as the underflow guard for v and w
EPSILON = 2.220446049250313e-16

# erf/erfc saturate beyond this magnitude
ERF_MAX_VAL = 6.0

# Weng-Lin defaults, all on the classic TrueSkill scale of mu = 25
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0
DEFAULT_BETA = DEFAULT_MU / 6.0
DEFAULT_KAPPA = 1e-4
DEFAULT_TAU = DEFAULT_MU / 300.0

# quality evaluation
QUALITY_SIGMA_RANGE = 3.0
QUALITY_EVEN_MATCH_THRESHOLD = 1e-3
