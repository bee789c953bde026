"""math utility functions for rating systems"""
import math
import numpy as np
from scipy.special import expit
from bayesrank.utils.constants import SQRT_2, SQRT_2_PI, EPSILON, ERF_MAX_VAL


def sigmoid(x):
    """logistic function, saturates to 0 and 1 instead of overflowing"""
    return expit(x)


# rational approximation coefficients for erf on |x| <= 1
ERF_T = (
    9.60497373987051638749e0,
    9.00260197203842689217e1,
    2.23200534594684319226e3,
    7.00332514112805075473e3,
    5.55923013010394962768e4,
)
ERF_U = (
    3.35617141647503099647e1,
    5.21357949780152679795e2,
    4.59432382970980127987e3,
    2.26290000613890934246e4,
    4.92673942608635921086e4,
)

# erfc coefficients for 1 < |x| < 8
ERFC_P = (
    2.46196981473530512524e-10,
    5.64189564831068821977e-1,
    7.46321056442269912687e0,
    4.86371970985681366614e1,
    1.96520832956077098242e2,
    5.26445194995477358631e2,
    9.34528527171957607540e2,
    1.02755188689515710272e3,
    5.57535335369399327526e2,
)
ERFC_Q = (
    1.32281951154744992508e1,
    8.67072140885989742329e1,
    3.54937778887819891062e2,
    9.75708501743205489753e2,
    1.82390916687909736289e3,
    2.24633760818710981792e3,
    1.65666309194161350182e3,
    5.57535340817727675546e2,
)

# erfc coefficients for |x| >= 8
ERFC_R = (
    5.64189583547755073984e-1,
    1.27536670759978104416e0,
    5.01905042251180477414e0,
    6.16021097993053585195e0,
    7.40974269950448939160e0,
    2.97886665372100240670e0,
)
ERFC_S = (
    2.26052863220117276590e0,
    9.39603524938001434673e0,
    1.20489539808096656605e1,
    1.70814450747565897222e1,
    9.60896809063285878198e0,
    3.36907645100081516050e0,
)


def polevl(x, coefs):
    """evaluate a polynomial with coefficients ordered from the highest power down, works on scalars and arrays"""
    ans = 0.0
    power = len(coefs) - 1
    for coef in coefs:
        ans = ans + coef * x**power
        power -= 1
    return ans


def p1evl(x, coefs):
    """same as polevl but with an implicit leading coefficient of 1"""
    return polevl(x, (1.0,) + tuple(coefs))


def erfc(a):
    """
    complementary error function, cephes style rational approximation

    saturates to 0 and 2 beyond |a| >= 6 and switches coefficient sets at |a| = 8
    """
    if a == 0:
        return 1.0
    if a >= ERF_MAX_VAL:
        return 0.0
    if a <= -ERF_MAX_VAL:
        return 2.0

    x = math.fabs(a)
    z = math.exp(-a * a)
    if x < 8.0:
        p = polevl(x, ERFC_P)
        q = p1evl(x, ERFC_Q)
    else:
        p = polevl(x, ERFC_R)
        q = p1evl(x, ERFC_S)
    y = (z * p) / q
    if a < 0:
        y = 2.0 - y
    return y


def erf(x):
    """
    error function
    a direct series for |x| <= 1, 1 - erfc(x) otherwise
    """
    if x == 0:
        return 0.0
    if x >= ERF_MAX_VAL:
        return 1.0
    if x <= -ERF_MAX_VAL:
        return -1.0
    if math.fabs(x) > 1.0:
        return 1.0 - erfc(x)
    z = x * x
    return x * polevl(z, ERF_T) / p1evl(z, ERF_U)


def norm_pdf(x):
    """pdf of standard normal"""
    return math.exp(-x * x / 2.0) / SQRT_2_PI


def norm_cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + erf(x / SQRT_2))


def erfc_vector(a):
    """calculate erfc in a vectorized fashion"""
    a = np.asarray(a, dtype=np.float64)
    x = np.abs(a)
    z = np.exp(-a * a)
    low_mask = x < 8.0
    p = np.where(low_mask, polevl(x, ERFC_P), polevl(x, ERFC_R))
    q = np.where(low_mask, p1evl(x, ERFC_Q), p1evl(x, ERFC_S))
    y = (z * p) / q
    y = np.where(a < 0, 2.0 - y, y)
    y = np.where(a == 0, 1.0, y)
    y = np.where(a >= ERF_MAX_VAL, 0.0, y)
    y = np.where(a <= -ERF_MAX_VAL, 2.0, y)
    return y


def erf_vector(x):
    """calculate erf in a vectorized fashion"""
    x = np.asarray(x, dtype=np.float64)
    z = x * x
    series = x * polevl(z, ERF_T) / p1evl(z, ERF_U)
    y = np.where(np.abs(x) > 1.0, 1.0 - erfc_vector(x), series)
    y = np.where(x >= ERF_MAX_VAL, 1.0, y)
    y = np.where(x <= -ERF_MAX_VAL, -1.0, y)
    return y


def norm_pdf_vector(x):
    """pdf of standard normal, vectorized"""
    x = np.asarray(x, dtype=np.float64)
    return np.exp(-x * x / 2.0) / SQRT_2_PI


def norm_cdf_vector(x):
    """cdf of standard normal, vectorized"""
    return 0.5 * (1.0 + erf_vector(np.asarray(x, dtype=np.float64) / SQRT_2))


def v_win(x, t):
    """
    The function V from eq. 67 of "A Bayesian Approximation Method for Online Ranking"
    https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf
    """
    xt = x - t
    denom = norm_cdf(xt)
    if denom < EPSILON:
        return -xt
    return norm_pdf(xt) / denom


def w_win(x, t):
    """The function W from eq. 67, the variance counterpart of v_win"""
    xt = x - t
    denom = norm_cdf(xt)
    if denom < EPSILON:
        return 1.0 if x < 0 else 0.0
    return v_win(x, t) * (v_win(x, t) + xt)


def v_draw(x, t):
    """The function ~V from eq. 68, used when two teams tie"""
    abs_x = math.fabs(x)  # the papers do NOT do this but ALL open source implementations DO...
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < 1e-5:
        return -x - t if x < 0 else -x + t
    a = norm_pdf(-t - abs_x) - norm_pdf(t - abs_x)
    return (-a if x < 0 else a) / b


def w_draw(x, t):
    """The function ~W from eq. 69"""
    abs_x = math.fabs(x)
    b = norm_cdf(t - abs_x) - norm_cdf(-t - abs_x)
    if b < EPSILON:
        return 1.0
    v = v_draw(x, t)
    return ((t - abs_x) * norm_pdf(t - abs_x) + (t + abs_x) * norm_pdf(-t - abs_x)) / b + v * v
