"""
Upper-tail probability P(X^2 >= x) of the chi-square distribution.

Two algorithms are available. "gamma" is the regularized upper incomplete
gamma function Q(df/2, x/2) from SciPy. "series" sums the closed-form
finite series: for even df, e^-a * sum_{k<df/2} a^k / k!; for odd df, twice
the normal tail at sqrt(x) plus the odd-order remainder terms. Large
arguments switch the series to log space so the terms do not overflow.
"""
import math
from scipy.special import erfc, gammaincc
from config import settings

BIGX = 20.0
I_SQRT_PI = 1.0 / math.sqrt(math.pi)


def _ex(x: float) -> float:
    return 0.0 if x < -BIGX else math.exp(x)


def _clamp(p: float) -> float:
    return min(1.0, max(0.0, p))


def _check_df(df: int):
    if df < 1:
        raise ValueError(f"degrees of freedom must be positive, got {df}")


def normal_tail(z: float) -> float:
    """Q(z) = P(Z >= z) for a standard normal Z."""
    return 0.5 * float(erfc(z / math.sqrt(2.0)))


def series_tail(x: float, df: int) -> float:
    _check_df(df)
    if x <= 0.0:
        return 1.0
    if math.isinf(x):
        return 0.0

    a = 0.5 * x
    even = df % 2 == 0
    y = _ex(-a)
    s = y if even else 2.0 * normal_tail(math.sqrt(x))
    if df <= 2:
        return _clamp(s)

    limit = 0.5 * (df - 1.0)
    z = 1.0 if even else 0.5
    if a > BIGX:
        # terms a^z e^-a / Gamma(z + 1), summed without a cutoff
        c = math.log(a)
        terms = [s]
        while z <= limit:
            terms.append(math.exp(c * z - a - math.lgamma(z + 1.0)))
            z += 1.0
        return _clamp(math.fsum(terms))

    e = 1.0 if even else I_SQRT_PI / math.sqrt(a)
    c = 0.0
    while z <= limit:
        e *= a / z
        c += e
        z += 1.0
    return _clamp(c * y + s)


def gamma_tail(x: float, df: int) -> float:
    _check_df(df)
    if x <= 0.0:
        return 1.0
    return _clamp(float(gammaincc(0.5 * df, 0.5 * x)))


TAIL_METHODS = {
    "gamma": gamma_tail,
    "series": series_tail,
}


def chisq_tail(x: float, df: int, method: str = None) -> float:
    method = method or settings.tail_method
    try:
        tail = TAIL_METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown chi-square tail method: {method}") from None
    return tail(x, df)
