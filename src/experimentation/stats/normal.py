"""
Standard normal distribution primitives.

Closed-form approximations of the CDF and its inverse, accurate enough for
significance testing without a special-function library.
"""

import math

# Abramowitz & Stegun 7.1.26 erf coefficients (|error| < 1.5e-7)
_AS_P = 0.3275911
_AS_A = (0.254829592, -0.284496736, 1.421413741, -1.453152027, 1.061405429)

# Acklam inverse-normal coefficients (relative error < 1.15e-9)
_ACKLAM_A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
_ACKLAM_B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
_ACKLAM_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
_ACKLAM_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def _erf(x: float) -> float:
    """erf approximation for x >= 0."""
    t = 1.0 / (1.0 + _AS_P * x)
    a1, a2, a3, a4, a5 = _AS_A
    poly = ((((a5 * t + a4) * t + a3) * t + a2) * t + a1) * t
    return 1.0 - poly * math.exp(-x * x)


def cdf(x: float) -> float:
    """
    Standard normal CDF.

    Uses Phi(x) = 0.5 * (1 + sign(x) * erf(|x| / sqrt(2))), so cdf(0) is
    exactly 0.5 and cdf(-x) == 1 - cdf(x).
    """
    x = float(x)
    sign = (x > 0) - (x < 0)
    return 0.5 * (1.0 + sign * _erf(abs(x) / math.sqrt(2.0)))


def _lower_tail(p: float) -> float:
    q = math.sqrt(-2.0 * math.log(p))
    c1, c2, c3, c4, c5, c6 = _ACKLAM_C
    d1, d2, d3, d4 = _ACKLAM_D
    return (((((c1 * q + c2) * q + c3) * q + c4) * q + c5) * q + c6) / (
        (((d1 * q + d2) * q + d3) * q + d4) * q + 1.0
    )


def inverse_cdf(p: float) -> float:
    """
    Inverse of the standard normal CDF (quantile function).

    Args:
        p: Probability; values at or beyond the (0, 1) bounds map to -inf/+inf

    Returns:
        z such that cdf(z) ~= p
    """
    p = float(p)
    if p <= 0:
        return -math.inf
    if p >= 1:
        return math.inf
    if p == 0.5:
        return 0.0

    if p < P_LOW:
        return _lower_tail(p)
    if p > P_HIGH:
        return -_lower_tail(1.0 - p)

    q = p - 0.5
    r = q * q
    a1, a2, a3, a4, a5, a6 = _ACKLAM_A
    b1, b2, b3, b4, b5 = _ACKLAM_B
    return (((((a1 * r + a2) * r + a3) * r + a4) * r + a5) * r + a6) * q / (
        ((((b1 * r + b2) * r + b3) * r + b4) * r + b5) * r + 1.0
    )
