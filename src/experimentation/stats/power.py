"""
Power analysis: minimum sample size per arm for a two-proportion test.
"""

import logging

import numpy as np

from .normal import inverse_cdf

logger = logging.getLogger(__name__)

FALLBACK_SAMPLE_SIZE = 10000
MIN_SAMPLE_SIZE = 100
TARGET_RATE_BOUNDS = (0.01, 0.99)


def minimum_sample_size(
    baseline_rate: float,
    minimum_detectable_effect: float,
    alpha: float = 0.05,
    power: float = 0.80,
    fallback: int = FALLBACK_SAMPLE_SIZE,
) -> int:
    """
    Sample size per arm to detect a relative change in a proportion.

    Args:
        baseline_rate: Baseline proportion (e.g., 0.10 conversion)
        minimum_detectable_effect: Relative change to detect (e.g., 0.10 = 10% relative lift)
        alpha: Type I error rate (two-tailed)
        power: Statistical power (1 - Type II)
        fallback: Size returned when the formula is undefined

    Returns:
        Per-arm sample size, never below 100. A baseline outside (0, 1)
        returns `fallback` (10000 by default).
    """
    if baseline_rate <= 0 or baseline_rate >= 1:
        logger.debug(f"Baseline rate {baseline_rate} outside (0, 1); using fallback sample size")
        return fallback

    p1 = baseline_rate
    p2 = float(np.clip(baseline_rate * (1 + minimum_detectable_effect), *TARGET_RATE_BOUNDS))

    effect = p2 - p1
    if effect == 0:
        logger.debug(f"No detectable effect between p1={p1} and p2={p2}; using fallback sample size")
        return fallback

    z_alpha = inverse_cdf(1 - alpha / 2)
    z_beta = inverse_cdf(power)

    variance = p1 * (1 - p1) + p2 * (1 - p2)
    n_per_arm = (z_alpha + z_beta) ** 2 * variance / effect ** 2
    return int(np.ceil(max(MIN_SAMPLE_SIZE, n_per_arm)))
