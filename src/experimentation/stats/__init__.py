"""Experiment statistics module."""

from .normal import cdf, inverse_cdf
from .rates import engagement_rate, click_through_rate, conversion_rate, variant_rates
from .power import minimum_sample_size
from .hypothesis_tests import evaluate_significance, proportions_z_test, lift_confidence_interval
from .run_rate import days_remaining

__all__ = [
    "cdf",
    "inverse_cdf",
    "engagement_rate",
    "click_through_rate",
    "conversion_rate",
    "variant_rates",
    "minimum_sample_size",
    "evaluate_significance",
    "proportions_z_test",
    "lift_confidence_interval",
    "days_remaining",
]
