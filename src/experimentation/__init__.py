"""Experimentation module: significance engine for two-variant (A/B) tests."""

from .schema import (
    VariantMetrics,
    MetricSelector,
    Winner,
    TestResult,
    EvaluationConfig,
    DEFAULT_CONFIG,
)
from .stats import (
    cdf,
    inverse_cdf,
    engagement_rate,
    click_through_rate,
    conversion_rate,
    variant_rates,
    minimum_sample_size,
    evaluate_significance,
    days_remaining,
)
from .analyze import evaluate_with_run_rate, evaluate_frame

__all__ = [
    "VariantMetrics",
    "MetricSelector",
    "Winner",
    "TestResult",
    "EvaluationConfig",
    "DEFAULT_CONFIG",
    "cdf",
    "inverse_cdf",
    "engagement_rate",
    "click_through_rate",
    "conversion_rate",
    "variant_rates",
    "minimum_sample_size",
    "evaluate_significance",
    "days_remaining",
    "evaluate_with_run_rate",
    "evaluate_frame",
]
