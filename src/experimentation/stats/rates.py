"""Display rates (percentages) derived from raw variant counters."""

from typing import Dict

from ..schema import VariantMetrics


def engagement_rate(metrics: VariantMetrics) -> float:
    if metrics.impressions == 0:
        return 0.0
    return metrics.engagement / metrics.impressions * 100


def click_through_rate(metrics: VariantMetrics) -> float:
    if metrics.impressions == 0:
        return 0.0
    return metrics.clicks / metrics.impressions * 100


def conversion_rate(metrics: VariantMetrics) -> float:
    """Conversions per click, as a percentage."""
    if metrics.clicks == 0:
        return 0.0
    return metrics.conversions / metrics.clicks * 100


def variant_rates(metrics: VariantMetrics) -> Dict[str, float]:
    """All display rates for one variant."""
    return {
        "engagement_rate": engagement_rate(metrics),
        "click_through_rate": click_through_rate(metrics),
        "conversion_rate": conversion_rate(metrics),
    }
