"""Tests for display rate helpers."""
from experimentation.schema import VariantMetrics
from experimentation.stats.rates import (
    click_through_rate,
    conversion_rate,
    engagement_rate,
    variant_rates,
)


def test_rates_known():
    m = VariantMetrics(impressions=2000, conversions=30, clicks=120, engagement=400)
    assert engagement_rate(m) == 20.0
    assert click_through_rate(m) == 6.0
    assert conversion_rate(m) == 25.0


def test_rates_zero_denominators():
    """No impressions / no clicks -> 0, never NaN or ZeroDivisionError."""
    m = VariantMetrics(impressions=0, conversions=5, clicks=0, engagement=3)
    assert engagement_rate(m) == 0
    assert click_through_rate(m) == 0
    assert conversion_rate(m) == 0


def test_conversion_rate_uses_clicks():
    m = VariantMetrics(impressions=0, conversions=5, clicks=10)
    assert conversion_rate(m) == 50.0


def test_variant_rates():
    m = VariantMetrics(impressions=100, conversions=2, clicks=10, engagement=50)
    assert variant_rates(m) == {
        "engagement_rate": 50.0,
        "click_through_rate": 10.0,
        "conversion_rate": 20.0,
    }
