"""
Experiment data models for the significance engine.

Dataclass schemas for per-variant counters, the metric selector,
evaluation configuration, and the test verdict.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class MetricSelector(str, Enum):
    """Counter treated as the success count in the hypothesis test."""
    CONVERSIONS = "conversions"
    CLICKS = "clicks"
    ENGAGEMENT = "engagement"


class Winner(str, Enum):
    """Test verdict."""
    A = "a"
    B = "b"
    INCONCLUSIVE = "inconclusive"


@dataclass(frozen=True)
class VariantMetrics:
    """Observed counters for a single experiment arm."""
    impressions: int = 0
    conversions: int = 0
    clicks: int = 0
    engagement: int = 0
    name: str = ""

    def successes(self, metric: MetricSelector) -> int:
        """Success count for the selected metric."""
        return getattr(self, MetricSelector(metric).value)

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "VariantMetrics":
        """
        Build from a dict-like row (e.g. one record of a metrics export).

        Missing or null counters are treated as zero.
        """
        def _count(key: str) -> int:
            value = row.get(key)
            return int(value) if value is not None else 0

        return cls(
            impressions=_count("impressions"),
            conversions=_count("conversions"),
            clicks=_count("clicks"),
            engagement=_count("engagement"),
            name=str(row.get("name") or ""),
        )


@dataclass(frozen=True)
class EvaluationConfig:
    """Fixed constants used by the significance evaluator."""
    alpha: float = 0.05
    power: float = 0.80
    minimum_detectable_effect: float = 0.10  # relative, 0.10 = 10% improvement
    lift_z_critical: float = 1.96
    baseline_floor: float = 0.01
    fallback_sample_size: int = 10000


DEFAULT_CONFIG = EvaluationConfig()

SIGNIFICANCE_TARGET = 95.0


@dataclass(frozen=True)
class TestResult:
    """Complete verdict for a two-variant test."""
    is_significant: bool
    confidence_level: float
    p_value: float
    winner: Winner
    lift: float
    lift_confidence_interval: Tuple[float, float]
    sample_size_needed: int
    days_remaining: Optional[int] = None

    @property
    def confidence_shortfall(self) -> float:
        """
        Confidence points still needed to reach the 95% bar.

        The bar is fixed at 95 regardless of EvaluationConfig.alpha, matching
        the dashboard display.
        """
        return max(0.0, SIGNIFICANCE_TARGET - self.confidence_level)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        lower, upper = self.lift_confidence_interval
        return {
            "is_significant": self.is_significant,
            "confidence_level": self.confidence_level,
            "p_value": self.p_value,
            "winner": self.winner.value,
            "lift": self.lift,
            "lift_confidence_interval": [lower, upper],
            "sample_size_needed": self.sample_size_needed,
            "days_remaining": self.days_remaining,
        }
