"""
Experiment analysis entrypoint.

Input: per-variant counters (single pair or a long-format DataFrame), metric.
Output: TestResult per experiment, optionally with a run-rate projection.
"""

import dataclasses
import logging
from typing import Optional, Union

import pandas as pd

from .schema import EvaluationConfig, MetricSelector, TestResult, VariantMetrics
from .stats import days_remaining, evaluate_significance

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("experiment_id", "variant", "impressions")
COUNTER_COLUMNS = ("conversions", "clicks", "engagement")


def _row_metrics(row: pd.Series) -> VariantMetrics:
    record = {col: row[col] for col in ("impressions",) + COUNTER_COLUMNS}
    if "name" in row.index and not pd.isna(row["name"]):
        record["name"] = row["name"]
    return VariantMetrics.from_mapping(record)


def evaluate_with_run_rate(
    variant_a: VariantMetrics,
    variant_b: VariantMetrics,
    days_elapsed: int,
    metric: Union[MetricSelector, str] = MetricSelector.CONVERSIONS,
    config: Optional[EvaluationConfig] = None,
) -> TestResult:
    """
    Evaluate significance and project days until the needed sample is reached.

    The sample size target is per arm, so the arm with fewer impressions
    governs the projection.
    """
    result = evaluate_significance(variant_a, variant_b, metric, config)
    current = min(variant_a.impressions, variant_b.impressions)
    remaining = days_remaining(current, result.sample_size_needed, days_elapsed)
    return dataclasses.replace(result, days_remaining=remaining)


def evaluate_frame(
    df: pd.DataFrame,
    metric: Union[MetricSelector, str] = MetricSelector.CONVERSIONS,
    config: Optional[EvaluationConfig] = None,
    days_elapsed_col: Optional[str] = None,
) -> pd.DataFrame:
    """
    Evaluate every experiment in a long-format metrics frame.

    Args:
        df: One row per (experiment_id, variant) with impressions and counters
        metric: Counter used as the success count
        config: Evaluation constants
        days_elapsed_col: Optional column with days run so far (read from variant A)

    Returns:
        DataFrame with one row per experiment: experiment_id plus TestResult fields
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if days_elapsed_col and days_elapsed_col not in df.columns:
        missing.append(days_elapsed_col)
    if missing:
        raise ValueError(f"Metrics frame is missing required columns: {missing}")

    metric = MetricSelector(metric)
    frame = df.copy()
    frame["variant"] = frame["variant"].astype(str).str.strip().str.lower()
    for col in COUNTER_COLUMNS:
        if col not in frame.columns:
            frame[col] = 0
    frame[list(COUNTER_COLUMNS) + ["impressions"]] = (
        frame[list(COUNTER_COLUMNS) + ["impressions"]].fillna(0).astype(int)
    )

    rows = []
    for exp_id, sub in frame.groupby("experiment_id", sort=False):
        arms = {v: sub[sub["variant"] == v] for v in ("a", "b")}
        if arms["a"].empty or arms["b"].empty:
            logger.warning(f"Experiment {exp_id} lacks variant a or b; skipping")
            continue

        variant_a = _row_metrics(arms["a"].iloc[-1])
        variant_b = _row_metrics(arms["b"].iloc[-1])

        days = arms["a"].iloc[-1][days_elapsed_col] if days_elapsed_col else None
        if days is not None and not pd.isna(days):
            result = evaluate_with_run_rate(variant_a, variant_b, int(days), metric, config)
        else:
            result = evaluate_significance(variant_a, variant_b, metric, config)

        rows.append({"experiment_id": exp_id, **result.to_dict()})

    logger.info(f"Evaluated {len(rows)} experiments on {metric.value}")
    columns = ["experiment_id"] + [f.name for f in dataclasses.fields(TestResult)]
    return pd.DataFrame(rows, columns=columns)
