# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Metric-priority ranker for heterogeneous evaluation records as pure functions.

Different model families populate disjoint metric subsets, so scores
cannot be blended across records. Instead each record is scored by the
single most authoritative metric it carries, in fixed priority order:

    1. AUC                        (binary classification)
    2. R²                         (regression)
    3. Multiclass micro-accuracy  (multiclass classification)
    4. RMSE, negated              (regression, lower is better)
    5. Log-loss, negated          (classification, lower is better)

Records without any finite metric from that list are not rankable and are
skipped. Scores are then compared across the whole pool, so callers are
expected to pool models from comparable problem classes only. Mixed pools
are ranked as-is and logged.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from modelselector.enums.enum_score_source import EnumScoreSource
from modelselector.models.model_evaluation_record import (
    ProtocolEvaluationRecord,
    coerce_utc,
)
from modelselector.models.model_ranking_outcome import ModelRankingOutcome

logger = logging.getLogger(__name__)


def is_finite(value: float | None) -> bool:
    """True when ``value`` is a real number that is neither NaN nor infinite.

    Any value ``math.isfinite`` accepts counts, including numpy scalars,
    ``Decimal`` and ``Fraction``. ``None``, booleans and non-numeric
    values are not finite.
    """
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        return False


def format_metric(value: float) -> str:
    """Format a metric with at most 4 decimal places and no trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _describe(source: EnumScoreSource, label: str, value: float) -> str:
    detail = f"{label} = {format_metric(value)}"
    if source.is_negated:
        detail += f" (score = -{label.replace(' ', '')})"
    return detail


def try_rank(record: ProtocolEvaluationRecord) -> ModelRankingOutcome | None:
    """Score a record by its highest-priority finite metric.

    Lower-is-better metrics are negated so that higher always wins. The
    score is always a plain ``float``.

    Returns:
        The ranking outcome, or None when the record is not rankable.
    """
    multiclass = record.multiclass
    priority: tuple[tuple[EnumScoreSource, str, float | None], ...] = (
        (EnumScoreSource.AUC, "AUC", record.auc),
        (EnumScoreSource.R_SQUARED, "R2", record.r_squared),
        (
            EnumScoreSource.MICRO_ACCURACY,
            "Micro Accuracy",
            multiclass.micro_accuracy if multiclass is not None else None,
        ),
        (EnumScoreSource.NEG_RMSE, "RMSE", record.rmse),
        (EnumScoreSource.NEG_LOG_LOSS, "Log Loss", record.log_loss),
    )

    for source, label, value in priority:
        if not is_finite(value):
            continue
        metric = float(value)
        score = -metric if source.is_negated else metric
        return ModelRankingOutcome(record, score, source, _describe(source, label, metric))

    return None


def rank_records(
    items: Iterable[ProtocolEvaluationRecord],
) -> list[ModelRankingOutcome]:
    """Rank every rankable record, best first.

    Ordering is descending score, then descending training time.
    """
    ranked: list[ModelRankingOutcome] = []
    skipped = 0
    for item in items:
        outcome = try_rank(item)
        if outcome is None:
            skipped += 1
            logger.debug(
                "Record %s (%s) has no finite ranking metric; skipping",
                item.id,
                item.model_name,
            )
            continue
        ranked.append(outcome)

    ranked.sort(
        key=lambda o: (o.score, coerce_utc(o.record.trained_at_utc)), reverse=True
    )
    logger.debug("Metric-priority ranking: %d ranked, %d skipped", len(ranked), skipped)
    return ranked


def pick_best(items: Iterable[ProtocolEvaluationRecord]) -> ModelRankingOutcome | None:
    """Return the best record by metric-priority score, or None.

    Ties on score go to the most recently trained record.
    """
    ranked = rank_records(items)
    if not ranked:
        logger.info("No winner: no record exposes a finite ranking metric")
        return None

    families = {o.source.is_regression for o in ranked}
    if len(families) > 1:
        logger.warning(
            "Ranking pool mixes regression and classification scores (%s); "
            "scores are compared as-is",
            sorted({o.source.value for o in ranked}),
        )

    best = ranked[0]
    logger.info(
        "Selected %s (%s) by %s: %s",
        best.record.id,
        best.record.model_name,
        best.source.value,
        best.detail,
    )
    return best


__all__ = [
    "format_metric",
    "is_finite",
    "pick_best",
    "rank_records",
    "try_rank",
]
