# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Quality gate and composite scorer for regression models as pure functions.

Selection of a single regression model to serve:

1. Hard gates.
   Candidates must meet ``min_r_squared`` and ``max_rmse`` with finite
   metrics. An empty gated set yields no winner; there is no fallback to
   an ungated choice.

2. Composite score.
   ``weight_r_squared * clamp(r2, 0, 1) + weight_rmse * norm_rmse(rmse)``
   where RMSE is min-max normalized within the gated set and inverted so
   that lower error scores higher.

3. Ranking.
   Descending score, ties broken by the most recent training time.

4. Stability.
   An incumbent that still passes the gates is kept unless the best
   candidate beats it by at least ``min_score_improvement_to_switch``.

5. Recency on near ties.
   When the top two scores are within ``min_score_improvement_to_switch``,
   the most recent candidate trained within ``prefer_newer_within`` of the
   top candidate wins.

Constraints:
  - No I/O and no shared state; safe to call concurrently.
  - No exceptions for data edge cases. ``None`` means no winner.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence

from modelselector.models.model_ranking_outcome import ModelScoredSnapshot
from modelselector.models.model_regression_snapshot import ModelRegressionSnapshot
from modelselector.models.model_selection_policy import ModelSelectionPolicy

logger = logging.getLogger(__name__)


def passes_gates(
    snapshot: ModelRegressionSnapshot,
    policy: ModelSelectionPolicy,
) -> bool:
    """Check a snapshot against the policy's hard gates.

    NaN and infinite metric values always fail, regardless of thresholds.
    """
    if not (math.isfinite(snapshot.r_squared) and math.isfinite(snapshot.rmse)):
        return False
    return snapshot.r_squared >= policy.min_r_squared and snapshot.rmse <= policy.max_rmse


def make_rmse_normalizer(
    gated: Sequence[ModelRegressionSnapshot],
) -> Callable[[float], float]:
    """Build the RMSE normalizer for a gated candidate set.

    The returned function maps the set's lowest RMSE to 1.0 and its highest
    to 0.0. When every candidate has the same RMSE it returns 1.0 for all
    inputs instead of dividing by zero.

    Args:
        gated: Non-empty set of candidates that passed the gates.
    """
    rmse_min = min(c.rmse for c in gated)
    rmse_max = max(c.rmse for c in gated)

    def normalize(rmse: float) -> float:
        if rmse_max <= rmse_min:
            return 1.0
        return 1.0 - (rmse - rmse_min) / (rmse_max - rmse_min)

    return normalize


def composite_score(
    snapshot: ModelRegressionSnapshot,
    policy: ModelSelectionPolicy,
    normalize_rmse: Callable[[float], float],
) -> float:
    """Weighted blend of clamped R² and normalized RMSE.

    R² is clamped into [0, 1] so negative or out-of-range values cannot
    invert the ranking.
    """
    r2_clamped = min(max(snapshot.r_squared, 0.0), 1.0)
    return (policy.weight_r_squared * r2_clamped) + (
        policy.weight_rmse * normalize_rmse(snapshot.rmse)
    )


def _gate_and_score(
    candidates: Sequence[ModelRegressionSnapshot],
    policy: ModelSelectionPolicy,
) -> tuple[list[ModelScoredSnapshot], Callable[[float], float] | None]:
    """Ranked gated candidates and the normalizer used to score them.

    The normalizer is None when no candidate passed the gates.
    """
    gated = [c for c in candidates if passes_gates(c, policy)]
    logger.debug(
        "Quality gate: %d of %d candidates passed (min_r_squared=%s max_rmse=%s)",
        len(gated),
        len(candidates),
        policy.min_r_squared,
        policy.max_rmse,
    )
    if not gated:
        return [], None

    normalize = make_rmse_normalizer(gated)
    scored = [
        ModelScoredSnapshot(snapshot=c, score=composite_score(c, policy, normalize))
        for c in gated
    ]
    scored.sort(key=lambda s: (s.score, s.snapshot.trained_at_utc), reverse=True)
    return scored, normalize


def rank_snapshots(
    candidates: Sequence[ModelRegressionSnapshot],
    policy: ModelSelectionPolicy,
) -> list[ModelScoredSnapshot]:
    """Gate and score candidates, best first.

    Ordering is descending composite score, then descending training time.

    Returns:
        Scored candidates that passed the gates; empty when none did.
    """
    ranked, _ = _gate_and_score(candidates, policy)
    return ranked


def choose_best(
    candidates: Sequence[ModelRegressionSnapshot],
    policy: ModelSelectionPolicy,
    current_best: ModelRegressionSnapshot | None = None,
) -> ModelRegressionSnapshot | None:
    """Choose the regression model to serve.

    Args:
        candidates: Regression snapshots to choose from.
        policy: Gates, weights and stability controls.
        current_best: The currently served model, if any. It is scored with
            the same normalizer as the candidates and re-checked against
            the gates independently of the candidate list.

    Returns:
        The winning snapshot (possibly ``current_best``), or None when no
        candidate passes the gates.
    """
    if not candidates:
        return None

    ranked, normalize = _gate_and_score(candidates, policy)
    if normalize is None:
        logger.info(
            "No winner: all %d candidates failed the quality gates", len(candidates)
        )
        return None

    top = ranked[0]

    if current_best is not None:
        current_score = composite_score(current_best, policy, normalize)
        improvement = top.score - current_score
        if improvement < policy.min_score_improvement_to_switch and passes_gates(
            current_best, policy
        ):
            logger.info(
                "Keeping incumbent %s: improvement %.4f below threshold %.4f",
                current_best.model_id,
                improvement,
                policy.min_score_improvement_to_switch,
            )
            return current_best

    if len(ranked) >= 2:
        second = ranked[1]
        if abs(top.score - second.score) < policy.min_score_improvement_to_switch:
            # The top candidate is always inside its own window.
            top_trained = top.snapshot.trained_at_utc
            newest = max(
                (
                    s.snapshot
                    for s in ranked
                    if abs(top_trained - s.snapshot.trained_at_utc)
                    <= policy.prefer_newer_within
                ),
                key=lambda c: c.trained_at_utc,
            )
            logger.info(
                "Near tie between top candidates (%.4f vs %.4f): preferring newest %s",
                top.score,
                second.score,
                newest.model_id,
            )
            return newest

    logger.info("Selected %s with score %.4f", top.snapshot.model_id, top.score)
    return top.snapshot


__all__ = [
    "choose_best",
    "composite_score",
    "make_rmse_normalizer",
    "passes_gates",
    "rank_snapshots",
]
