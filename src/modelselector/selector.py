# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""ModelSelector: binds a selection policy to both selection strategies.

The selector holds only its immutable policy, so a single instance can be
shared across threads. Every call is a pure reduction from a candidate
set to a winner; ``None`` is the "no winner" signal and the caller decides
what that means (keep serving the previous model, alert, block a rollout).

Design Decisions:
    - The policy is injected at construction or built from
      ``SelectionPolicySettings``; there is no module-level default policy.
    - Strategies stay plain functions in ``modelselector.handlers`` so they
      can be used without the facade.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from modelselector.handlers.handler_metric_priority import pick_best, rank_records
from modelselector.handlers.handler_quality_gate import choose_best, rank_snapshots
from modelselector.models.model_evaluation_record import ProtocolEvaluationRecord
from modelselector.models.model_ranking_outcome import (
    ModelRankingOutcome,
    ModelScoredSnapshot,
)
from modelselector.models.model_regression_snapshot import ModelRegressionSnapshot
from modelselector.models.model_selection_policy import (
    ModelSelectionPolicy,
    SelectionPolicySettings,
)

logger = logging.getLogger(__name__)


class ModelSelector:
    """Selects the model to serve from recorded evaluation metrics.

    Args:
        policy: Gates, weights and stability controls for regression
            selection. Defaults to ``ModelSelectionPolicy()``.
    """

    def __init__(self, *, policy: ModelSelectionPolicy | None = None) -> None:
        self._policy = policy or ModelSelectionPolicy()

    @classmethod
    def from_settings(
        cls, settings: SelectionPolicySettings | None = None
    ) -> ModelSelector:
        """Build a selector whose policy is read from the environment."""
        settings = settings or SelectionPolicySettings()
        policy = settings.to_policy()
        logger.debug("ModelSelector policy loaded from settings: %s", policy)
        return cls(policy=policy)

    @property
    def policy(self) -> ModelSelectionPolicy:
        return self._policy

    def choose_best(
        self,
        candidates: Sequence[ModelRegressionSnapshot],
        *,
        current_best: ModelRegressionSnapshot | None = None,
    ) -> ModelRegressionSnapshot | None:
        """Quality-gated composite selection with anti-churn stability."""
        return choose_best(candidates, self._policy, current_best)

    def rank(
        self, candidates: Sequence[ModelRegressionSnapshot]
    ) -> list[ModelScoredSnapshot]:
        """Gated candidates with their composite scores, best first."""
        return rank_snapshots(candidates, self._policy)

    def pick_best(
        self, items: Iterable[ProtocolEvaluationRecord]
    ) -> ModelRankingOutcome | None:
        """Metric-priority selection across heterogeneous records."""
        return pick_best(items)

    def rank_records(
        self, items: Iterable[ProtocolEvaluationRecord]
    ) -> list[ModelRankingOutcome]:
        """Every rankable record with its priority score, best first."""
        return rank_records(items)


__all__ = ["ModelSelector"]
