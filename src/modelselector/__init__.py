# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Model ranking and selection engine.

Chooses the single model to serve from already-recorded evaluation
metrics. Two independent strategies are provided:

    - ``choose_best``: quality-gated weighted composite scoring of
      regression snapshots, with an anti-churn stability policy.
    - ``pick_best``: metric-priority ranking across regression and
      classification records.

Usage:
    from modelselector import ModelSelectionPolicy, ModelSelector

    selector = ModelSelector(policy=ModelSelectionPolicy(min_r_squared=0.5))
    winner = selector.choose_best(snapshots, current_best=serving)
"""

from modelselector.enums import EnumModelTask, EnumScoreSource
from modelselector.handlers import (
    choose_best,
    composite_score,
    format_metric,
    is_finite,
    make_rmse_normalizer,
    passes_gates,
    pick_best,
    rank_records,
    rank_snapshots,
    try_rank,
)
from modelselector.models import (
    ModelEvaluationRecord,
    ModelMulticlassMetrics,
    ModelRankingOutcome,
    ModelRegressionSnapshot,
    ModelScoredSnapshot,
    ModelSelectionPolicy,
    ProtocolEvaluationRecord,
    ProtocolMulticlassMetrics,
    SelectionPolicySettings,
)
from modelselector.selector import ModelSelector

__all__ = [
    "EnumModelTask",
    "EnumScoreSource",
    "ModelEvaluationRecord",
    "ModelMulticlassMetrics",
    "ModelRankingOutcome",
    "ModelRegressionSnapshot",
    "ModelScoredSnapshot",
    "ModelSelectionPolicy",
    "ModelSelector",
    "ProtocolEvaluationRecord",
    "ProtocolMulticlassMetrics",
    "SelectionPolicySettings",
    "choose_best",
    "composite_score",
    "format_metric",
    "is_finite",
    "make_rmse_normalizer",
    "passes_gates",
    "pick_best",
    "rank_records",
    "rank_snapshots",
    "try_rank",
]
