# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Data shapes shared by the selection strategies."""

from modelselector.models.model_evaluation_record import (
    ModelEvaluationRecord,
    ModelMulticlassMetrics,
    ProtocolEvaluationRecord,
    ProtocolMulticlassMetrics,
)
from modelselector.models.model_ranking_outcome import (
    ModelRankingOutcome,
    ModelScoredSnapshot,
)
from modelselector.models.model_regression_snapshot import ModelRegressionSnapshot
from modelselector.models.model_selection_policy import (
    ModelSelectionPolicy,
    SelectionPolicySettings,
)

__all__ = [
    "ModelEvaluationRecord",
    "ModelMulticlassMetrics",
    "ModelRankingOutcome",
    "ModelRegressionSnapshot",
    "ModelScoredSnapshot",
    "ModelSelectionPolicy",
    "ProtocolEvaluationRecord",
    "ProtocolMulticlassMetrics",
    "SelectionPolicySettings",
]
