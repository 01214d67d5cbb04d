# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Result records produced by the two selection strategies.

Both are frozen dataclasses. ``ModelRankingOutcome.record`` may be any
``ProtocolEvaluationRecord`` implementation and is stored unvalidated.
"""

from __future__ import annotations

from dataclasses import dataclass

from modelselector.enums.enum_score_source import EnumScoreSource
from modelselector.models.model_evaluation_record import ProtocolEvaluationRecord
from modelselector.models.model_regression_snapshot import ModelRegressionSnapshot


@dataclass(frozen=True)
class ModelRankingOutcome:
    """Outcome of ranking one evaluation record by metric priority.

    Attributes:
        record: The ranked evaluation record.
        score: Sign-normalized score; higher is always better.
        source: Which metric produced the score.
        detail: Human-readable explanation, e.g. ``"AUC = 0.9"``.
    """

    record: ProtocolEvaluationRecord
    score: float
    source: EnumScoreSource
    detail: str


@dataclass(frozen=True)
class ModelScoredSnapshot:
    """Composite score of one gated regression snapshot.

    Attributes:
        snapshot: The scored candidate.
        score: Weighted blend of clamped R² and normalized RMSE.
    """

    snapshot: ModelRegressionSnapshot
    score: float


__all__ = ["ModelRankingOutcome", "ModelScoredSnapshot"]
