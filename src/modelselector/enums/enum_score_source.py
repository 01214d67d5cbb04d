# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Score source enum for metric-priority ranking.

Names the single metric that produced a record's ranking score. Sources
prefixed with ``NEG_`` are lower-is-better metrics whose value was negated
so that a higher score always wins.
"""

from __future__ import annotations

from enum import Enum


class EnumScoreSource(str, Enum):
    """Metric that produced a ranking score.

    Attributes:
        AUC: Area under the ROC curve (binary classification).
        R_SQUARED: Coefficient of determination (regression).
        MICRO_ACCURACY: Multiclass micro-averaged accuracy.
        NEG_RMSE: Negated root mean squared error (regression).
        NEG_LOG_LOSS: Negated log-loss (classification).
        UNKNOWN: Source could not be determined. Never produced by the ranker.
    """

    AUC = "auc"
    R_SQUARED = "r_squared"
    MICRO_ACCURACY = "micro_accuracy"
    NEG_RMSE = "neg_rmse"
    NEG_LOG_LOSS = "neg_log_loss"
    UNKNOWN = "unknown"

    @property
    def is_negated(self) -> bool:
        """True when the underlying metric is lower-is-better."""
        return self in (EnumScoreSource.NEG_RMSE, EnumScoreSource.NEG_LOG_LOSS)

    @property
    def is_regression(self) -> bool:
        """True when the source is a regression metric."""
        return self in (EnumScoreSource.R_SQUARED, EnumScoreSource.NEG_RMSE)


__all__ = ["EnumScoreSource"]
