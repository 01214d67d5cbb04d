# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Enums for the model selection engine.

Exports:
    - EnumModelTask: Problem class of a trained run (regression, binary, multiclass)
    - EnumScoreSource: Metric that produced a metric-priority ranking score
"""

from modelselector.enums.enum_model_task import EnumModelTask
from modelselector.enums.enum_score_source import EnumScoreSource

__all__ = [
    "EnumModelTask",
    "EnumScoreSource",
]
