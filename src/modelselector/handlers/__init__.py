# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Selection strategies as pure functions."""

from modelselector.handlers.handler_metric_priority import (
    format_metric,
    is_finite,
    pick_best,
    rank_records,
    try_rank,
)
from modelselector.handlers.handler_quality_gate import (
    choose_best,
    composite_score,
    make_rmse_normalizer,
    passes_gates,
    rank_snapshots,
)

__all__ = [
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
