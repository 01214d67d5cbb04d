# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Model task enum describing which metric family a run populated."""

from __future__ import annotations

from enum import Enum


class EnumModelTask(str, Enum):
    """Problem class of a trained model run.

    Different tasks populate disjoint metric subsets: regression runs carry
    R² and error metrics, binary classifiers carry AUC and friends, and
    multiclass runs carry nested multiclass metrics.
    """

    REGRESSION = "regression"
    BINARY_CLASSIFICATION = "binary_classification"
    MULTICLASS_CLASSIFICATION = "multiclass_classification"
    UNKNOWN = "unknown"


__all__ = ["EnumModelTask"]
