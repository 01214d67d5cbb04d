# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Evaluation record models and the read-only capability protocol.

An evaluation record identifies one trained model run and carries the
metrics computed for it. Which metrics are populated depends on the run's
task: regression runs report R² and error metrics, binary classifiers
report AUC, accuracy and log-loss, multiclass runs report nested
multiclass metrics. Every metric is independently optional.

The metric-priority ranker depends only on ``ProtocolEvaluationRecord``,
so any object exposing the same accessors can be ranked without
inheriting from ``ModelEvaluationRecord``.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modelselector.enums.enum_model_task import EnumModelTask


def coerce_utc(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ProtocolMulticlassMetrics(Protocol):
    """Read-only view of multiclass metrics used for ranking."""

    @property
    def micro_accuracy(self) -> float | None: ...


@runtime_checkable
class ProtocolEvaluationRecord(Protocol):
    """Read-only view of an evaluation record used for ranking.

    Only the accessors consulted by the metric-priority ranker are part of
    the contract. ``None`` means the metric was not computed for the run.
    """

    @property
    def id(self) -> UUID: ...

    @property
    def model_name(self) -> str: ...

    @property
    def trained_at_utc(self) -> datetime: ...

    @property
    def auc(self) -> float | None: ...

    @property
    def r_squared(self) -> float | None: ...

    @property
    def rmse(self) -> float | None: ...

    @property
    def log_loss(self) -> float | None: ...

    @property
    def multiclass(self) -> ProtocolMulticlassMetrics | None: ...


# ---------------------------------------------------------------------------
# Concrete models
# ---------------------------------------------------------------------------


class ModelMulticlassMetrics(BaseModel):
    """Metrics reported by a multiclass classification run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    micro_accuracy: float | None = Field(
        default=None,
        description="Fraction of all samples classified correctly (higher is better).",
    )
    macro_accuracy: float | None = Field(
        default=None,
        description="Per-class accuracy averaged over classes (higher is better).",
    )
    log_loss: float | None = Field(
        default=None, description="Multiclass log-loss (lower is better)."
    )
    log_loss_reduction: float | None = Field(
        default=None,
        description="Log-loss improvement over a prior baseline (higher is better).",
    )
    top_k_accuracy: float | None = Field(
        default=None, description="Top-K accuracy when K was configured."
    )


class ModelEvaluationRecord(BaseModel):
    """Metric snapshot of one trained model run.

    Produced by an external training pipeline; the engine only reads it.
    Non-finite metric values are accepted here and treated as absent by
    the rankers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())

    id: UUID = Field(default_factory=uuid4, description="Unique run identifier.")
    model_name: str = Field(description="Name of the trained model.")
    file_name: str = Field(
        default="", description="Filename of the stored model artifact."
    )
    trained_at_utc: datetime = Field(
        description="When training completed. Naive values are read as UTC."
    )

    # Regression
    r_squared: float | None = Field(default=None, description="Coefficient of determination.")
    rmse: float | None = Field(default=None, description="Root mean squared error.")
    mean_absolute_error: float | None = Field(default=None)
    mean_squared_error: float | None = Field(default=None)
    loss_function: float | None = Field(
        default=None, description="Value of the training loss function."
    )

    # Binary classification
    auc: float | None = Field(default=None, description="Area under the ROC curve.")
    accuracy: float | None = Field(default=None)
    f1_score: float | None = Field(default=None)
    precision: float | None = Field(default=None)
    recall: float | None = Field(default=None)
    log_loss: float | None = Field(default=None, description="Log-loss (lower is better).")
    log_loss_reduction: float | None = Field(default=None)

    # Multiclass classification
    multiclass: ModelMulticlassMetrics | None = Field(default=None)

    binary: bool | None = Field(
        default=None, description="Whether the run was a binary classifier."
    )

    # Run metadata, never used for ranking
    algorithm: str | None = Field(
        default=None, description='Trainer name, e.g. "FastTree" or "LogisticRegression".'
    )
    epochs: int | None = Field(default=None, ge=0)
    user_count: int | None = Field(default=None, ge=0)
    item_count: int | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None)

    @field_validator("trained_at_utc")
    @classmethod
    def _normalize_trained_at(cls, value: datetime) -> datetime:
        return coerce_utc(value)

    @property
    def task(self) -> EnumModelTask:
        """Problem class inferred from which metrics are populated."""
        if self.multiclass is not None:
            return EnumModelTask.MULTICLASS_CLASSIFICATION
        if self.binary or self.auc is not None:
            return EnumModelTask.BINARY_CLASSIFICATION
        if self.r_squared is not None or self.rmse is not None:
            return EnumModelTask.REGRESSION
        return EnumModelTask.UNKNOWN


__all__ = [
    "ModelEvaluationRecord",
    "ModelMulticlassMetrics",
    "ProtocolEvaluationRecord",
    "ProtocolMulticlassMetrics",
    "coerce_utc",
]
