# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Regression snapshot: the regression-only projection of an evaluation record."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from modelselector.models.model_evaluation_record import (
    ModelEvaluationRecord,
    coerce_utc,
)


class ModelRegressionSnapshot(BaseModel):
    """Immutable regression view of a trained run.

    Consumed by the quality gate and composite scorer so that algorithm
    stays decoupled from the full heterogeneous record shape. NaN and
    infinite metric values are allowed here; the gate rejects them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", protected_namespaces=())

    model_id: UUID = Field(description="Identifier of the trained run.")
    model_name: str = Field(description="Name of the trained model.")
    trained_at_utc: datetime = Field(
        description="When training completed. Naive values are read as UTC."
    )
    r_squared: float = Field(description="Coefficient of determination.")
    rmse: float = Field(description="Root mean squared error.")

    @field_validator("trained_at_utc")
    @classmethod
    def _normalize_trained_at(cls, value: datetime) -> datetime:
        return coerce_utc(value)

    @classmethod
    def from_record(cls, record: ModelEvaluationRecord) -> ModelRegressionSnapshot | None:
        """Project an evaluation record onto its regression metrics.

        Returns:
            The snapshot, or None when the record lacks R² or RMSE.
        """
        if record.r_squared is None or record.rmse is None:
            return None
        return cls(
            model_id=record.id,
            model_name=record.model_name,
            trained_at_utc=record.trained_at_utc,
            r_squared=record.r_squared,
            rmse=record.rmse,
        )


__all__ = ["ModelRegressionSnapshot"]
