# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Selection policy for the quality gate and composite scorer.

The policy is pure configuration: it is passed explicitly into every
selection call and never mutated by the engine. ``SelectionPolicySettings``
loads the same knobs from the environment for deployments that configure
the gate outside of code.
"""

from __future__ import annotations

import math
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PREFER_NEWER_WITHIN = timedelta(days=3)


class ModelSelectionPolicy(BaseModel):
    """Hard gates, ranking weights and stability controls.

    Weights are not required to sum to 1.0 but conventionally do.

    Attributes:
        min_r_squared: Candidates with a lower R² are gated out.
        max_rmse: Candidates with a higher RMSE are gated out.
        weight_r_squared: Weight of clamped R² in the composite score.
        weight_rmse: Weight of normalized RMSE in the composite score.
        min_score_improvement_to_switch: Minimum composite-score gain required
            to replace the incumbent. Also the near-tie width for recency
            preference.
        prefer_newer_within: Window around the top candidate's training time
            in which the most recent candidate wins a near tie.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_r_squared: float = Field(default=0.0, description="Hard gate: minimum R².")
    max_rmse: float = Field(default=math.inf, description="Hard gate: maximum RMSE.")
    weight_r_squared: float = Field(
        default=0.7, ge=0.0, description="Composite weight for R² (higher is better)."
    )
    weight_rmse: float = Field(
        default=0.3, ge=0.0, description="Composite weight for RMSE (lower is better)."
    )
    min_score_improvement_to_switch: float = Field(
        default=0.01,
        ge=0.0,
        description="Minimum score gain before switching away from the incumbent.",
    )
    prefer_newer_within: timedelta = Field(
        default=DEFAULT_PREFER_NEWER_WITHIN,
        description="Recency window applied when the top two candidates nearly tie.",
    )

    @model_validator(mode="after")
    def validate_window_not_negative(self) -> ModelSelectionPolicy:
        if self.prefer_newer_within < timedelta(0):
            raise ValueError(
                f"prefer_newer_within must not be negative, got {self.prefer_newer_within}."
            )
        return self

    @model_validator(mode="after")
    def validate_gates_not_nan(self) -> ModelSelectionPolicy:
        if math.isnan(self.min_r_squared) or math.isnan(self.max_rmse):
            raise ValueError("Gate thresholds must not be NaN.")
        return self


class SelectionPolicySettings(BaseSettings):
    """Pydantic Settings for the selection policy, loaded from environment.

    Environment variables:
        MODEL_SELECTION_MIN_R_SQUARED: float (default 0.0)
        MODEL_SELECTION_MAX_RMSE: float (default inf)
        MODEL_SELECTION_WEIGHT_R_SQUARED: float (default 0.7)
        MODEL_SELECTION_WEIGHT_RMSE: float (default 0.3)
        MODEL_SELECTION_MIN_SCORE_IMPROVEMENT_TO_SWITCH: float (default 0.01)
        MODEL_SELECTION_PREFER_NEWER_WITHIN: seconds or ISO 8601 duration (default P3D)
    """

    model_config = SettingsConfigDict(
        env_prefix="MODEL_SELECTION_",
        extra="ignore",
    )

    min_r_squared: float = Field(default=0.0)
    max_rmse: float = Field(default=math.inf)
    weight_r_squared: float = Field(default=0.7, ge=0.0)
    weight_rmse: float = Field(default=0.3, ge=0.0)
    min_score_improvement_to_switch: float = Field(default=0.01, ge=0.0)
    prefer_newer_within: timedelta = Field(default=DEFAULT_PREFER_NEWER_WITHIN)

    def to_policy(self) -> ModelSelectionPolicy:
        """Convert settings to a frozen ModelSelectionPolicy instance."""
        return ModelSelectionPolicy(
            min_r_squared=self.min_r_squared,
            max_rmse=self.max_rmse,
            weight_r_squared=self.weight_r_squared,
            weight_rmse=self.weight_rmse,
            min_score_improvement_to_switch=self.min_score_improvement_to_switch,
            prefer_newer_within=self.prefer_newer_within,
        )


__all__ = [
    "DEFAULT_PREFER_NEWER_WITHIN",
    "ModelSelectionPolicy",
    "SelectionPolicySettings",
]
