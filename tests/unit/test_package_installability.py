# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Package installability validation tests.

Ensures modelselector imports cleanly and every public name it re-exports
resolves. This catches:

- Missing __init__.py files at any level of the package hierarchy
- Broken re-exports in package __init__.py files
- Import-time errors (circular imports, missing deps)
"""

from __future__ import annotations

import importlib

import pytest

MODULES = [
    "modelselector",
    "modelselector.enums",
    "modelselector.enums.enum_model_task",
    "modelselector.enums.enum_score_source",
    "modelselector.handlers",
    "modelselector.handlers.handler_metric_priority",
    "modelselector.handlers.handler_quality_gate",
    "modelselector.models",
    "modelselector.models.model_evaluation_record",
    "modelselector.models.model_ranking_outcome",
    "modelselector.models.model_regression_snapshot",
    "modelselector.models.model_selection_policy",
    "modelselector.selector",
]


@pytest.mark.unit
@pytest.mark.parametrize("module_path", MODULES)
def test_module_importable(module_path: str) -> None:
    module = importlib.import_module(module_path)
    assert module is not None


@pytest.mark.unit
@pytest.mark.parametrize("module_path", MODULES)
def test_all_exports_resolve(module_path: str) -> None:
    module = importlib.import_module(module_path)
    exported = getattr(module, "__all__", [])
    assert exported, f"{module_path} declares no __all__"
    missing = [name for name in exported if not hasattr(module, name)]
    assert not missing, f"{module_path} is missing exports: {missing}"
