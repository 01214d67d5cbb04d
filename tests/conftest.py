# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Pytest configuration for modelselector tests.

Clears ``MODEL_SELECTION_*`` variables so settings-driven tests see
defaults unless a test sets them explicitly.
"""

import os

import pytest


@pytest.fixture(autouse=True)
def _clean_selection_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove selection policy overrides inherited from the shell."""
    for name in list(os.environ):
        if name.startswith("MODEL_SELECTION_"):
            monkeypatch.delenv(name, raising=False)
