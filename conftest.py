"""
Repository-level pytest configuration.

Why this exists:
  - Provide predictable defaults for the IDE under test
  - Keep local runs independent of a developer's shell environment

Values below describe a local Theia instance; CI overrides them through the
same environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _safe_env_defaults() -> Generator[None, None, None]:
    """
    Set environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "http://localhost:3000",
        "THEIA__DISTRIBUTION": "theia",
        "THEIA__VERSION": "1.18.0",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
