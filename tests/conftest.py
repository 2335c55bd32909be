"""
Pytest configuration for closure_pi tests.

Provides:
- Hypothesis profiles for property tests (select with HYPOTHESIS_PROFILE)
- repo_root fixture for subprocess smoke tests
"""

import os
from pathlib import Path

import pytest
from hypothesis import settings

# print_blob=True makes failures easy to reproduce.
# NOTE: do not set database=None; that disables the example database.
settings.register_profile(
    "default",
    print_blob=True,
    derandomize=False,
)

settings.register_profile(
    "ci",
    print_blob=True,
    derandomize=True,
    max_examples=200,
)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).resolve().parents[1]
