"""
Pytest configuration for rlist tests.

Provides:
- Hypothesis configuration for deterministic fuzzing
- Shared fixtures for the small lists used across test modules
"""

import os
import pytest

from rlist import from_sequence

# =============================================================================
# Hypothesis Configuration
# =============================================================================
# - Database caches found examples for faster reruns (uses .hypothesis/ by default)
# - print_blob=True makes failures easy to reproduce
# - the "ci" profile derandomizes so CI runs are repeatable

try:
    from hypothesis import settings

    settings.register_profile(
        "default",
        print_blob=True,
        derandomize=False,
    )

    settings.register_profile(
        "ci",
        print_blob=True,
        derandomize=True,
    )

    # Load profile from HYPOTHESIS_PROFILE env var, default to "default"
    profile = os.environ.get("HYPOTHESIS_PROFILE", "default")
    settings.load_profile(profile)

except ImportError:
    pass  # hypothesis not installed, fuzzer modules skip themselves


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def small_list():
    """[1, 2, 3, 4]"""
    return from_sequence([1, 2, 3, 4])


@pytest.fixture
def another_small_list():
    """[5, 6, 7, 8, 9]"""
    return from_sequence([5, 6, 7, 8, 9])
