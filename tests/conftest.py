"""
Pytest configuration and shared fixtures for paramgeom tests.
"""

import pytest
import numpy as np
import sys
from pathlib import Path

# Add the parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def tolerance():
    """Default tolerance for floating point comparisons."""
    return 1e-12


@pytest.fixture
def loose_tolerance():
    """Looser tolerance for finite-difference comparisons."""
    return 1e-4


@pytest.fixture
def rng():
    """Seeded random generator so sampled tests are reproducible."""
    return np.random.default_rng(20250118)
