"""
Pytest configuration and global fixtures.

This module provides shared fixtures for all test modules including
API keys, sample queries, and utility functions.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def api_key():
    """Fixture providing a fake Materials Project API key."""
    return "test-mp-api-key"


@pytest.fixture
def sample_queries():
    """Fixture providing sample formula filters for testing."""
    return {
        "element": "Cr",
        "compound": "CrO3",
        "wildcard": "CrO*",
    }


@pytest.fixture
def blank_queries():
    """Fixture providing queries that must be rejected before any HTTP call."""
    return ["", " ", "   ", "\t", "\n \t"]
