# tests/conftest.py
# This file is part of Booltable - A Boolean Truth Table Generator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Booltable tests.

This module ensures the project root is importable and provides common
expressions and tables used across the test suites.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before any test runs.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import expression
        import table
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def two_symbol_table():
    """Assignment table for symbols a, b.

    Returns:
        AssignmentTable: a = "0011", b = "0101"
    """
    from table import build_assignments

    return build_assignments(["a", "b"])


@pytest.fixture
def three_symbol_table():
    """Assignment table for symbols a, b, c (8 rows)."""
    from table import build_assignments

    return build_assignments(["a", "b", "c"])


@pytest.fixture
def nested_expression():
    """Provide a nested expression exercising groups and negation.

    Returns:
        str: Expression with a negated group and a negated leaf
    """
    return "!(a+b).(c+!d)"
