"""
Pytest configuration and fixtures for probe-dbg tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))

from probe_dbg.commands import build_registry  # noqa: E402
from probe_dbg.context import DebuggerContext  # noqa: E402


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def ctx():
    return DebuggerContext()


