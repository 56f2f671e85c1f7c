"""Test configuration and fixtures.

Provides:
- Python path setup for imports
- Sample Ok/Err values shared across result tests
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
project_root = Path(__file__).parent.parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from resultkit import Err, Ok  # noqa: E402

# ============================================================================
# Sample Results
# ============================================================================


@pytest.fixture
def ok_result() -> Ok[int]:
    """Successful result holding 42."""
    return Ok(42)


@pytest.fixture
def err_result() -> Err[str]:
    """Failed result holding a string error."""
    return Err("boom")


@pytest.fixture
def exception_err() -> Err[ValueError]:
    """Failed result holding an exception instance."""
    return Err(ValueError("bad input"))
