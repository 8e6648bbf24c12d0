import os
import sys

# Add src/ to the Python path so tests run without an installed package
sys.path.insert(
    0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
)

import pytest


@pytest.fixture
def hello_chash160():
    """C-hash of 'Hello World' recorded from the reference implementation."""
    return "3YCO5VU2E5ORSR7KP3ZSKG2UJZVBHCHQ"
