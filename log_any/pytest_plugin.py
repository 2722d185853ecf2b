"""pytest fixtures for log_any (registered through the ``pytest11`` entry point)"""

import pytest

from log_any.testing import LogCapture


@pytest.fixture
def log_capture():
    """Capture every log_any message emitted during the test."""
    with LogCapture() as capture:
        yield capture
