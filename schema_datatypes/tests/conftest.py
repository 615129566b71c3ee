import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() so later tests log to the default output."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
