"""
Pytest configuration and fixtures.
"""

import logging

import pytest

from lineconf.logging import ROOT_LOGGER_NAME


@pytest.fixture
def sample_text() -> str:
    """A document exercising every statement and value kind."""
    return "\n".join(
        [
            "# Server settings",
            "host=localhost",
            "port=8080",
            "  debug=false  ",
            'motd="Welcome aboard"',
            "offset=-42",
            "#path entries",
            "path=usr",
            "path=opt",
        ]
    )


@pytest.fixture
def clean_logging():
    """Restore the lineconf logger after a test installs handlers."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)
