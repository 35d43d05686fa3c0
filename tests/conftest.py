"""Root test configuration: isolate the package logger between tests"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_docstore_logger():
    """Strip handlers and level set by configure_logging during a test."""
    logger = logging.getLogger("docstore")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
