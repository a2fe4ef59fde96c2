"""Root test configuration: isolate tests from the environment and from each other's logging setup"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop DOCSTORE_* env vars so settings come only from what each test sets."""
    for name in list(os.environ):
        if name.startswith("DOCSTORE_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by setup_logging (e.g. bound to a CliRunner stream)."""
    yield
    logger = logging.getLogger("docstore")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
