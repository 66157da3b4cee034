import logging

import pytest

from bignumbers.config import reload_config


@pytest.fixture
def configured(monkeypatch):
    """Apply BIGNUM_* overrides for one test and restore the defaults afterwards"""
    def apply(**settings):
        for key, value in settings.items():
            monkeypatch.setenv(f"BIGNUM_{key.upper()}", str(value))
        return reload_config()

    yield apply
    monkeypatch.undo()
    reload_config()


@pytest.fixture
def clean_logger():
    """Restore the package logger after tests that install handlers"""
    logger = logging.getLogger("bignumbers")
    yield logger
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
