import logging

import pytest

from echobench.logging_config import correlation_id_var

LOAD_ENV_VARS = ("LOAD_VUS", "LOAD_DURATION", "TARGET_HOST", "TARGET_PATH", "LOAD_VARIANT")


@pytest.fixture(autouse=True)
def clean_load_env(monkeypatch):
    """Keep a developer's shell or .env from leaking into config tests."""
    for name in LOAD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
    correlation_id_var.set(None)
