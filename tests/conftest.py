import os

import pytest

WCE_ENV_VARS = ("WCE_EXPORT_DIR", "WCE_ENCODING", "WCE_SEARCH_BACKEND", "WCE_GROUP_NAME")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without WCE_* settings and drop vars the env file loader added."""
    for key in WCE_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    before = set(os.environ)
    yield
    # load_env_file writes os.environ directly, outside monkeypatch
    for key in set(os.environ) - before:
        os.environ.pop(key, None)
