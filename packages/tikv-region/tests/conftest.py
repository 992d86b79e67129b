"""Shared fixtures for tikv-region tests."""

import pytest

ENV_VARS = [
    "TIKV_REGION_KV_MODE",
    "TIKV_REGION_ISOLATION_LEVEL",
    "TIKV_REGION_COMMAND_PRIORITY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Settings()."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
