"""
Pytest configuration and shared fixtures.
"""

import pytest

from tmdbmatch.config import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in Config._ENV_MAP:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cfg() -> Config:
    return Config()


@pytest.fixture
def hercules_results() -> list:
    """Search results for "Hercules" as TMDb ranks them: the 1997 film first."""
    return [
        {"id": 11970, "title": "Hercules (1997 match)", "original_title": "Hercules (1997 match)", "release_date": "1997-06-13"},
        {"id": 184315, "title": "Hercules", "original_title": "Hercules", "release_date": "2014-07-23"},
    ]
