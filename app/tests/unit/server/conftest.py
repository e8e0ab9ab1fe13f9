"""Fixtures for server module unit tests."""

import pytest

from infrastructure.services.providers import get_visitor_config


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run with the working directory (and so the visit log) under tmp_path."""
    monkeypatch.chdir(tmp_path)
    get_visitor_config.cache_clear()
    yield tmp_path
    get_visitor_config.cache_clear()
