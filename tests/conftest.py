# tests/conftest.py
from __future__ import annotations

import pytest

from paice_husk.stemming.general.utils import clear_config_cache, reload_topics


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics, data-dir overrides and config cache between tests."""
    monkeypatch.delenv("PAICE_HUSK_DEBUG_TOPICS", raising=False)
    monkeypatch.delenv("PAICE_HUSK_DATA_DIR", raising=False)
    clear_config_cache()
    reload_topics()
    yield
    clear_config_cache()
    reload_topics()


@pytest.fixture
def rule_file(tmp_path):
    """
    Does: Write a small rule file and return its path.
    Rules: -ies > -y (stop), -ing > - (restem), -nn > -n (stop).
    """
    p = tmp_path / "rules.txt"
    p.write_text("sei3y.   { -ies > -y }\ngni3>    { -ing > - }\nnn1.\nend0.\n", encoding="utf-8")
    return p
