"""
Unit tests for store configuration
"""

import pytest
from pathlib import Path

from tmpl_core.config import StoreConfig, default_store_root


class TestStoreConfig:
    """Test store root resolution"""

    def test_default_root_under_home(self, isolated_home):
        """Default store lives in ~/.templates"""
        assert default_store_root() == isolated_home / ".templates"
        assert StoreConfig().root == isolated_home / ".templates"

    def test_explicit_root_wins(self, tmp_path, monkeypatch):
        """Explicit root beats the environment"""
        monkeypatch.setenv("TMPL_STORE_DIR", str(tmp_path / "env"))

        config = StoreConfig.resolve(str(tmp_path / "explicit"))

        assert config.root == tmp_path / "explicit"

    def test_environment_root(self, tmp_path, monkeypatch):
        """TMPL_STORE_DIR is used when nothing explicit is given"""
        monkeypatch.setenv("TMPL_STORE_DIR", str(tmp_path / "env"))

        assert StoreConfig.resolve().root == tmp_path / "env"

    def test_falls_back_to_home(self, isolated_home):
        assert StoreConfig.resolve().root == isolated_home / ".templates"

    def test_tilde_is_expanded(self, isolated_home):
        """~ in a configured root points at the home directory"""
        assert StoreConfig.resolve("~/my-templates").root == isolated_home / "my-templates"
