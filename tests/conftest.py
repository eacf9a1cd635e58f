"""
Root conftest.py — test-suite wide fixtures.

Every test runs with HOME pointed at a temporary directory and without
TMPL_STORE_DIR, so nothing touches the real ~/.templates or ~/.tmplrc.yaml.
"""

import pytest
from pathlib import Path

from tmpl_core.constants import METADATA_FILENAME
from tmpl_core.store import TemplateStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Temporary home directory for the duration of a test"""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.delenv("TMPL_STORE_DIR", raising=False)
    return home


@pytest.fixture
def store_root(tmp_path):
    """Store root that does not exist yet"""
    return tmp_path / "store"


@pytest.fixture
def store(store_root):
    """TemplateStore rooted in the temporary directory"""
    return TemplateStore(store_root)


@pytest.fixture
def sample_project(tmp_path):
    """
    Small project tree:

        project/
          README.md
          setup.cfg
          src/app.py
          src/pkg/.tmpl.yaml   (stray metadata file that must never be copied)
          src/pkg/__init__.py
    """
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "README.md").write_text("# Sample\n")
    (root / "setup.cfg").write_text("[metadata]\nname = sample\n")
    (root / "src" / "app.py").write_text("print('hello')\n")
    (root / "src" / "pkg" / "__init__.py").write_text("")
    (root / "src" / "pkg" / METADATA_FILENAME).write_text("tags: [leaked]\n")
    return root


@pytest.fixture
def list_files():
    """Return the files under a directory as POSIX-style relative paths"""
    def _list(root: Path) -> set:
        return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}
    return _list
