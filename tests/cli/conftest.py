"""
tests/cli/conftest.py

Shared CliRunner fixtures. Every invocation goes through the top-level
``tmpl`` group pointed at a temporary store.
"""

import pytest
from click.testing import CliRunner

from tmpl_cli.main import cli


@pytest.fixture
def runner():
    """Create CLI runner"""
    return CliRunner()


@pytest.fixture
def invoke(runner, store_root):
    """Run ``tmpl --store-dir <tmp store> ARGS...``"""
    def _invoke(*args, **kwargs):
        return runner.invoke(cli, ['--store-dir', str(store_root), *args], **kwargs)
    return _invoke
