# tests/conftest.py

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Drop handlers installed by setup_logging so later tests never write to
    streams that pytest or CliRunner have already closed."""
    yield
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory with no DIE_PARSER_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.upper().startswith("DIE_PARSER_"):
            monkeypatch.delenv(name)
    return tmp_path
