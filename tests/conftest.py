"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import fsops.core.config as config_module
import pytest


@pytest.fixture(autouse=True)
def isolated_xdg(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point XDG config and cache homes at a throwaway directory.

    Keeps the user's real settings file out of every test and drops the
    cached settings before and after each test.
    """
    xdg_root = tmp_path_factory.mktemp("xdg")
    env = {
        "XDG_CONFIG_HOME": str(xdg_root / "config"),
        "XDG_CACHE_HOME": str(xdg_root / "cache"),
    }
    with patch.dict(os.environ, env):
        config_module._cached_settings = None
        yield xdg_root
        config_module._cached_settings = None


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree for deletion and clearing tests.

    Layout::

        root/
            a.txt
            nested/
                b.txt
                deeper/
                    c.bin
            empty/
    """
    root = tmp_path / "root"
    (root / "nested" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "nested" / "b.txt").write_text("b")
    (root / "nested" / "deeper" / "c.bin").write_bytes(b"\x00\x01")
    return root
