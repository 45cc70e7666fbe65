"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path

import pytest


def write(path: Path, content: str) -> Path:
    """Write dedented *content* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


@pytest.fixture
def i18n_dir(tmp_path: Path) -> Path:
    """A bundle directory with two base bundles and one locale variant."""
    root = tmp_path / "assets" / "i18n"
    write(root / "menu.properties", """\
        # Main menu
        hello.world=Hi {0}
        bye=Bye
    """)
    write(root / "game.properties", """\
        score=Score: {0}
        game.over=Game over
    """)
    write(root / "menu_de.properties", """\
        hello.world=Hallo {0}
        bye=Tschuess
    """)
    return root


@pytest.fixture
def atlas_dir(tmp_path: Path) -> Path:
    """An asset directory with one atlas in a nested folder."""
    root = tmp_path / "assets"
    write(root / "ui" / "skin.atlas", """\

        skin.png
        size: 256, 256
        format: RGBA8888
        filter: Linear,Linear
        repeat: none
        button up
          rotate: false
          xy: 2, 2
          size: 64, 32
          orig: 64, 32
          offset: 0, 0
          index: -1
        check.on
          rotate: true
          xy: 68, 2
          size: 16, 16
          orig: 16, 16
          offset: 0, 0
          index: -1
    """)
    return root


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Undo setup_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
