"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


def write_function(path: Path, *lines: str) -> Path:
    """Create a function file (and its parents) with the given lines."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def datapack(tmp_path: Path) -> Path:
    """A small datapack declaring resources of every category.

    Layout::

        pack/
          pack.mcmeta
          data/demo/functions/load.mcfunction
          data/demo/functions/combat/init.mcfunction
          data/demo/functions/notes.txt
    """
    pack = tmp_path / "pack"
    pack.mkdir()
    (pack / "pack.mcmeta").write_text('{"pack": {"pack_format": 15}}\n', encoding="utf-8")
    functions = pack / "data" / "demo" / "functions"
    write_function(
        functions / "load.mcfunction",
        "scoreboard objectives add demo.kills playerKillCount",
        "scoreboard objectives add demo.timer dummy",
        "team add demo.red",
        "bossbar add demo.progress \"Progress\"",
        "data merge storage demo:state {running:1b}",
        "tag @e[type=minecraft:armor_stand] add demo.marker",
    )
    write_function(
        functions / "combat" / "init.mcfunction",
        "# combat setup",
        "scoreboard objectives add demo.hits dummy",
        "scoreboard objectives add demo.kills playerKillCount",
        "data modify storage demo:combat round set value 0",
    )
    write_function(
        functions / "notes.txt",
        "scoreboard objectives add ignored.note dummy",
    )
    return pack


@pytest.fixture
def make_function() -> Callable[..., Path]:
    """Factory writing function files: ``make_function(path, *lines)``."""
    return write_function


@pytest.fixture
def mock_function_lines() -> list[str]:
    """Function lines covering every extraction rule."""
    return [
        "scoreboard objectives add my.score dummy",
        "team add red_team",
        "bossbar add timer-bar \"Timer\"",
        "data merge storage ns:main {a:1}",
        "data modify storage ns:other path set value 1",
        "tag @s add spawned",
        "say nothing to see here",
    ]


@pytest.fixture
def config_home(tmp_path: Path) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    home = tmp_path / "xdg"
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(home)}):
        yield home
