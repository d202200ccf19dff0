"""Tests for Category and Match."""

from pathlib import Path

import pytest
from mcfuninstall.models.match import Category, Match


class TestCategory:
    """Tests for the Category enum."""

    def test_canonical_order(self) -> None:
        assert [c.value for c in Category] == ["scoreboard", "team", "bossbar", "storage", "tag"]

    def test_labels(self) -> None:
        assert Category.SCOREBOARD.label == "Scoreboard objectives"
        assert Category.TAG.label == "Entity tags"

    def test_lookup_by_value(self) -> None:
        assert Category("storage") is Category.STORAGE


class TestMatch:
    """Tests for Match."""

    def test_equality_ignores_line(self) -> None:
        file = Path("/p/f.mcfunction")
        assert Match("a", file, file.parent, line=1) == Match("a", file, file.parent, line=9)

    def test_empty_identifier_rejected(self) -> None:
        with pytest.raises(ValueError, match="cannot be empty"):
            Match("", Path("/f"), Path("/"))
