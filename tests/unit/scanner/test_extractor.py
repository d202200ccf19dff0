"""Tests for per-category identifier extraction."""

from collections.abc import Callable
from pathlib import Path

from mcfuninstall.models.match import Category, Match
from mcfuninstall.scanner.extractor import extract, extract_all

MCFUNCTION = (".mcfunction",)


class TestExtract:
    """Tests for extract()."""

    def test_example_scoreboard_line(
        self, tmp_path: Path, make_function: Callable[..., Path]
    ) -> None:
        """A declared objective yields a match with its file and directory."""
        file = make_function(tmp_path / "f.mcfunction", "scoreboard objectives add my.score dummy")

        matches = list(extract(Category.SCOREBOARD, tmp_path))

        assert matches == [Match(id="my.score", file=file, dir=tmp_path)]
        assert matches[0].line == 1

    def test_encounter_order(self, datapack: Path) -> None:
        """Matches follow directory pre-order, then line order."""
        ids = [m.id for m in extract(Category.SCOREBOARD, datapack, MCFUNCTION)]
        assert ids == ["demo.hits", "demo.kills", "demo.kills", "demo.timer"]

    def test_duplicates_are_kept(self, datapack: Path) -> None:
        """The extractor never deduplicates."""
        ids = [m.id for m in extract(Category.SCOREBOARD, datapack, MCFUNCTION)]
        assert ids.count("demo.kills") == 2

    def test_suffix_filter_applies(self, datapack: Path) -> None:
        """Non-function files are skipped when suffixes are given."""
        with_filter = [m.id for m in extract(Category.SCOREBOARD, datapack, MCFUNCTION)]
        without = [m.id for m in extract(Category.SCOREBOARD, datapack)]
        assert "ignored.note" not in with_filter
        assert "ignored.note" in without

    def test_match_paths_are_absolute(self, datapack: Path) -> None:
        for match in extract(Category.TEAM, datapack):
            assert match.file.is_absolute()
            assert match.dir == match.file.parent

    def test_categories_are_independent(self, datapack: Path) -> None:
        """Each category only sees its own declarations."""
        assert [m.id for m in extract(Category.TEAM, datapack)] == ["demo.red"]
        assert [m.id for m in extract(Category.BOSSBAR, datapack)] == ["demo.progress"]
        assert [m.id for m in extract(Category.TAG, datapack)] == ["demo.marker"]
        assert [m.id for m in extract(Category.STORAGE, datapack)] == [
            "demo:combat",
            "demo:state",
        ]

    def test_idempotent(self, datapack: Path) -> None:
        """Re-running on an unchanged tree yields an identical sequence."""
        first = list(extract(Category.SCOREBOARD, datapack))
        second = list(extract(Category.SCOREBOARD, datapack))
        assert first == second
        assert [m.line for m in first] == [m.line for m in second]

    def test_no_declarations(self, tmp_path: Path, make_function: Callable[..., Path]) -> None:
        """A tree without declarations yields nothing."""
        make_function(tmp_path / "f.mcfunction", "say hi")
        assert list(extract(Category.SCOREBOARD, tmp_path)) == []


class TestExtractAll:
    """Tests for extract_all()."""

    def test_roots_in_given_order(
        self, tmp_path: Path, make_function: Callable[..., Path]
    ) -> None:
        """Matches from several roots keep the order of the roots."""
        second = make_function(tmp_path / "b.mcfunction", "team add second")
        first = make_function(tmp_path / "a.mcfunction", "team add first")

        ids = [m.id for m in extract_all(Category.TEAM, [second, first])]
        assert ids == ["second", "first"]
