"""Tests for per-category settings."""

import pytest
from mcfuninstall.filters.expression import FilterCompileError
from mcfuninstall.models.match import Category
from mcfuninstall.models.settings import CategorySetting, CategoryState, ScanConfig


class TestCategorySetting:
    """Tests for the tagged category setting."""

    def test_from_true(self) -> None:
        setting = CategorySetting.from_value(True)
        assert setting.state == CategoryState.UNFILTERED
        assert setting.enabled
        assert setting.filter_spec is None

    def test_from_false(self) -> None:
        setting = CategorySetting.from_value(False)
        assert setting.state == CategoryState.DISABLED
        assert not setting.enabled

    def test_from_empty_list_is_unfiltered(self) -> None:
        """An empty token list collects everything."""
        assert CategorySetting.from_value([]).state == CategoryState.UNFILTERED

    def test_from_tokens_compiles(self) -> None:
        setting = CategorySetting.from_value(["score", "!global"])

        assert setting.state == CategoryState.FILTERED
        assert setting.tokens == ("score", "!global")
        assert setting.filter_spec is not None
        assert setting.filter_spec.includes("my.score")
        assert not setting.filter_spec.includes("global.score")

    def test_bad_tokens_fail_early(self) -> None:
        with pytest.raises(FilterCompileError):
            CategorySetting.from_value(["/x/A"])
        with pytest.raises(FilterCompileError):
            CategorySetting.filtered(["/(/"])

    def test_filtered_needs_tokens(self) -> None:
        with pytest.raises(ValueError, match="needs filter tokens"):
            CategorySetting(CategoryState.FILTERED)

    def test_unfiltered_cannot_carry_tokens(self) -> None:
        with pytest.raises(ValueError, match="cannot carry a filter"):
            CategorySetting(CategoryState.UNFILTERED, tokens=("a",))


class TestScanConfig:
    """Tests for ScanConfig."""

    def test_defaults(self) -> None:
        """Every category is enabled and only function files are read."""
        config = ScanConfig()
        assert config.enabled_categories == list(Category)
        assert config.suffixes == (".mcfunction",)

    def test_missing_category_is_unfiltered(self) -> None:
        config = ScanConfig(categories={Category.TEAM: CategorySetting.disabled()})

        assert config.setting(Category.BOSSBAR).state == CategoryState.UNFILTERED
        assert Category.TEAM not in config.enabled_categories

    def test_enabled_in_canonical_order(self) -> None:
        categories = {category: CategorySetting.disabled() for category in Category}
        categories[Category.TAG] = CategorySetting.unfiltered()
        categories[Category.SCOREBOARD] = CategorySetting.filtered(["x"])

        config = ScanConfig(categories=categories)

        assert config.enabled_categories == [Category.SCOREBOARD, Category.TAG]

    def test_all_disabled_rejected(self) -> None:
        """A configuration that would scan nothing is rejected."""
        categories = {category: CategorySetting.disabled() for category in Category}
        with pytest.raises(ValueError, match="All categories are disabled"):
            ScanConfig(categories=categories)
