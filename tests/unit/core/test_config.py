"""Unit tests for configuration loading, saving and merging."""

import tomllib
from pathlib import Path

import pytest
from mcfuninstall.core.config import (
    CategoriesConfig,
    ConfigError,
    ConfigParseError,
    NamespaceConfig,
    UninstallConfig,
    build_scan_config,
    config_to_toml,
    load_config,
    parse_filter_option,
    save_config,
)
from mcfuninstall.models.match import Category
from mcfuninstall.models.settings import CategoryState
from pydantic import ValidationError


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path for a config file inside a temporary directory."""
    return tmp_path / "mcf-uninstall" / "config.toml"


class TestModels:
    """Tests for the configuration models."""

    def test_defaults(self) -> None:
        """Every category is enabled and defaults match the resolver."""
        config = UninstallConfig()

        assert all(config.categories.get(c) is True for c in Category)
        assert config.output.path == "uninstall.mcfunction"
        assert config.output.kill_tags is False
        assert config.output.suffixes == [".mcfunction"]
        assert config.namespace.target == "data"
        assert config.namespace.depth_limit == 5
        assert config.namespace.height_limit == 10

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CategoriesConfig.model_validate({"advancement": True})

    def test_target_must_be_a_name(self) -> None:
        with pytest.raises(ValidationError, match="single directory name"):
            NamespaceConfig(target="a/data")

    def test_limits_are_bounded(self) -> None:
        with pytest.raises(ValidationError):
            NamespaceConfig(depth_limit=-1)


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_uses_defaults(self, config_file: Path) -> None:
        assert load_config(config_file) == UninstallConfig()

    def test_missing_required_file(self, config_file: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file, required=True)

    def test_loads_values(self, config_file: Path) -> None:
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            "[categories]\n"
            'storage = ["!temp"]\n'
            "tag = false\n"
            "[output]\n"
            "kill_tags = true\n"
            "[namespace]\n"
            "depth_limit = 2\n",
            encoding="utf-8",
        )

        config = load_config(config_file)

        assert config.categories.storage == ["!temp"]
        assert config.categories.tag is False
        assert config.categories.team is True
        assert config.output.kill_tags is True
        assert config.namespace.depth_limit == 2

    def test_invalid_toml(self, config_file: Path) -> None:
        config_file.parent.mkdir(parents=True)
        config_file.write_text("[categories\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="Invalid TOML"):
            load_config(config_file)

    def test_invalid_content(self, config_file: Path) -> None:
        config_file.parent.mkdir(parents=True)
        config_file.write_text('[output]\nkill_tags = "sometimes"\n', encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(config_file)


class TestSaveConfig:
    """Tests for save_config and config_to_toml."""

    def test_save_creates_parents(self, config_file: Path) -> None:
        config = UninstallConfig()
        config.categories.storage = ["!temp"]

        assert save_config(config, config_file) == config_file
        assert load_config(config_file) == config

    def test_toml_text(self) -> None:
        data = tomllib.loads(config_to_toml(UninstallConfig()))
        assert data["categories"]["scoreboard"] is True
        assert data["namespace"]["target"] == "data"


class TestParseFilterOption:
    """Tests for CATEGORY=TOKEN parsing."""

    def test_parses(self) -> None:
        assert parse_filter_option("storage=!temp") == (Category.STORAGE, "!temp")

    def test_token_may_contain_equals(self) -> None:
        assert parse_filter_option("tag=/a=b/") == (Category.TAG, "/a=b/")

    def test_case_insensitive_category(self) -> None:
        assert parse_filter_option("Team=red")[0] == Category.TEAM

    @pytest.mark.parametrize("value", ["storage", "storage=", "=x"])
    def test_malformed(self, value: str) -> None:
        with pytest.raises(ConfigError):
            parse_filter_option(value)

    def test_unknown_category(self) -> None:
        with pytest.raises(ConfigError, match="Unknown category"):
            parse_filter_option("advancement=x")


class TestBuildScanConfig:
    """Tests for merging file settings and overrides."""

    def test_file_values(self) -> None:
        config = UninstallConfig()
        config.categories.tag = False
        config.categories.storage = ["!temp"]

        scan = build_scan_config(config)

        assert scan.setting(Category.TAG).state == CategoryState.DISABLED
        assert scan.setting(Category.STORAGE).state == CategoryState.FILTERED
        assert scan.setting(Category.TEAM).state == CategoryState.UNFILTERED
        assert scan.suffixes == (".mcfunction",)

    def test_command_line_filter_replaces_file_value(self) -> None:
        config = UninstallConfig()
        config.categories.storage = ["!temp"]

        scan = build_scan_config(config, filters={Category.STORAGE: ["main"]})

        assert scan.setting(Category.STORAGE).tokens == ("main",)

    def test_skip_wins(self) -> None:
        scan = build_scan_config(
            UninstallConfig(), skip=[Category.TEAM], filters={Category.TEAM: ["x"]}
        )
        assert Category.TEAM not in scan.enabled_categories

    def test_bad_filter(self) -> None:
        with pytest.raises(ConfigError, match="Invalid scoreboard filter"):
            build_scan_config(UninstallConfig(), filters={Category.SCOREBOARD: ["/(/"]})

    def test_everything_skipped(self) -> None:
        with pytest.raises(ConfigError, match="All categories are disabled"):
            build_scan_config(UninstallConfig(), skip=list(Category))

    def test_empty_suffix_list_reads_every_file(self) -> None:
        config = UninstallConfig()
        config.output.suffixes = []

        assert build_scan_config(config).suffixes is None
