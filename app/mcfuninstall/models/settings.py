"""Per-category scan settings.

Each category is either disabled, enabled without a filter, or enabled
with a compiled filter. The state is an explicit tag rather than a
bool-or-list value so the filtered case can never be mistaken for the
unfiltered one.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from mcfuninstall.filters.expression import FilterSpec, compile_filter
from mcfuninstall.models.match import Category


class CategoryState(str, Enum):
    """Scan state of a category.

    Attributes:
        DISABLED: Category is skipped entirely.
        UNFILTERED: Every extracted identifier is collected.
        FILTERED: Extracted identifiers are passed through a filter.
    """

    DISABLED = "disabled"
    UNFILTERED = "unfiltered"
    FILTERED = "filtered"


@dataclass(frozen=True, slots=True)
class CategorySetting:
    """Tagged scan setting for one category.

    Attributes:
        state: Which variant this setting is.
        tokens: Raw filter tokens (only for FILTERED).
        filter_spec: Compiled filter (only for FILTERED).
    """

    state: CategoryState
    tokens: tuple[str, ...] = ()
    filter_spec: FilterSpec | None = None

    def __post_init__(self) -> None:
        """Validate that the payload matches the variant."""
        if self.state == CategoryState.FILTERED:
            if self.filter_spec is None or not self.tokens:
                msg = "A filtered category needs filter tokens"
                raise ValueError(msg)
        elif self.filter_spec is not None or self.tokens:
            msg = f"A {self.state.value} category cannot carry a filter"
            raise ValueError(msg)

    @classmethod
    def disabled(cls) -> "CategorySetting":
        return cls(CategoryState.DISABLED)

    @classmethod
    def unfiltered(cls) -> "CategorySetting":
        return cls(CategoryState.UNFILTERED)

    @classmethod
    def filtered(cls, tokens: Iterable[str]) -> "CategorySetting":
        """Create a filtered setting, compiling the tokens immediately.

        Raises:
            FilterCompileError: If a token is malformed.
        """
        token_tuple = tuple(tokens)
        return cls(CategoryState.FILTERED, token_tuple, compile_filter(token_tuple))

    @classmethod
    def from_value(cls, value: bool | Iterable[str]) -> "CategorySetting":
        """Build a setting from its configuration-file form.

        ``false`` disables the category, ``true`` or an empty list enables it
        unfiltered, and a non-empty list of tokens enables it filtered.
        """
        if value is True:
            return cls.unfiltered()
        if value is False:
            return cls.disabled()
        tokens = tuple(value)
        if not tokens:
            return cls.unfiltered()
        return cls.filtered(tokens)

    @property
    def enabled(self) -> bool:
        return self.state != CategoryState.DISABLED


def _all_unfiltered() -> dict[Category, CategorySetting]:
    return {category: CategorySetting.unfiltered() for category in Category}


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Settings for one scan run.

    Attributes:
        categories: Setting per category; missing categories are unfiltered.
        suffixes: File suffixes read below a directory root (None reads all).
    """

    categories: Mapping[Category, CategorySetting] = field(default_factory=_all_unfiltered)
    suffixes: tuple[str, ...] | None = (".mcfunction",)

    def __post_init__(self) -> None:
        """Reject configurations that would scan nothing."""
        if not self.enabled_categories:
            msg = "All categories are disabled; enable at least one"
            raise ValueError(msg)

    def setting(self, category: Category) -> CategorySetting:
        """Get the setting of a category (unfiltered when not configured)."""
        return self.categories.get(category, CategorySetting.unfiltered())

    @property
    def enabled_categories(self) -> list[Category]:
        """Enabled categories in canonical order."""
        return [category for category in Category if self.setting(category).enabled]
