"""Extraction rules and inverse command templates per category.

Each category is bound to exactly one extraction rule (the command phrase
that declares a resource, followed by the identifier it declares) and one
inverse template (the command removing it again).
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

from mcfuninstall.models.match import Category

# Identifier charset shared by all categories
IDENTIFIER_CHARS = r"A-Za-z0-9._\-"

# Storage keys are namespaced (``namespace:key``)
STORAGE_IDENTIFIER_CHARS = IDENTIFIER_CHARS + ":"

# Target of ``tag <targets> add``: a selector or a name. Selector arguments may
# nest brackets (nbt, scores), so they run lazily up to the closing bracket that
# is followed by the ``add`` keyword.
_TAG_TARGET = r"(?:@[a-z](?:\[.*?\])?|[A-Za-z0-9._\-]+)"


@dataclass(frozen=True, slots=True)
class ExtractionRule:
    """Pattern pulling identifiers of one category out of a line.

    Attributes:
        category: Category the rule belongs to.
        prefixes: Regex fragments for the phrases that precede an identifier.
            Alternatives are checked independently on every line.
        charset: Character class body of a valid identifier.
    """

    category: Category
    prefixes: tuple[str, ...]
    charset: str = IDENTIFIER_CHARS
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the prefixes into a single pattern."""
        if not self.prefixes:
            msg = f"Extraction rule for {self.category.value} needs at least one prefix"
            raise ValueError(msg)
        alternatives = "|".join(self.prefixes)
        compiled = re.compile(rf"(?:{alternatives})(?P<id>[{self.charset}]+)")
        object.__setattr__(self, "pattern", compiled)

    def find(self, text: str) -> Iterator[str]:
        """Yield every identifier declared in ``text``, left to right."""
        for found in self.pattern.finditer(text):
            yield found.group("id")


RULES: dict[Category, ExtractionRule] = {
    Category.SCOREBOARD: ExtractionRule(
        Category.SCOREBOARD,
        prefixes=(r"scoreboard objectives add ",),
    ),
    Category.TEAM: ExtractionRule(
        Category.TEAM,
        prefixes=(r"\bteam add ",),
    ),
    Category.BOSSBAR: ExtractionRule(
        Category.BOSSBAR,
        prefixes=(r"\bbossbar add ",),
    ),
    Category.STORAGE: ExtractionRule(
        Category.STORAGE,
        prefixes=(r"data merge storage ", r"data modify storage "),
        charset=STORAGE_IDENTIFIER_CHARS,
    ),
    Category.TAG: ExtractionRule(
        Category.TAG,
        prefixes=(rf"\btag {_TAG_TARGET} add ",),
    ),
}

TEMPLATES: dict[Category, str] = {
    Category.SCOREBOARD: "scoreboard objectives remove {id}",
    Category.TEAM: "team remove {id}",
    Category.BOSSBAR: "bossbar remove {id}",
    Category.STORAGE: "data remove storage {id} {{}}",
    Category.TAG: "tag @e remove {id}",
}

# Never select players: killing them is not an uninstall step
KILL_TAG_TEMPLATE = "kill @e[type=!minecraft:player,tag={id}]"


def get_rule(category: Category) -> ExtractionRule:
    """Get the extraction rule bound to a category."""
    return RULES[category]


def get_template(category: Category, kill_tags: bool = False) -> str:
    """Get the inverse command template for a category.

    Args:
        category: Resource category.
        kill_tags: Use the destructive kill template for entity tags.

    Returns:
        ``str.format`` template with an ``{id}`` placeholder.
    """
    if category == Category.TAG and kill_tags:
        return KILL_TAG_TEMPLATE
    return TEMPLATES[category]


def render_inverse(category: Category, identifier: str, kill_tags: bool = False) -> str:
    """Render the command removing one identifier."""
    return get_template(category, kill_tags).format(id=identifier)
