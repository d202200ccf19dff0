"""Resource categories and extracted matches.

This module defines the core data structures produced by a scan: the
resource categories that can be declared in a function file, and the
identifier matches extracted from individual lines.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class Category(str, Enum):
    """Kind of named resource a datapack can declare.

    Attributes:
        SCOREBOARD: Scoreboard objective (``scoreboard objectives add``).
        TEAM: Team (``team add``).
        BOSSBAR: Bossbar (``bossbar add``).
        STORAGE: Command storage key (``data merge|modify storage``).
        TAG: Entity tag (``tag <targets> add``).
    """

    SCOREBOARD = "scoreboard"
    TEAM = "team"
    BOSSBAR = "bossbar"
    STORAGE = "storage"
    TAG = "tag"

    @property
    def label(self) -> str:
        """Human-readable plural label used for section headings."""
        return _LABELS[self]


_LABELS: dict[Category, str] = {
    Category.SCOREBOARD: "Scoreboard objectives",
    Category.TEAM: "Teams",
    Category.BOSSBAR: "Bossbars",
    Category.STORAGE: "Storage",
    Category.TAG: "Entity tags",
}


@dataclass(frozen=True, slots=True)
class Match:
    """An identifier extracted from one line of a function file.

    Two matches refer to the same resource when their ``id`` strings are
    equal, even if they come from different files.

    Attributes:
        id: Extracted resource identifier.
        file: Absolute path of the file the identifier was found in.
        dir: Directory containing ``file``.
        line: 1-based line number (not part of equality).
    """

    id: str
    file: Path
    dir: Path
    line: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        """Validate match data after initialization."""
        if not self.id:
            msg = "Identifier cannot be empty"
            raise ValueError(msg)
