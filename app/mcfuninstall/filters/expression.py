"""Include/exclude filter expressions over extracted identifiers.

A filter is a list of tokens. Each token is classified once, when the
filter is compiled:

- ``!/body/flags`` is a negative pattern
- ``!text`` is a negative literal
- ``/body/flags`` is a positive pattern
- anything else is a positive literal

Literals are substring tests, patterns are unanchored regex searches. When
any positive rule exists an identifier must hit one of them and then avoid
every negative rule. Negative rules only select on their own when no
positive rule is configured at all.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from mcfuninstall.models.match import Match

# Shape of a delimited pattern token: /body/flags
_PATTERN_TOKEN = re.compile(r"^/.+/[gmisxuUAJD]*$", re.DOTALL)

_FLAGS: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}

# Accepted without effect: g only affects iteration, u is Python's default
_IGNORED_FLAGS = frozenset("gu")


class FilterCompileError(ValueError):
    """Raised when a filter token cannot be compiled."""


def is_pattern_token(token: str) -> bool:
    """Check whether a token has the ``/body/flags`` pattern shape."""
    return _PATTERN_TOKEN.match(token) is not None


def compile_pattern(token: str) -> re.Pattern[str]:
    """Compile a ``/body/flags`` token into a regular expression.

    Args:
        token: Pattern token without any leading ``!``.

    Returns:
        Compiled pattern.

    Raises:
        FilterCompileError: If a flag is unsupported or the body is invalid.
    """
    body, _, flag_chars = token[1:].rpartition("/")
    flags = 0
    for char in flag_chars:
        if char in _IGNORED_FLAGS:
            continue
        if char not in _FLAGS:
            msg = f"Unsupported pattern flag '{char}' in filter {token!r}"
            raise FilterCompileError(msg)
        flags |= _FLAGS[char]

    try:
        return re.compile(body, flags)
    except re.error as e:
        msg = f"Invalid pattern in filter {token!r}: {e}"
        raise FilterCompileError(msg) from e


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Compiled filter: four disjoint rule sets.

    Attributes:
        positive_literals: Substrings an identifier may contain to be included.
        positive_patterns: Patterns an identifier may match to be included.
        negative_literals: Substrings that exclude an identifier.
        negative_patterns: Patterns that exclude an identifier.
    """

    positive_literals: tuple[str, ...] = ()
    positive_patterns: tuple[re.Pattern[str], ...] = ()
    negative_literals: tuple[str, ...] = ()
    negative_patterns: tuple[re.Pattern[str], ...] = ()

    @property
    def has_positive(self) -> bool:
        """True if any include rule is configured."""
        return bool(self.positive_literals or self.positive_patterns)

    @property
    def has_negative(self) -> bool:
        """True if any exclude rule is configured."""
        return bool(self.negative_literals or self.negative_patterns)

    def includes(self, identifier: str) -> bool:
        """Decide whether an identifier passes the filter.

        Args:
            identifier: Identifier to test.

        Returns:
            True if the identifier is kept.
        """
        if self.has_positive:
            return self._selected(identifier) and not self._excluded(identifier)
        if self.has_negative:
            return not self._excluded(identifier)
        return True

    def _selected(self, identifier: str) -> bool:
        if any(literal in identifier for literal in self.positive_literals):
            return True
        return any(pattern.search(identifier) for pattern in self.positive_patterns)

    def _excluded(self, identifier: str) -> bool:
        if any(literal in identifier for literal in self.negative_literals):
            return True
        return any(pattern.search(identifier) for pattern in self.negative_patterns)


def compile_filter(tokens: Iterable[str]) -> FilterSpec:
    """Classify and compile filter tokens.

    Args:
        tokens: Raw filter tokens.

    Returns:
        FilterSpec holding every token in exactly one rule set.

    Raises:
        FilterCompileError: If a token is empty or a pattern is malformed.
    """
    positive_literals: list[str] = []
    positive_patterns: list[re.Pattern[str]] = []
    negative_literals: list[str] = []
    negative_patterns: list[re.Pattern[str]] = []

    for token in tokens:
        if token.startswith("!"):
            rest = token[1:]
            if not rest:
                msg = "Empty negative filter '!'"
                raise FilterCompileError(msg)
            if is_pattern_token(rest):
                negative_patterns.append(compile_pattern(rest))
            else:
                negative_literals.append(rest)
        elif not token:
            msg = "Empty filter token"
            raise FilterCompileError(msg)
        elif is_pattern_token(token):
            positive_patterns.append(compile_pattern(token))
        else:
            positive_literals.append(token)

    return FilterSpec(
        positive_literals=tuple(positive_literals),
        positive_patterns=tuple(positive_patterns),
        negative_literals=tuple(negative_literals),
        negative_patterns=tuple(negative_patterns),
    )


def apply_filter(spec: FilterSpec, matches: Iterable[Match]) -> list[Match]:
    """Keep the matches whose identifier passes ``spec``, in original order.

    Duplicates are kept; they are collapsed later, when documents are built.
    """
    return [match for match in matches if spec.includes(match.id)]
