"""Glob-style name patterns.

Selection patterns support two wildcards only: ``*`` matches any run of
characters (including none) and ``?`` matches exactly one character.
Every other character, including ``[`` and ``]``, is literal. Matching
is anchored at both ends and case-sensitive, and applies to a bare
entry name, never to a full path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

WILDCARDS = frozenset("*?")


@dataclass(frozen=True, slots=True)
class LiteralPattern:
    """A pattern without wildcards, matched by exact name equality."""

    text: str

    def matches(self, name: str) -> bool:
        return name == self.text


@dataclass(frozen=True, slots=True)
class WildcardPattern:
    """A pattern containing ``*`` or ``?``, matched by a compiled regex."""

    text: str
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_regex", re.compile(_translate(self.text), re.DOTALL))

    def matches(self, name: str) -> bool:
        return self._regex.fullmatch(name) is not None


Pattern = LiteralPattern | WildcardPattern


def _translate(text: str) -> str:
    """Translate a wildcard pattern to an (unanchored) regex source."""
    parts: list[str] = []
    literal: list[str] = []
    for char in text:
        if char in WILDCARDS:
            if literal:
                parts.append(re.escape("".join(literal)))
                literal = []
            parts.append(".*" if char == "*" else ".")
        else:
            literal.append(char)
    if literal:
        parts.append(re.escape("".join(literal)))
    return "".join(parts)


def compile_pattern(text: str) -> Pattern:
    """Compile a pattern string once into its tagged form.

    Args:
        text: Raw pattern as given on the command line.

    Returns:
        LiteralPattern if the text has no wildcard, WildcardPattern otherwise.
    """
    if any(char in WILDCARDS for char in text):
        return WildcardPattern(text)
    return LiteralPattern(text)


def matches(name: str, pattern: Pattern | str) -> bool:
    """Check whether an entry name matches a pattern.

    Args:
        name: Bare entry name (basename).
        pattern: Compiled pattern, or a raw string compiled on the fly.

    Returns:
        True if the whole name matches the pattern.
    """
    if isinstance(pattern, str):
        pattern = compile_pattern(pattern)
    return pattern.matches(name)
