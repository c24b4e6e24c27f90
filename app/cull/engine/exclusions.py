"""Exclusion filtering for selected paths.

Exclusions are deliberately simpler than selection patterns: they are
never glob-matched. A path is excluded when it contains an exclusion as
a literal substring, or when its final segment equals one exactly.
"""

from collections.abc import Iterable
from posixpath import basename


def is_excluded(path: str, exclusions: Iterable[str]) -> bool:
    """Check if a path is protected from deletion by an exclusion.

    Args:
        path: Candidate path relative to the search root.
        exclusions: Exclusion strings in the order they were given.

    Returns:
        True on the first exclusion that matches, False if none does.
    """
    name = basename(path.rstrip("/"))
    for exclusion in exclusions:
        if exclusion in path or name == exclusion:
            return True
    return False
