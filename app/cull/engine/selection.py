"""Worklist construction from one or more pattern classes.

Runs one traversal per configured pattern class, drops excluded paths,
removes duplicates and sorts the result. The sorted order is what the
preview shows, what the log records and what the executor acts on, so
two runs against an unchanged tree always produce the same worklist.
"""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path

from cull.engine.exclusions import is_excluded
from cull.engine.models import PatternClass
from cull.engine.patterns import compile_pattern
from cull.engine.traverser import FilesystemTraverser, Traverser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectionSet:
    """Deduplicated, lexicographically sorted deletion worklist.

    Attributes:
        paths: Paths relative to the search root.
    """

    paths: tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def __bool__(self) -> bool:
        return bool(self.paths)


def build_selection(
    configs: Sequence[tuple[PatternClass, str]],
    max_depth: int | None = None,
    exclusions: Sequence[str] = (),
    root: Path | None = None,
    traverser: Traverser | None = None,
) -> SelectionSet:
    """Build the worklist for a set of (class, pattern) pairs.

    Args:
        configs: Active pattern classes with their patterns.
        max_depth: Deepest level visited; None for unbounded.
        exclusions: Substring/basename exclusions.
        root: Search root. Defaults to the current working directory.
        traverser: Traversal strategy. Defaults to FilesystemTraverser.

    Returns:
        SelectionSet with every surviving path exactly once, sorted.
    """
    root = root if root is not None else Path.cwd()
    traverser = traverser if traverser is not None else FilesystemTraverser()

    collected: list[str] = []
    for pattern_class, pattern in configs:
        compiled = compile_pattern(pattern)
        found = [c.path for c in traverser.traverse(root, pattern_class, compiled, max_depth)]
        logger.debug("%s pattern %r matched %d entries", pattern_class.value, pattern, len(found))
        collected.extend(found)

    kept = {path for path in collected if not is_excluded(path, exclusions)}
    return SelectionSet(paths=tuple(sorted(kept)))
