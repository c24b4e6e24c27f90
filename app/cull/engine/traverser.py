"""Directory traversal for candidate discovery.

Walks a directory tree from a root, bounded by an optional maximum
depth, and yields entries whose name matches a selection pattern.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path

from cull.engine.models import Candidate, EntryType, PatternClass
from cull.engine.patterns import Pattern, compile_pattern

logger = logging.getLogger(__name__)


class Traverser(ABC):
    """Abstract base class for candidate traversal strategies.

    Example:
        >>> traverser = FilesystemTraverser()
        >>> for candidate in traverser.traverse(Path("."), PatternClass.FILES, "*.tmp"):
        ...     print(candidate.path)
    """

    @abstractmethod
    def traverse(
        self,
        root: Path,
        pattern_class: PatternClass,
        pattern: Pattern | str,
        max_depth: int | None = None,
    ) -> Iterator[Candidate]:
        """Yield entries under root whose name matches the pattern.

        Args:
            root: Directory to start from (depth 0).
            pattern_class: Which entry types may match.
            pattern: Selection pattern, compiled or raw.
            max_depth: Deepest level visited; None for unbounded.

        Yields:
            Candidate instances with paths relative to root.
        """


class FilesystemTraverser(Traverser):
    """Depth-first traversal of the local filesystem using ``os.scandir``.

    The root itself is depth 0 and is never a candidate; its children
    are depth 1. Every directory within the depth bound is descended
    into, including directories that matched. Symlinks are never
    followed and count as neither files nor folders; only the types
    class tests them, dangling ones included.
    Directories that cannot be read are skipped and traversal continues
    with their siblings.
    """

    def traverse(
        self,
        root: Path,
        pattern_class: PatternClass,
        pattern: Pattern | str,
        max_depth: int | None = None,
    ) -> Iterator[Candidate]:
        if isinstance(pattern, str):
            pattern = compile_pattern(pattern)
        yield from self._walk(Path(root), "", pattern_class, pattern, max_depth, depth=1)

    def _walk(
        self,
        directory: Path,
        prefix: str,
        pattern_class: PatternClass,
        pattern: Pattern,
        max_depth: int | None,
        depth: int,
    ) -> Iterator[Candidate]:
        if max_depth is not None and depth > max_depth:
            return

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", directory, e)
            return

        for entry in entries:
            rel_path = f"{prefix}{entry.name}"
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file(follow_symlinks=False)
            except OSError as e:
                logger.debug("Cannot determine type of %s: %s", entry.path, e)
                continue

            accepted = _class_accepts(pattern_class, is_dir=is_dir, is_file=is_file)
            if accepted and pattern.matches(entry.name):
                entry_type = EntryType.DIRECTORY if is_dir else EntryType.FILE
                yield Candidate(path=rel_path, entry_type=entry_type)

            if is_dir:
                yield from self._walk(
                    Path(entry.path),
                    f"{rel_path}/",
                    pattern_class,
                    pattern,
                    max_depth,
                    depth + 1,
                )


def _class_accepts(pattern_class: PatternClass, *, is_dir: bool, is_file: bool) -> bool:
    """Check if an entry of the given kind may be tested under a pattern class.

    FILES takes regular files and FOLDERS real directories; MIXED takes
    every entry, symlinks and special files included.
    """
    if pattern_class == PatternClass.FILES:
        return is_file
    if pattern_class == PatternClass.FOLDERS:
        return is_dir
    return True
