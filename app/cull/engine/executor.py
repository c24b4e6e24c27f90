"""Deletion executor.

Consumes a worklist in order and applies exactly one terminal action to
each item according to the run's safety mode. Failures are isolated per
item: a single failed removal is recorded and the batch continues.
"""

import logging
import os
import shutil
import stat
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from cull.engine.models import DeletionMode, EntryType, LogLevel, SafetyMode
from cull.engine.outcome import Outcome

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]
Preview = Callable[[Sequence[str]], None]


class Logger(Protocol):
    """Sink for run log records (console, file, or both)."""

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None: ...


class DeletionExecutor:
    """Applies a safety mode to every worklist item and records the outcome.

    Per item, dry-run wins over everything, then the interactive prompt,
    then removal. Removal re-checks the entry type on disk instead of
    trusting the type seen during traversal.

    Args:
        root: Directory the worklist paths are relative to.
        safety: Safety mode for this run.
        logger: Run log sink.
        confirm: Blocking yes/no prompt.
        preview: Optional renderer for the worklist; when None each
            path is logged as its own record.
    """

    def __init__(
        self,
        root: Path,
        safety: SafetyMode,
        logger: Logger,
        confirm: Confirm,
        preview: Preview | None = None,
    ) -> None:
        self._root = root
        self._safety = safety
        self._log = logger
        self._confirm = confirm
        self._preview = preview

    def run(self, items: Sequence[str]) -> Outcome:
        """Process the whole worklist and return a fresh outcome.

        Args:
            items: Sorted worklist paths relative to the root.

        Returns:
            Outcome for this run only.
        """
        outcome = Outcome(total=len(items), dry_run=self._safety.dry_run)

        if not items:
            self._log.log("No items to delete.", LogLevel.INFO)
            return outcome

        if self._safety.preview:
            self._show_preview(items)
            if self._safety.confirm_batch and not self._confirm("Proceed with deletion?"):
                self._log.log("Deletion cancelled by user.", LogLevel.INFO)
                outcome.cancelled = True
                return outcome

        for item in items:
            self._process(item, outcome)

        return outcome

    def _show_preview(self, items: Sequence[str]) -> None:
        self._log.log(
            f"Preview: Items that will be deleted ({len(items)} items):",
            LogLevel.INFO,
        )
        if self._preview is not None:
            self._preview(items)
            return
        for item in items:
            self._log.log(f"  - {item}", LogLevel.INFO)

    def _process(self, item: str, outcome: Outcome) -> None:
        mode = self._safety.mode

        if mode == DeletionMode.DRY_RUN:
            self._log.log(f"Would delete: {item}", LogLevel.INFO)
            outcome.record_deleted()
            return

        if mode == DeletionMode.INTERACTIVE and not self._confirm(f"Delete '{item}'?"):
            self._log.log(f"Skipped: {item}", LogLevel.INFO)
            outcome.record_skipped()
            return

        self._remove(item, outcome)

    def _remove(self, item: str, outcome: Outcome) -> None:
        target = self._root / item

        try:
            st = os.lstat(target)
        except FileNotFoundError:
            self._log.log(f"Item not found or already deleted: {item}", LogLevel.WARNING)
            outcome.record_missing()
            return
        except OSError as e:
            self._log.log(f"Failed to delete: {item} ({e.strerror or e})", LogLevel.ERROR)
            outcome.record_failed(item)
            return

        # Symlinks are unlinked, never followed into
        entry_type = EntryType.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryType.FILE

        try:
            if entry_type == EntryType.DIRECTORY:
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as e:
            if isinstance(e, FileNotFoundError) and not os.path.lexists(target):
                self._log.log(f"Item not found or already deleted: {item}", LogLevel.WARNING)
                outcome.record_missing()
                return
            logger.debug("Removal of %s failed", target, exc_info=True)
            self._log.log(
                f"Failed to delete {entry_type.value}: {item} ({e.strerror or e})",
                LogLevel.ERROR,
            )
            outcome.record_failed(item)
            return

        self._log.log(f"Deleted {entry_type.value}: {item}", LogLevel.INFO)
        outcome.record_deleted()
