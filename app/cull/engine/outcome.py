"""Per-run outcome accounting."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Outcome:
    """Tally of terminal item states for a single run.

    Created at the start of a run, mutated only by the executor, and
    returned to the caller at the end. Skipped and missing items are
    tracked but never affect the exit code.

    Attributes:
        total: Number of items in the worklist.
        deleted: Items removed (or, in dry-run, items that would be).
        failed_paths: Paths whose removal raised, in processing order.
        skipped: Items declined at the interactive prompt.
        missing: Items that no longer existed at removal time.
        dry_run: Whether the run was a simulation.
        cancelled: Whether the batch confirmation was declined.
    """

    total: int = 0
    deleted: int = 0
    failed_paths: list[str] = field(default_factory=list)
    skipped: int = 0
    missing: int = 0
    dry_run: bool = False
    cancelled: bool = False

    @property
    def failed(self) -> int:
        """Number of items whose removal failed."""
        return len(self.failed_paths)

    @property
    def exit_code(self) -> int:
        """Process exit status: 1 if any removal failed, 0 otherwise."""
        return 1 if self.failed_paths else 0

    def record_deleted(self) -> None:
        self.deleted += 1

    def record_failed(self, path: str) -> None:
        self.failed_paths.append(path)

    def record_skipped(self) -> None:
        self.skipped += 1

    def record_missing(self) -> None:
        self.missing += 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON summary shape."""
        data: dict[str, Any] = {
            "total_items": self.total,
            "deleted": self.deleted,
            "failed": self.failed,
            "skipped": self.skipped,
            "missing": self.missing,
            "dry_run": self.dry_run,
            "cancelled": self.cancelled,
        }
        if self.failed_paths:
            data["failed_items"] = list(self.failed_paths)
        return data
