"""Domain models for pattern-driven deletion.

This module defines the value types shared by the selection and
deletion stages: pattern classes, traversal candidates, the validated
search configuration, and the safety mode collapsed from CLI flags.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class PatternClass(str, Enum):
    """Which filesystem entry types a selection pattern may match.

    Attributes:
        FILES: Only regular files are tested against the pattern.
        FOLDERS: Only directories are tested against the pattern.
        MIXED: Both files and directories are tested.
    """

    FILES = "files"
    FOLDERS = "folders"
    MIXED = "types"


class EntryType(str, Enum):
    """Type of a discovered filesystem entry."""

    FILE = "file"
    DIRECTORY = "directory"


class LogLevel(str, Enum):
    """Severity of a run log record."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class OutputFormat(str, Enum):
    """Console output format for log records, preview and summary."""

    PLAIN = "plain"
    JSON = "json"


class DeletionMode(str, Enum):
    """Per-item behaviour of the deletion executor.

    Attributes:
        DRY_RUN: Report what would be deleted; never touch the filesystem.
        FORCE: Remove every item without prompting.
        INTERACTIVE: Ask for confirmation before each removal.
        DIRECT: Remove every item (no per-item prompt, no force).
    """

    DRY_RUN = "dry_run"
    FORCE = "force"
    INTERACTIVE = "interactive"
    DIRECT = "direct"


@dataclass(frozen=True, slots=True)
class Candidate:
    """A filesystem entry discovered by traversal.

    Attributes:
        path: Path relative to the traversal root, with POSIX separators.
        entry_type: Type observed at traversal time.
    """

    path: str
    entry_type: EntryType


@dataclass(frozen=True, slots=True)
class SafetyMode:
    """Safety behaviour derived once from the raw CLI flags.

    Attributes:
        mode: Per-item deletion behaviour.
        preview: Whether the worklist is displayed before processing.
    """

    mode: DeletionMode = DeletionMode.DIRECT
    preview: bool = False

    @classmethod
    def from_flags(
        cls,
        *,
        dry_run: bool = False,
        interactive: bool = False,
        force: bool = False,
        preview: bool = False,
    ) -> SafetyMode:
        """Collapse the four safety flags into a single mode.

        Dry-run wins over everything, force suppresses all prompting,
        and interactive only applies when neither of those is set.
        """
        if dry_run:
            mode = DeletionMode.DRY_RUN
        elif force:
            mode = DeletionMode.FORCE
        elif interactive:
            mode = DeletionMode.INTERACTIVE
        else:
            mode = DeletionMode.DIRECT
        return cls(mode=mode, preview=preview)

    @property
    def dry_run(self) -> bool:
        """Check if no filesystem mutation may happen."""
        return self.mode == DeletionMode.DRY_RUN

    @property
    def confirm_batch(self) -> bool:
        """Check if a single confirmation gates the whole batch."""
        return self.preview and self.mode not in (DeletionMode.DRY_RUN, DeletionMode.FORCE)


class SearchConfig(BaseModel):
    """Validated, immutable description of what to select.

    Attributes:
        files_pattern: Pattern for regular files.
        folders_pattern: Pattern for directories.
        types_pattern: Pattern for files and directories alike.
        exclude_patterns: Substring/basename exclusions, in CLI order.
        max_depth: Deepest level visited (root children are depth 1).
        root: Directory the search starts from.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    files_pattern: Annotated[str | None, Field(description="Pattern for files")] = None
    folders_pattern: Annotated[str | None, Field(description="Pattern for folders")] = None
    types_pattern: Annotated[str | None, Field(description="Pattern for any entry")] = None
    exclude_patterns: Annotated[
        tuple[str, ...],
        Field(default_factory=tuple, description="Exclusion substrings or names"),
    ]
    max_depth: Annotated[int | None, Field(description="Maximum search depth")] = None
    root: Annotated[Path, Field(default_factory=Path.cwd, description="Search root")]

    @field_validator("files_pattern", "folders_pattern", "types_pattern", mode="before")
    @classmethod
    def empty_pattern_is_unset(cls, v: object) -> object:
        """Treat an empty pattern string as not supplied."""
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("max_depth")
    @classmethod
    def validate_depth(cls, v: int | None) -> int | None:
        """Validate that the depth, when given, is a positive integer."""
        if v is not None and v < 1:
            msg = "--depth must be a positive number"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_has_pattern(self) -> SearchConfig:
        """Validate that at least one selection pattern is present."""
        if not self.pattern_configs():
            msg = "At least one of --files, --folders, or --types must be specified"
            raise ValueError(msg)
        return self

    def pattern_configs(self) -> list[tuple[PatternClass, str]]:
        """Return the active (class, pattern) pairs in a fixed order."""
        configs: list[tuple[PatternClass, str]] = []
        if self.files_pattern:
            configs.append((PatternClass.FILES, self.files_pattern))
        if self.folders_pattern:
            configs.append((PatternClass.FOLDERS, self.folders_pattern))
        if self.types_pattern:
            configs.append((PatternClass.MIXED, self.types_pattern))
        return configs
