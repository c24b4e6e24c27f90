"""Run logger for cull.

Writes timestamped run records to the console, as plain lines or JSON
lines, and optionally appends them to a log file that starts with a
header describing the run settings.
"""

import json
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from cull.core.theme import level_style
from cull.engine.models import LogLevel, OutputFormat, SafetyMode, SearchConfig
from cull.utils.formatting import console as default_console
from cull.utils.formatting import print_warning

logger = logging.getLogger(__name__)

HEADER_RULE = "=" * 42


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


class RunLogger:
    """Console and file sink for run records.

    Plain records look like ``[2024-01-15 10:00:00] [INFO] message``; JSON
    records are single-line objects with timestamp, level and message.
    The log file always receives the plain form.

    Args:
        log_file: Optional path of the log file to append to.
        output_format: Console format.
        console: Console to print to. Defaults to the shared console.
    """

    def __init__(
        self,
        log_file: Path | None = None,
        output_format: OutputFormat = OutputFormat.PLAIN,
        console: Console | None = None,
    ) -> None:
        self._log_file = log_file
        self._format = output_format
        self._console = console if console is not None else default_console

    @property
    def output_format(self) -> OutputFormat:
        return self._format

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        """Record a message on the console and in the log file."""
        timestamp = _timestamp()
        plain = f"[{timestamp}] [{level.value}] {message}"

        if self._format == OutputFormat.JSON:
            line = json.dumps({"timestamp": timestamp, "level": level.value, "message": message})
            self._console.print(line, markup=False, highlight=False, soft_wrap=True)
        else:
            self._console.print(
                plain,
                style=level_style(level),
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

        self._append(plain + "\n")

    def initialize_log_file(
        self,
        config: SearchConfig,
        safety: SafetyMode,
        *,
        interactive: bool = False,
        force: bool = False,
    ) -> None:
        """Create the log file with a header block describing the run.

        Args:
            config: Search configuration of the run.
            safety: Safety mode of the run.
            interactive: Raw interactive flag as given.
            force: Raw force flag as given.
        """
        if self._log_file is None:
            return

        lines = [
            HEADER_RULE,
            f"Deletion Log - {_timestamp()}",
            HEADER_RULE,
            f"Dry Run: {str(safety.dry_run).lower()}",
            f"Interactive: {str(interactive).lower()}",
            f"Force: {str(force).lower()}",
        ]
        if config.files_pattern:
            lines.append(f"Files Pattern: {config.files_pattern}")
        if config.folders_pattern:
            lines.append(f"Folders Pattern: {config.folders_pattern}")
        if config.types_pattern:
            lines.append(f"Types Pattern: {config.types_pattern}")
        if config.exclude_patterns:
            lines.append(f"Exclude Patterns: {', '.join(config.exclude_patterns)}")
        if config.max_depth:
            lines.append(f"Max Depth: {config.max_depth}")
        lines.extend([HEADER_RULE, ""])

        try:
            self._log_file.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            self._disable_file(e)

    def _append(self, text: str) -> None:
        if self._log_file is None:
            return
        try:
            with self._log_file.open(mode="a", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            self._disable_file(e)

    def _disable_file(self, error: OSError) -> None:
        logger.warning("Cannot write log file %s: %s", self._log_file, error)
        print_warning(f"Failed to write to log file {self._log_file}: {error}")
        self._log_file = None
