"""Run configuration from raw command-line values.

Turns the strings collected by the CLI into a validated SearchConfig
and OutputFormat. Every problem is reported as a ConfigurationError so
that the caller can reject the run before any traversal begins.
"""

from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from cull.engine.errors import ConfigurationError
from cull.engine.models import OutputFormat, SearchConfig


def parse_depth(value: str | int | None) -> int | None:
    """Parse a depth option value.

    Args:
        value: Raw value; None means unbounded.

    Returns:
        Positive integer depth, or None.

    Raises:
        ConfigurationError: If the value is not a positive integer.
    """
    if value is None:
        return None
    try:
        depth = int(str(value).strip())
    except ValueError:
        msg = "--depth must be a positive number"
        raise ConfigurationError(msg) from None
    if depth < 1:
        msg = "--depth must be a positive number"
        raise ConfigurationError(msg)
    return depth


def parse_output_format(value: str) -> OutputFormat:
    """Parse the output format option.

    Raises:
        ConfigurationError: If the value is neither "plain" nor "json".
    """
    try:
        return OutputFormat(value.strip().lower())
    except ValueError:
        msg = "--format must be 'plain' or 'json'"
        raise ConfigurationError(msg) from None


def build_search_config(
    *,
    files: str | None = None,
    folders: str | None = None,
    types: str | None = None,
    exclude: Sequence[str] = (),
    depth: str | int | None = None,
    root: Path | None = None,
) -> SearchConfig:
    """Build a validated search configuration.

    Args:
        files: Pattern for regular files.
        folders: Pattern for directories.
        types: Pattern for files and directories.
        exclude: Exclusion strings, in the order given.
        depth: Maximum search depth as typed by the user.
        root: Search root; defaults to the current working directory.

    Returns:
        Frozen SearchConfig.

    Raises:
        ConfigurationError: If no pattern is given, the depth is invalid,
            or the root is not a directory.
    """
    max_depth = parse_depth(depth)
    resolved_root = (root if root is not None else Path.cwd()).resolve()
    if not resolved_root.is_dir():
        msg = f"Path does not exist or is not a directory: {resolved_root}"
        raise ConfigurationError(msg)

    try:
        return SearchConfig(
            files_pattern=files,
            folders_pattern=folders,
            types_pattern=types,
            exclude_patterns=tuple(exclude),
            max_depth=max_depth,
            root=resolved_root,
        )
    except ValidationError as e:
        raise ConfigurationError(_first_error_message(e)) from e


def _first_error_message(exc: ValidationError) -> str:
    """Extract a readable message from the first validation error."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    error = errors[0]
    ctx_error = error.get("ctx", {}).get("error")
    if ctx_error is not None:
        return str(ctx_error)
    return str(error["msg"])
