"""Main CLI application entry point.

Defines the Typer application: option parsing, configuration
validation, and the collaborators (log sink, prompt, preview and
summary rendering) handed to the deletion engine.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Annotated

import typer

from cull import __version__
from cull.core.config import build_search_config, parse_output_format
from cull.core.logger import RunLogger
from cull.engine.engine import DeletionEngine
from cull.engine.errors import ConfigurationError, CullError
from cull.engine.executor import Preview
from cull.engine.models import LogLevel, OutputFormat, SafetyMode
from cull.engine.outcome import Outcome
from cull.utils.formatting import console, create_worklist_table, print_error

EXAMPLES = """
Examples:

  cull --files "*.tmp" --folders "temp" --exclude "important" --log deletion_log.txt --dry-run

  cull -fi "*.tmp" -fo "temp" -ex "important" -lg deletion_log.txt -dr

  cull --types "*.log" --depth 2 --interactive

  cull --files "*.tmp" --preview

  cull --folders "cache" --force --log cleanup.log
"""

app = typer.Typer(
    name="cull",
    help="A command-line tool for safely deleting files and folders by pattern.",
    epilog=EXAMPLES,
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"cull version {__version__}")
        raise typer.Exit()


def confirm(prompt: str) -> bool:
    """Ask a yes/no question on the terminal.

    Empty input and end of input both mean no. Ctrl-C still aborts.
    """
    try:
        return typer.confirm(prompt, default=False)
    except typer.Abort as e:
        # Click raises Abort for both EOF and Ctrl-C, chained from the underlying error
        if not isinstance(e.__context__, EOFError):
            raise
        typer.echo()
        return False


@app.command()
def main(
    files: Annotated[
        str | None,
        typer.Option(
            "--files",
            "-fi",
            help='File pattern to delete (e.g. "*.tmp", "*.log").',
        ),
    ] = None,
    folders: Annotated[
        str | None,
        typer.Option(
            "--folders",
            "-fo",
            help='Folder pattern to delete (e.g. "temp", "cache").',
        ),
    ] = None,
    types: Annotated[
        str | None,
        typer.Option(
            "--types",
            "-ty",
            help="Pattern matching both files and folders.",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-ex",
            help="Exclude paths containing this text or named exactly this (repeatable).",
        ),
    ] = None,
    depth: Annotated[
        str | None,
        typer.Option(
            "--depth",
            "-d",
            help="Limit the search depth (children of the root are depth 1).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", "-dr", help="Simulate deletion without deleting anything."),
    ] = False,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-in", help="Prompt for confirmation before each deletion."),
    ] = False,
    preview: Annotated[
        bool,
        typer.Option("--preview", "-pr", help="Display the items to delete before proceeding."),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Bypass all confirmation prompts."),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option("--log", "-lg", help="Append a timestamped log of the run to this file."),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-fm", help="Output format: plain or json."),
    ] = "plain",
    root: Annotated[
        Path | None,
        typer.Option("--root", help="Directory to search (default: current directory)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Delete files and folders matching glob-style patterns."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    try:
        fmt = parse_output_format(output_format)
        config = build_search_config(
            files=files,
            folders=folders,
            types=types,
            exclude=exclude or [],
            depth=depth,
            root=root,
        )
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    safety = SafetyMode.from_flags(
        dry_run=dry_run,
        interactive=interactive,
        force=force,
        preview=preview,
    )

    run_logger = RunLogger(log_file=log_file, output_format=fmt)
    run_logger.initialize_log_file(config, safety, interactive=interactive, force=force)
    run_logger.log("Starting deletion operation...", LogLevel.INFO)

    engine = DeletionEngine(
        logger=run_logger,
        confirm=confirm,
        preview=_preview_renderer(fmt),
    )
    engine.configure(config, safety)

    try:
        engine.select()
        outcome = engine.execute()
    except (CullError, OSError) as e:
        run_logger.log(f"Error: {e}", LogLevel.ERROR)
        raise typer.Exit(code=1) from e

    _print_summary(outcome, run_logger)
    raise typer.Exit(code=outcome.exit_code)


# === Private helper functions ===


def _preview_renderer(fmt: OutputFormat) -> Preview:
    """Return the worklist renderer for the chosen output format."""

    def render(paths: Sequence[str]) -> None:
        if fmt == OutputFormat.JSON:
            console.print_json(json.dumps({"items": [{"path": p} for p in paths]}))
        else:
            console.print(create_worklist_table(list(paths)))

    return render


def _print_summary(outcome: Outcome, run_logger: RunLogger) -> None:
    """Report the run summary through the run logger or as JSON."""
    if run_logger.output_format == OutputFormat.JSON:
        console.print_json(json.dumps({"summary": outcome.to_dict()}))
        return

    run_logger.log("=== Deletion Summary ===", LogLevel.INFO)
    run_logger.log(f"Total items found: {outcome.total}", LogLevel.INFO)
    if outcome.dry_run:
        run_logger.log(f"Items that would be deleted: {outcome.deleted}", LogLevel.INFO)
    else:
        run_logger.log(f"Items successfully deleted: {outcome.deleted}", LogLevel.INFO)
    if outcome.skipped:
        run_logger.log(f"Items skipped: {outcome.skipped}", LogLevel.INFO)
    if outcome.missing:
        run_logger.log(f"Items not found: {outcome.missing}", LogLevel.WARNING)
    if outcome.failed_paths:
        run_logger.log(f"Failed deletions: {outcome.failed}", LogLevel.ERROR)
        for path in outcome.failed_paths:
            run_logger.log(f"  - {path}", LogLevel.ERROR)


if __name__ == "__main__":
    app()
