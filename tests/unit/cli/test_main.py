"""Unit tests for the cull command line.

Runs the Typer application end to end against temporary trees.
"""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

import pytest
import typer
from cull import __version__
from cull.cli.main import app, confirm
from typer.testing import CliRunner

runner = CliRunner()

TreeFactory = Callable[[list[str]], Path]


@pytest.fixture
def scenario_tree(make_tree: TreeFactory) -> Path:
    """a.tmp, b.tmp and keep/important.tmp."""
    return make_tree(["a.tmp", "b.tmp", "keep/important.tmp"])


class TestValidation:
    """Tests for configuration errors."""

    def test_no_pattern(self, tmp_path: Path) -> None:
        """At least one pattern option is required."""
        result = runner.invoke(app, ["--root", str(tmp_path)])

        assert result.exit_code == 1
        assert "At least one of --files, --folders, or --types" in result.output

    @pytest.mark.parametrize("depth", ["0", "-3", "deep"])
    def test_bad_depth(self, tmp_path: Path, depth: str) -> None:
        """Depth must be a positive integer."""
        result = runner.invoke(app, ["--files", "*.tmp", "--depth", depth, "--root", str(tmp_path)])

        assert result.exit_code == 1
        assert "--depth must be a positive number" in result.output

    def test_bad_format(self, tmp_path: Path) -> None:
        """Only plain and json formats are accepted."""
        result = runner.invoke(app, ["--files", "*", "--format", "xml", "--root", str(tmp_path)])

        assert result.exit_code == 1
        assert "--format must be 'plain' or 'json'" in result.output

    def test_invalid_config_touches_nothing(self, scenario_tree: Path) -> None:
        """A rejected configuration deletes nothing."""
        result = runner.invoke(
            app, ["--files", "*.tmp", "--depth", "0", "--force", "--root", str(scenario_tree)]
        )

        assert result.exit_code == 1
        assert (scenario_tree / "a.tmp").exists()

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output


class TestRuns:
    """Tests for complete runs."""

    def test_dry_run(self, scenario_tree: Path) -> None:
        """Dry-run reports would-delete items and removes nothing."""
        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--exclude",
                "important",
                "--dry-run",
                "--root",
                str(scenario_tree),
            ],
        )

        assert result.exit_code == 0
        assert "Would delete: a.tmp" in result.output
        assert "Would delete: b.tmp" in result.output
        assert "important" not in result.output.split("Starting deletion operation")[1]
        assert "Items that would be deleted: 2" in result.output
        assert (scenario_tree / "a.tmp").exists()

    def test_short_aliases(self, scenario_tree: Path) -> None:
        """The short option aliases work like the long ones."""
        result = runner.invoke(
            app,
            ["-fi", "*.tmp", "-ex", "important", "-dr", "-fm", "plain", "--root", str(scenario_tree)],
        )

        assert result.exit_code == 0
        assert "Items that would be deleted: 2" in result.output

    def test_force_deletes(self, scenario_tree: Path) -> None:
        """Force removes every selected item."""
        result = runner.invoke(
            app,
            ["--files", "*.tmp", "--exclude", "important", "--force", "--root", str(scenario_tree)],
        )

        assert result.exit_code == 0
        assert not (scenario_tree / "a.tmp").exists()
        assert not (scenario_tree / "b.tmp").exists()
        assert (scenario_tree / "keep" / "important.tmp").exists()
        assert "Items successfully deleted: 2" in result.output

    def test_interactive_no_then_yes(self, scenario_tree: Path) -> None:
        """Declining the first prompt and accepting the second."""
        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--exclude",
                "keep",
                "--interactive",
                "--root",
                str(scenario_tree),
            ],
            input="n\ny\n",
        )

        assert result.exit_code == 0
        assert "Delete 'a.tmp'?" in result.output
        assert "Skipped: a.tmp" in result.output
        assert (scenario_tree / "a.tmp").exists()
        assert not (scenario_tree / "b.tmp").exists()
        assert "Items skipped: 1" in result.output

    def test_interactive_end_of_input_means_no(self, scenario_tree: Path) -> None:
        """Running out of answers declines the remaining items and exits 0."""
        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--exclude",
                "keep",
                "--interactive",
                "--root",
                str(scenario_tree),
            ],
            input="n\n",
        )

        assert result.exit_code == 0
        assert "Skipped: a.tmp" in result.output
        assert "Skipped: b.tmp" in result.output
        assert "Items skipped: 2" in result.output
        assert (scenario_tree / "a.tmp").exists()
        assert (scenario_tree / "b.tmp").exists()

    def test_empty_exclude_protects_everything(self, scenario_tree: Path) -> None:
        """An empty --exclude matches every path, so nothing is deleted."""
        result = runner.invoke(
            app,
            ["--files", "*.tmp", "--exclude", "", "--force", "--root", str(scenario_tree)],
        )

        assert result.exit_code == 0
        assert "No items to delete." in result.output
        assert (scenario_tree / "a.tmp").exists()
        assert (scenario_tree / "keep" / "important.tmp").exists()

    def test_interactive_with_force_never_prompts(self, scenario_tree: Path) -> None:
        """Force suppresses the interactive prompt."""
        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--exclude",
                "keep",
                "--interactive",
                "--force",
                "--root",
                str(scenario_tree),
            ],
        )

        assert result.exit_code == 0
        assert "Delete '" not in result.output
        assert not (scenario_tree / "a.tmp").exists()
        assert not (scenario_tree / "b.tmp").exists()

    def test_preview_declined(self, scenario_tree: Path) -> None:
        """Declining the preview confirmation cancels with exit code 0."""
        result = runner.invoke(
            app,
            ["--files", "*.tmp", "--preview", "--root", str(scenario_tree)],
            input="\n",
        )

        assert result.exit_code == 0
        assert "Items to Delete" in result.output
        assert "Proceed with deletion?" in result.output
        assert "Deletion cancelled by user." in result.output
        assert (scenario_tree / "a.tmp").exists()
        assert (scenario_tree / "keep" / "important.tmp").exists()

    def test_folders_depth(self, make_tree: TreeFactory) -> None:
        """Depth 1 only reaches direct children of the root."""
        root = make_tree(["cache/x", "sub/cache/y"])

        result = runner.invoke(
            app, ["--folders", "cache", "--depth", "1", "--force", "--root", str(root)]
        )

        assert result.exit_code == 0
        assert not (root / "cache").exists()
        assert (root / "sub" / "cache").exists()

    def test_nothing_found(self, tmp_path: Path) -> None:
        """An empty selection is a successful run."""
        result = runner.invoke(app, ["--files", "*.tmp", "--force", "--root", str(tmp_path)])

        assert result.exit_code == 0
        assert "No items to delete." in result.output
        assert "Total items found: 0" in result.output

    def test_failure_exit_code(self, scenario_tree: Path) -> None:
        """A failed removal makes the process exit with 1."""
        real_unlink = Path.unlink

        def flaky_unlink(self: Path, missing_ok: bool = False) -> None:
            if self.name == "a.tmp":
                raise PermissionError(13, "Permission denied")
            real_unlink(self, missing_ok=missing_ok)

        with patch.object(Path, "unlink", flaky_unlink):
            result = runner.invoke(
                app,
                ["--files", "*.tmp", "--exclude", "keep", "--force", "--root", str(scenario_tree)],
            )

        assert result.exit_code == 1
        assert "Failed deletions: 1" in result.output
        assert not (scenario_tree / "b.tmp").exists()

    def test_json_output(self, scenario_tree: Path) -> None:
        """JSON mode prints JSON records and a JSON summary."""
        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--dry-run",
                "--preview",
                "--format",
                "json",
                "--root",
                str(scenario_tree),
            ],
        )

        assert result.exit_code == 0
        assert '"level": "INFO"' in result.output
        assert '"path": "keep/important.tmp"' in result.output
        assert '"total_items": 3' in result.output
        assert '"dry_run": true' in result.output

    def test_log_file(self, scenario_tree: Path, tmp_path_factory: pytest.TempPathFactory) -> None:
        """--log writes a header and every record to the file."""
        log_file = tmp_path_factory.mktemp("logs") / "deletion_log.txt"

        result = runner.invoke(
            app,
            [
                "--files",
                "*.tmp",
                "--exclude",
                "important",
                "--dry-run",
                "--log",
                str(log_file),
                "--root",
                str(scenario_tree),
            ],
        )

        assert result.exit_code == 0
        content = log_file.read_text()
        assert "Dry Run: true" in content
        assert "Files Pattern: *.tmp" in content
        assert "Exclude Patterns: important" in content
        assert "[INFO] Would delete: a.tmp" in content
        assert "[INFO] === Deletion Summary ===" in content


class TestConfirm:
    """Tests for the terminal prompt collaborator."""

    @staticmethod
    def _abort_from(error: BaseException) -> Callable[..., bool]:
        def fake_confirm(*args: object, **kwargs: object) -> bool:
            try:
                raise error
            except (EOFError, KeyboardInterrupt):
                raise typer.Abort() from None

        return fake_confirm

    def test_end_of_input_is_no(self) -> None:
        """EOF at the prompt is a decline, not an abort."""
        with patch("cull.cli.main.typer.confirm", self._abort_from(EOFError())):
            assert confirm("Delete 'a.tmp'?") is False

    def test_interrupt_propagates(self) -> None:
        """Ctrl-C at the prompt still aborts the run."""
        with (
            patch("cull.cli.main.typer.confirm", self._abort_from(KeyboardInterrupt())),
            pytest.raises(typer.Abort),
        ):
            confirm("Delete 'a.tmp'?")
