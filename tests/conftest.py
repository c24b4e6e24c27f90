"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from cull.engine.models import LogLevel


def build_tree(root: Path, entries: list[str]) -> Path:
    """Create files and directories under root.

    Entries ending in "/" are directories; everything else is a file
    whose parent directories are created as needed.
    """
    for entry in entries:
        target = root / entry
        if entry.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"content of {entry}")
    return root


class RecordingLogger:
    """Logger collaborator that keeps every record in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[LogLevel, str]] = []

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        self.records.append((level, message))

    def messages(self, level: LogLevel | None = None) -> list[str]:
        return [m for lvl, m in self.records if level is None or lvl == level]


class ScriptedConfirm:
    """Confirm collaborator answering from a fixed script."""

    def __init__(self, answers: list[bool]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self._answers:
            msg = f"Unexpected prompt: {prompt}"
            raise AssertionError(msg)
        return self._answers.pop(0)


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[list[str]], Path]:
    """Build a directory tree inside tmp_path and return its root."""

    def _make(entries: list[str]) -> Path:
        return build_tree(tmp_path, entries)

    return _make


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """In-memory run logger."""
    return RecordingLogger()


@pytest.fixture
def scripted_confirm() -> Callable[[list[bool]], ScriptedConfirm]:
    """Factory for prompt collaborators that answer from a script."""
    return ScriptedConfirm
