"""Selection and deletion engine.

This package provides pattern matching, directory traversal, exclusion
filtering, worklist construction, and the per-item deletion state
machine with outcome accounting.
"""

from cull.engine.engine import DeletionEngine
from cull.engine.errors import ConfigurationError, CullError
from cull.engine.exclusions import is_excluded
from cull.engine.executor import DeletionExecutor, Logger
from cull.engine.models import (
    Candidate,
    DeletionMode,
    EntryType,
    LogLevel,
    OutputFormat,
    PatternClass,
    SafetyMode,
    SearchConfig,
)
from cull.engine.outcome import Outcome
from cull.engine.patterns import LiteralPattern, WildcardPattern, compile_pattern, matches
from cull.engine.selection import SelectionSet, build_selection
from cull.engine.traverser import FilesystemTraverser, Traverser

__all__ = [
    "Candidate",
    "ConfigurationError",
    "CullError",
    "DeletionEngine",
    "DeletionExecutor",
    "DeletionMode",
    "EntryType",
    "FilesystemTraverser",
    "LiteralPattern",
    "LogLevel",
    "Logger",
    "Outcome",
    "OutputFormat",
    "PatternClass",
    "SafetyMode",
    "SearchConfig",
    "SelectionSet",
    "Traverser",
    "WildcardPattern",
    "build_selection",
    "compile_pattern",
    "is_excluded",
    "matches",
]
