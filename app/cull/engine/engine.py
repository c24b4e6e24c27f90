"""Deletion engine facade.

Ties configuration, selection and execution together behind the three
calls the CLI drives: configure, select and execute.
"""

import logging

from cull.engine.errors import ConfigurationError
from cull.engine.executor import Confirm, DeletionExecutor, Logger, Preview
from cull.engine.models import SafetyMode, SearchConfig
from cull.engine.outcome import Outcome
from cull.engine.selection import SelectionSet, build_selection
from cull.engine.traverser import FilesystemTraverser, Traverser

logger = logging.getLogger(__name__)


class DeletionEngine:
    """Selects and deletes filesystem entries for one configuration.

    Each call to :meth:`execute` owns its own worklist and outcome, so
    one engine can be reused across runs.

    Args:
        logger: Run log sink.
        confirm: Blocking yes/no prompt used for per-item and batch
            confirmation.
        preview: Optional renderer for the worklist preview.
        traverser: Traversal strategy. Defaults to FilesystemTraverser.
    """

    def __init__(
        self,
        logger: Logger,
        confirm: Confirm,
        preview: Preview | None = None,
        traverser: Traverser | None = None,
    ) -> None:
        self._log = logger
        self._confirm = confirm
        self._preview = preview
        self._traverser = traverser if traverser is not None else FilesystemTraverser()
        self._config: SearchConfig | None = None
        self._safety = SafetyMode()
        self._selection: SelectionSet | None = None

    def configure(self, config: SearchConfig, safety: SafetyMode) -> None:
        """Set the search configuration and safety mode for the next run."""
        self._config = config
        self._safety = safety
        self._selection = None

    def select(self) -> tuple[str, ...]:
        """Build the worklist against the current filesystem state.

        Returns:
            Sorted, deduplicated, exclusion-filtered relative paths.

        Raises:
            ConfigurationError: If configure() has not been called.
        """
        self._selection = self._build(self._require_config())
        return self._selection.paths

    def execute(self) -> Outcome:
        """Process the worklist under the configured safety mode.

        Uses the worklist from the last :meth:`select` call, building
        one first if needed. The worklist is consumed by this call.

        Returns:
            Outcome of this run.
        """
        config = self._require_config()
        selection = self._selection if self._selection is not None else self._build(config)
        self._selection = None

        executor = DeletionExecutor(
            root=config.root,
            safety=self._safety,
            logger=self._log,
            confirm=self._confirm,
            preview=self._preview,
        )
        return executor.run(selection.paths)

    def _build(self, config: SearchConfig) -> SelectionSet:
        selection = build_selection(
            config.pattern_configs(),
            max_depth=config.max_depth,
            exclusions=config.exclude_patterns,
            root=config.root,
            traverser=self._traverser,
        )
        logger.debug("Selected %d item(s) under %s", len(selection), config.root)
        return selection

    def _require_config(self) -> SearchConfig:
        if self._config is None:
            msg = "Engine is not configured"
            raise ConfigurationError(msg)
        return self._config
