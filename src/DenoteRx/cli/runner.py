"""Command runner for coordinating CLI execution.

Handles logging configuration and turns compilation errors into click
failures at the CLI boundary.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

import click

from DenoteRx.cli.commands import MatchCommand, RegexpCommand
from DenoteRx.config import AppConfig
from DenoteRx.core.errors import MalformedInputError, PatternError
from DenoteRx.utils.log import configure_logging, log

T = TypeVar("T")


class CommandRunner:
    """Run CLI commands against one loaded configuration."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure(self, action: str) -> None:
        runtime = self.config.runtime
        log_path = configure_logging(
            level=runtime.level,
            action=action,
            log_dir=runtime.dir if runtime.to_file else None,
        )
        if log_path is not None:
            log.debug("Logging to %s", log_path)

    def run_regexp(self, action: str, arguments: Sequence[str]) -> str:
        """Compile and return the pattern for `arguments`.

        Raises:
            click.UsageError: When the field arguments are malformed.
            click.Abort: When compilation fails for any other reason.
        """
        self._configure(action)
        command = RegexpCommand(env=self.config.environment(), arguments=arguments)
        return self._guard(command.execute)

    def run_match(self, action: str, arguments: Sequence[str], names: Sequence[str]) -> list[str]:
        """Return the names matching `arguments`."""
        self._configure(action)
        command = MatchCommand(env=self.config.environment(), arguments=arguments, names=names)
        return self._guard(command.execute)

    @staticmethod
    def _guard(func: Callable[[], T]) -> T:
        try:
            return func()
        except MalformedInputError as e:
            log.error("Invalid field arguments: %s", e)
            raise click.UsageError(str(e)) from e
        except PatternError as e:
            log.error("Pattern compilation failed: %s", e)
            raise click.Abort from e
