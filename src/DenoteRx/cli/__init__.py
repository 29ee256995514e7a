"""CLI package for DenoteRx.

Splits click wiring (`ui`), error and logging handling (`runner`) and the
command logic (`commands`).
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from DenoteRx.cli.runner import CommandRunner
from DenoteRx.cli.ui import cli


def main() -> None:
    """Run DenoteRx CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
