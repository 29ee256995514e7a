"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their runner.
"""

from __future__ import annotations

import os
from pathlib import Path

import click
from dotenv import load_dotenv

from DenoteRx.cli.runner import CommandRunner
from DenoteRx.config import load_config_with_defaults

_FIELDS_HELP = (
    "FIELDS are KEY VALUE pairs. Keys: identifier, signature, title, keywords, "
    "file-type. List values use YAML flow syntax, e.g. keywords '[or, agenda, [project, todo]]'."
)


@click.group(help="DenoteRx: build regular expressions matching note file names.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    envvar="DENOTE_RX_CONFIG",
    default=None,
    help="YAML file merged over the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from a .env file before reading config, so
    DENOTE_RX_CONFIG may be set there.
    """
    load_dotenv()
    if config_path is None and os.environ.get("DENOTE_RX_CONFIG"):
        config_path = Path(os.environ["DENOTE_RX_CONFIG"])
    ctx.obj = load_config_with_defaults(config_path)


@cli.command("regexp", epilog=_FIELDS_HELP)
@click.argument("fields", nargs=-1)
@click.pass_context
def regexp_cmd(ctx: click.Context, fields: tuple[str, ...]) -> None:
    """Print the regular expression for FIELDS."""
    runner = CommandRunner(ctx.obj)
    click.echo(runner.run_regexp(action=ctx.command.name, arguments=fields))


@cli.command("match", epilog=_FIELDS_HELP)
@click.option("--name", "names", multiple=True, required=True, help="File name to test; repeatable.")
@click.argument("fields", nargs=-1)
@click.pass_context
def match_cmd(ctx: click.Context, names: tuple[str, ...], fields: tuple[str, ...]) -> None:
    """Print each --name that matches FIELDS."""
    runner = CommandRunner(ctx.obj)
    for name in runner.run_match(action=ctx.command.name, arguments=fields, names=names):
        click.echo(name)
