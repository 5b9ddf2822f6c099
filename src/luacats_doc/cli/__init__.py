"""Command-line interface package for luacats-doc."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from luacats_doc import __version__
from luacats_doc.utils.log_setup import setup_logging

from .markdown_cmd import register_command as register_markdown_command
from .preprocess_cmd import register_command as register_preprocess_command

logger = logging.getLogger(__name__)

# Environment overrides (LUACATS_*) may live in a local .env file
_env_file = Path(".env")
if _env_file.exists():
	load_dotenv(dotenv_path=_env_file)

app = typer.Typer(
	help=f"luacats-doc - Markdown API docs from LuaCATS definitions\n\nVersion: {__version__}",
	no_args_is_help=True,
	context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
	"""Callback for --version option."""
	if value:
		typer.echo(f"luacats-doc version: {__version__}")
		raise typer.Exit


@app.callback()
def global_options(
	ctx: typer.Context,
	is_verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable verbose logging.")] = False,
	log_file: Annotated[
		Path | None,
		typer.Option("--log-file", help="Also write debug logs to this file.", dir_okay=False),
	] = None,
	_version: Annotated[
		bool | None,
		typer.Option("--version", help="Show version and exit.", callback=_version_callback, is_eager=True),
	] = None,
) -> None:
	"""Global CLI options and logging setup."""
	ctx.meta["is_verbose"] = is_verbose
	setup_logging(is_verbose=is_verbose, log_file_path=log_file)


register_markdown_command(app)
register_preprocess_command(app)


def main() -> int:
	"""Run the CLI application."""
	return app()


if __name__ == "__main__":
	sys.exit(main())
