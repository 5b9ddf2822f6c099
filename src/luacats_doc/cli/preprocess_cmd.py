"""
Implementation of the preprocess command.

mdBook calls ``<command> supports <renderer>`` to ask whether a renderer is
handled, then ``<command>`` with the book on stdin.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]

preprocess_app = typer.Typer(help="mdBook preprocessor generating LuaCATS API chapters.")


@preprocess_app.callback(invoke_without_command=True)
def preprocess_command(ctx: typer.Context, config: ConfigOpt = None) -> None:
	"""Read mdBook's [context, book] from stdin and write the book to stdout."""
	if ctx.invoked_subcommand is not None:
		return
	_preprocess_command_impl(config=config)


@preprocess_app.command(name="supports")
def supports_command(
	renderer: Annotated[str, typer.Argument(help="Renderer name passed by mdBook")],
) -> None:
	"""Exit with status 0 when the renderer is supported, 1 otherwise."""
	from luacats_doc.preprocessor import LuaCatsPreprocessor

	if not LuaCatsPreprocessor.supports_renderer(renderer):
		logger.debug("Renderer %s is not supported", renderer)
		raise typer.Exit(1)


def register_command(app: typer.Typer) -> None:
	"""Register the preprocess command group with the CLI app."""
	app.add_typer(preprocess_app, name="preprocess")


def _preprocess_command_impl(config: Path | None = None) -> None:
	"""Implementation of the preprocess command with imports deferred."""
	import sys

	from luacats_doc.errors import LuaCatsError
	from luacats_doc.preprocessor import LuaCatsPreprocessor, handle_preprocessing
	from luacats_doc.utils.cli_utils import exit_with_error
	from luacats_doc.utils.config_loader import ConfigError, ConfigLoader

	try:
		preprocessor = LuaCatsPreprocessor(ConfigLoader(config))
		handle_preprocessing(preprocessor, sys.stdin, sys.stdout)
	except ConfigError as e:
		exit_with_error(f"Configuration error: {e!s}", exception=e)
	except LuaCatsError as e:
		exit_with_error(f"Preprocessing failed: {e!s}", exception=e)
