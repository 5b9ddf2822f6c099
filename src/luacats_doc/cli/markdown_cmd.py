"""
Implementation of the markdown command.

Renders every definition found under a definitions folder as a single
markdown document on stdout.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)

PathArg = Annotated[
	Path,
	typer.Argument(
		exists=True,
		file_okay=False,
		help="Path to the Lua definitions",
	),
]

JsonOpt = Annotated[
	Path | None,
	typer.Option(
		"--json",
		"-j",
		exists=True,
		dir_okay=False,
		help="Use an existing doc.json instead of running lua-language-server",
	),
]

HeadingLevelOpt = Annotated[
	int | None,
	typer.Option(
		"--heading-level",
		min=1,
		max=6,
		help="Heading level for definition names (overrides config)",
	),
]

ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to config file",
	),
]


def register_command(app: typer.Typer) -> None:
	"""Register the markdown command with the CLI app."""

	@app.command(name="markdown")
	def markdown_command(
		path: PathArg,
		json_file: JsonOpt = None,
		heading_level: HeadingLevelOpt = None,
		config: ConfigOpt = None,
	) -> None:
		"""Generate markdown API docs from LuaCATS type definitions."""
		_markdown_command_impl(path=path, json_file=json_file, heading_level=heading_level, config=config)


def _markdown_command_impl(
	path: Path,
	json_file: Path | None = None,
	heading_level: int | None = None,
	config: Path | None = None,
) -> None:
	"""Implementation of the markdown command with imports deferred."""
	from dataclasses import replace

	from luacats_doc.errors import LuaCatsError
	from luacats_doc.luals import clean_docs, generate_docs, load_docs
	from luacats_doc.printer import MarkdownPrinter
	from luacats_doc.utils.cli_utils import exit_with_error, loading_spinner, show_warning
	from luacats_doc.utils.config_loader import ConfigError, ConfigLoader

	definitions_path = path.resolve()
	logger.info("Received markdown command for path: %s", definitions_path)

	try:
		config_loader = ConfigLoader(config)
		options = config_loader.get_markdown_options()
		if heading_level is not None:
			options = replace(options, heading_level=heading_level)

		if json_file is not None:
			docs = load_docs(json_file)
		else:
			command, *extra_args = config_loader.get_luals_command()
			with loading_spinner(f"Running {command}..."):
				docs = generate_docs(definitions_path, command=command, extra_args=extra_args)

		docs = clean_docs(definitions_path, docs)
		if not docs:
			show_warning(f"No definitions found under {definitions_path}")
			return

		typer.echo(MarkdownPrinter(options).print(docs), nl=False)

	except ConfigError as e:
		exit_with_error(f"Configuration error: {e!s}", exception=e)
	except LuaCatsError as e:
		exit_with_error(f"Documentation generation failed: {e!s}", exception=e)
