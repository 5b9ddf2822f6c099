"""
mdBook preprocessor.

mdBook runs the preprocessor with ``[context, book]`` JSON on stdin and reads
the modified book from stdout. The preprocessor exports the definitions
folder, builds the workspace and appends an API reference part to the book.

Book settings come from the ``[preprocessor.luacats]`` table::

    [preprocessor.luacats]
    command = "luacats-doc preprocess"
    definitions-path = "library"
    part-title = "API Reference"
    nav-depth = 1

"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from luacats_doc.book import append_part, build_chapters, next_chapter_number
from luacats_doc.errors import DecodeError
from luacats_doc.luals import generate_docs
from luacats_doc.printer import MarkdownPrinter
from luacats_doc.utils.config_loader import ConfigError, ConfigLoader
from luacats_doc.workspace import build_workspace

if TYPE_CHECKING:
	from collections.abc import Callable

	from luacats_doc.docs.models import Definition

logger = logging.getLogger(__name__)

SUPPORTED_RENDERERS = ("html", "epub")


@dataclass(frozen=True)
class BookSettings:
	"""Resolved settings for one preprocessor run."""

	definitions_path: Path
	part_title: str
	chapter_dir: str
	nav_depth: int | None


class LuaCatsPreprocessor:
	"""Generates LuaCATS API chapters for an mdBook book."""

	name = "luacats"

	def __init__(
		self,
		config: ConfigLoader | None = None,
		docs_generator: Callable[[Path], list[Definition]] | None = None,
	) -> None:
		"""
		Initialize the preprocessor.

		Args:
		    config: Loaded configuration; defaults are loaded when omitted
		    docs_generator: Produces definitions for a folder; runs
		        lua-language-server when omitted

		"""
		self.config = config or ConfigLoader()
		self.docs_generator = docs_generator or self._run_luals

	@classmethod
	def supports_renderer(cls, renderer: str) -> bool:
		return renderer in SUPPORTED_RENDERERS

	def settings(self, context: dict[str, Any]) -> BookSettings:
		"""
		Resolve settings from the book context and the loaded configuration.

		Raises:
		    ConfigError: If a setting has the wrong type or the folder is missing

		"""
		book_root = Path(context.get("root") or ".")
		table = context.get("config", {}).get("preprocessor", {}).get(self.name) or {}

		definitions_path = Path(table.get("definitions-path") or self.config.get("book.definitions_path", "library"))
		if not definitions_path.is_absolute():
			definitions_path = book_root / definitions_path
		try:
			definitions_path = definitions_path.resolve(strict=True)
		except OSError as e:
			msg = f"Definitions path does not exist: {definitions_path}"
			raise ConfigError(msg) from e

		nav_depth = table.get("nav-depth", self.config.get("book.nav_depth"))
		if nav_depth is not None and (isinstance(nav_depth, bool) or not isinstance(nav_depth, int) or nav_depth < 0):
			msg = f"nav-depth must be a non-negative integer, got {nav_depth!r}"
			raise ConfigError(msg)

		return BookSettings(
			definitions_path=definitions_path,
			part_title=str(table.get("part-title") or self.config.get("book.part_title", "API Reference")),
			chapter_dir=str(table.get("chapter-dir", self.config.get("book.chapter_dir", "api"))),
			nav_depth=nav_depth,
		)

	def run(self, context: dict[str, Any], book: dict[str, Any]) -> dict[str, Any]:
		"""
		Append the API reference part to ``book``.

		Args:
		    context: mdBook preprocessor context
		    book: Book JSON

		Returns:
		    The modified book

		Raises:
		    ConfigError: If the settings are invalid
		    ExternalToolError: If the documentation export fails
		    DecodeError: If the export cannot be decoded
		    InvalidLocationError: If a definition location is not a file URI

		"""
		settings = self.settings(context)
		logger.info("Generating API chapters from %s", settings.definitions_path)

		definitions = self.docs_generator(settings.definitions_path)
		workspace = build_workspace(settings.definitions_path, definitions)
		if not workspace.files:
			logger.warning("No definitions found under %s", settings.definitions_path)
			return book

		chapters = build_chapters(
			workspace,
			MarkdownPrinter(self.config.get_markdown_options()),
			chapter_dir=settings.chapter_dir,
			nav_depth=settings.nav_depth,
			first_number=next_chapter_number(book),
		)
		return append_part(book, settings.part_title, chapters)

	def _run_luals(self, definitions_path: Path) -> list[Definition]:
		command, *extra_args = self.config.get_luals_command()
		return generate_docs(definitions_path, command=command, extra_args=extra_args)


def parse_input(stream: TextIO) -> tuple[dict[str, Any], dict[str, Any]]:
	"""
	Read the ``[context, book]`` pair mdBook writes to the preprocessor.

	Raises:
	    DecodeError: If the input is not a two element JSON array of objects

	"""
	try:
		data = json.load(stream)
	except json.JSONDecodeError as e:
		msg = f"Malformed preprocessor input: {e}"
		raise DecodeError(msg) from e

	if not isinstance(data, list) or len(data) != 2 or not all(isinstance(item, dict) for item in data):  # noqa: PLR2004
		msg = "Preprocessor input must be a [context, book] JSON array"
		raise DecodeError(msg)
	context, book = data
	return context, book


def handle_preprocessing(preprocessor: LuaCatsPreprocessor, stdin: TextIO, stdout: TextIO) -> None:
	"""Run ``preprocessor`` over mdBook's stdin and write the book to stdout."""
	context, book = parse_input(stdin)

	version = context.get("mdbook_version")
	if version:
		logger.debug("Invoked by mdbook %s for renderer %s", version, context.get("renderer"))

	processed = preprocessor.run(context, book)
	json.dump(processed, stdout)
