"""Markdown rendering of documentation records."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from collections.abc import Iterable

	from luacats_doc.docs.models import Definition
	from luacats_doc.workspace import MetaFile

logger = logging.getLogger(__name__)

DEFAULT_HEADING_LEVEL = 2
MAX_HEADING_LEVEL = 6


@dataclass(frozen=True)
class MarkdownOptions:
	"""Options for the markdown printer."""

	heading_level: int | None = None
	"""Starting heading level; 2 when unset."""

	language: str = "lua"
	"""Info string of the fenced code blocks."""

	def __post_init__(self) -> None:
		if self.heading_level is not None and not 1 <= self.heading_level <= MAX_HEADING_LEVEL:
			msg = f"heading_level must be between 1 and {MAX_HEADING_LEVEL}, got {self.heading_level}"
			raise ValueError(msg)

	@property
	def level(self) -> int:
		return DEFAULT_HEADING_LEVEL if self.heading_level is None else self.heading_level


class MarkdownPrinter:
	"""Renders definitions as markdown."""

	def __init__(self, options: MarkdownOptions | None = None) -> None:
		"""
		Initialize the printer.

		Args:
		    options: Rendering options, defaults when omitted

		"""
		self.options = options or MarkdownOptions()

	def print(self, definitions: Iterable[Definition]) -> str:
		"""Render definitions one after another, separated by a blank line."""
		return "\n".join(self.print_definition(definition) for definition in definitions)

	def print_definition(self, definition: Definition) -> str:
		"""
		Render one definition.

		The heading carries the name, followed by the description when there
		is one, then one code block per extend of every define.

		Args:
		    definition: The definition to render

		Returns:
		    Markdown text ending in a blank line

		"""
		chunks = [f"{'#' * self.options.level} {definition.name}\n\n"]

		if definition.description is not None:
			chunks.append(f"{definition.description}\n\n")

		chunks.extend(
			f"```{self.options.language}\n{extend.view}\n```\n\n"
			for define in definition.defines
			for extend in define.extends
		)

		return "".join(chunks)

	def print_file(self, meta_file: MetaFile, *, recursive: bool = False) -> str:
		"""
		Render the definitions of a workspace file.

		Args:
		    meta_file: The file to render
		    recursive: Also render sub files, each one heading level deeper

		Returns:
		    Markdown text

		"""
		text = self.print(meta_file.definitions)
		if not recursive or not meta_file.sub_files:
			return text

		nested = MarkdownPrinter(replace(self.options, heading_level=min(self.options.level + 1, MAX_HEADING_LEVEL)))
		parts = [text] if text else []
		parts.extend(nested.print_file(sub_file, recursive=True) for sub_file in meta_file.sub_files)
		logger.debug("Rendered %s with %d sub file(s)", meta_file.path, len(meta_file.sub_files))
		return "\n".join(part for part in parts if part)
