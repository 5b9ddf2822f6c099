"""
Chapter tree for mdBook.

Each workspace file becomes a chapter named after the file, and sub files
become nested chapters. The chapters are returned in the JSON layout mdBook
uses for preprocessors, so they can be appended to a book as-is.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from luacats_doc.printer import MAX_HEADING_LEVEL, MarkdownOptions, MarkdownPrinter

if TYPE_CHECKING:
	from luacats_doc.workspace import MetaFile, Workspace

logger = logging.getLogger(__name__)


@dataclass
class Chapter:
	"""A book chapter generated from a workspace file."""

	name: str
	content: str
	number: list[int] = field(default_factory=list)
	path: str | None = None
	source_path: str | None = None
	parent_names: list[str] = field(default_factory=list)
	sub_items: list[Chapter] = field(default_factory=list)

	def to_book_item(self) -> dict[str, Any]:
		"""Return the chapter as an mdBook ``BookItem``."""
		return {
			"Chapter": {
				"name": self.name,
				"content": self.content,
				"number": self.number or None,
				"sub_items": [item.to_book_item() for item in self.sub_items],
				"path": self.path,
				"source_path": self.source_path,
				"parent_names": self.parent_names,
			}
		}


class _ChapterBuilder:
	def __init__(self, printer: MarkdownPrinter, chapter_dir: str, nav_depth: int | None) -> None:
		self.printer = printer
		self.chapter_dir = chapter_dir.strip("/")
		self.nav_depth = nav_depth

	def chapter(self, meta_file: MetaFile, number: list[int], parent_names: list[str]) -> Chapter:
		name = meta_file.file_stem
		content = f"# {name}\n\n{self.printer.print_file(meta_file)}"
		chapter = Chapter(
			name=name,
			content=content,
			number=number,
			path=self._chapter_path(meta_file),
			parent_names=parent_names,
		)

		if self.nav_depth is not None and meta_file.depth >= self.nav_depth:
			inline = [self._inline(sub_file, self.printer.options.level) for sub_file in meta_file.sub_files]
			if inline:
				chapter.content = "\n".join([chapter.content, *inline])
			return chapter

		chapter.sub_items = [
			self.chapter(sub_file, [*number, index], [*parent_names, name])
			for index, sub_file in enumerate(meta_file.sub_files, start=1)
		]
		return chapter

	def _inline(self, meta_file: MetaFile, level: int) -> str:
		"""
		Render a file below the navigation depth into its ancestor's chapter.

		The file heading sits at ``level`` and its definitions one level deeper.

		"""
		definition_level = min(level + 1, MAX_HEADING_LEVEL)
		printer = MarkdownPrinter(MarkdownOptions(heading_level=definition_level, language=self.printer.options.language))
		parts = [f"{'#' * level} {meta_file.file_stem}\n\n{printer.print_file(meta_file)}"]
		parts.extend(self._inline(sub_file, definition_level) for sub_file in meta_file.sub_files)
		return "\n".join(parts)

	def _chapter_path(self, meta_file: MetaFile) -> str:
		relative = meta_file.path.with_suffix(".md").as_posix()
		return f"{self.chapter_dir}/{relative}" if self.chapter_dir else relative


def build_chapters(
	workspace: Workspace,
	printer: MarkdownPrinter | None = None,
	*,
	chapter_dir: str = "api",
	nav_depth: int | None = None,
	first_number: int = 1,
) -> list[Chapter]:
	"""
	Build one chapter per workspace file.

	Args:
	    workspace: The populated workspace
	    printer: Printer for definition text; defaults when omitted
	    chapter_dir: Folder prefix for chapter paths
	    nav_depth: Deepest file level that gets its own chapter; deeper
	        files are rendered inside their nearest chapter. None for no limit.
	    first_number: Section number of the first top level chapter

	Returns:
	    Top level chapters, with nested chapters as sub items

	"""
	builder = _ChapterBuilder(printer or MarkdownPrinter(), chapter_dir, nav_depth)
	chapters = [
		builder.chapter(meta_file, [number], [])
		for number, meta_file in enumerate(workspace.files, start=first_number)
	]
	logger.debug("Built %d top level chapter(s)", len(chapters))
	return chapters


def next_chapter_number(book: dict[str, Any]) -> int:
	"""Return the number following the last numbered top level chapter."""
	numbers = [
		item["Chapter"]["number"][0]
		for item in book.get("sections", [])
		if isinstance(item, dict) and "Chapter" in item and item["Chapter"].get("number")
	]
	return max(numbers, default=0) + 1


def append_part(book: dict[str, Any], title: str, chapters: list[Chapter]) -> dict[str, Any]:
	"""
	Append a titled part holding ``chapters`` to an mdBook book.

	Args:
	    book: Book JSON as received from mdBook
	    title: Part title shown in the summary
	    chapters: Chapters to append

	Returns:
	    The same book, modified in place

	"""
	sections = book.setdefault("sections", [])
	sections.append({"PartTitle": title})
	sections.extend(chapter.to_book_item() for chapter in chapters)
	return book
