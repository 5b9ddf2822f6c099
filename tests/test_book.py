"""Tests for building mdBook chapters from a workspace."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from luacats_doc.book import Chapter, append_part, build_chapters, next_chapter_number
from luacats_doc.docs import Definition
from luacats_doc.printer import MarkdownOptions, MarkdownPrinter
from luacats_doc.workspace import Workspace, build_workspace

from .conftest import FIXTURE_ROOT

MakeDefinition = Callable[..., Definition]


@pytest.fixture
def fixture_workspace(fixture_definitions: list[Definition]) -> Workspace:
	"""Workspace built from the fixture export."""
	return build_workspace(FIXTURE_ROOT, fixture_definitions)


@pytest.fixture
def deep_workspace(make_definition: MakeDefinition) -> Workspace:
	"""Workspace three files deep."""
	root = "file:///lib"
	return build_workspace(
		"/lib",
		[
			make_definition(f"{root}/renoise.lua", name="renoise"),
			make_definition(f"{root}/renoise/song.lua", name="song"),
			make_definition(f"{root}/renoise/song/track.lua", name="track"),
			make_definition(f"{root}/bit.lua", name="bit"),
		],
	)


@pytest.mark.unit
class TestBuildChapters:
	"""Test cases for build_chapters."""

	def test_chapter_tree(self, fixture_workspace: Workspace) -> None:
		"""Test names, numbers and paths of the generated chapters."""
		chapters = build_chapters(fixture_workspace)

		assert len(chapters) == 1
		hello = chapters[0]
		assert hello.name == "hello"
		assert hello.number == [1]
		assert hello.path == "api/hello.md"
		assert hello.parent_names == []
		assert hello.content.startswith("# hello\n\n## hello\n\n")
		assert "## greet" in hello.content
		assert "MidiMessage" not in hello.content

		midi = hello.sub_items[0]
		assert midi.name == "midi"
		assert midi.number == [1, 1]
		assert midi.path == "api/hello/midi.md"
		assert midi.parent_names == ["hello"]
		assert midi.content == "# midi\n\n## MidiMessage\n\n"

	def test_numbering(self, deep_workspace: Workspace) -> None:
		"""Test hierarchical numbering from a starting number."""
		chapters = build_chapters(deep_workspace, first_number=3)

		assert [c.name for c in chapters] == ["bit", "renoise"]
		assert [c.number for c in chapters] == [[3], [4]]
		track = chapters[1].sub_items[0].sub_items[0]
		assert track.number == [4, 1, 1]
		assert track.parent_names == ["renoise", "song"]

	def test_chapter_dir(self, deep_workspace: Workspace) -> None:
		"""Test the chapter folder prefix."""
		assert build_chapters(deep_workspace, chapter_dir="/reference/")[0].path == "reference/bit.md"
		assert build_chapters(deep_workspace, chapter_dir="")[0].path == "bit.md"

	def test_printer_options(self, deep_workspace: Workspace) -> None:
		"""Test that the given printer renders the definitions."""
		chapters = build_chapters(deep_workspace, MarkdownPrinter(MarkdownOptions(heading_level=3)))
		assert chapters[0].content == "# bit\n\n### bit\n\n"

	def test_nav_depth_inlines_deeper_files(self, deep_workspace: Workspace) -> None:
		"""Test that files below the navigation depth are rendered in their ancestor."""
		chapters = build_chapters(deep_workspace, nav_depth=1)

		song = chapters[1].sub_items[0]
		assert song.sub_items == []
		assert song.content == "# song\n\n## song\n\n\n## track\n\n### track\n\n"

	def test_nav_depth_zero(self, deep_workspace: Workspace) -> None:
		"""Test that depth zero yields only top level chapters."""
		chapters = build_chapters(deep_workspace, nav_depth=0)

		renoise = chapters[1]
		assert renoise.sub_items == []
		assert renoise.content == (
			"# renoise\n\n## renoise\n\n\n## song\n\n### song\n\n\n### track\n\n#### track\n\n"
		)

	def test_nav_depth_follows_heading_level(self, deep_workspace: Workspace) -> None:
		"""Test that inlined files start at the configured heading level."""
		printer = MarkdownPrinter(MarkdownOptions(heading_level=4))
		renoise = build_chapters(deep_workspace, printer, nav_depth=0)[1]

		assert renoise.content == (
			"# renoise\n\n#### renoise\n\n\n#### song\n\n##### song\n\n\n##### track\n\n###### track\n\n"
		)

	def test_nav_depth_heading_level_is_capped(self, deep_workspace: Workspace) -> None:
		"""Test that inlined headings never go past level six."""
		printer = MarkdownPrinter(MarkdownOptions(heading_level=6))
		renoise = build_chapters(deep_workspace, printer, nav_depth=0)[1]

		assert renoise.content == (
			"# renoise\n\n###### renoise\n\n\n###### song\n\n###### song\n\n\n###### track\n\n###### track\n\n"
		)

	def test_empty_workspace(self) -> None:
		"""Test that an empty workspace gives no chapters."""
		assert build_chapters(Workspace(FIXTURE_ROOT)) == []


@pytest.mark.unit
class TestBookItems:
	"""Test cases for the mdBook JSON layout."""

	def test_to_book_item(self) -> None:
		"""Test the BookItem shape of a chapter."""
		chapter = Chapter(
			name="bit",
			content="# bit\n\n",
			number=[2],
			path="api/bit.md",
			sub_items=[Chapter(name="ops", content="", number=[2, 1], path="api/bit/ops.md", parent_names=["bit"])],
		)
		item = chapter.to_book_item()

		assert item == {
			"Chapter": {
				"name": "bit",
				"content": "# bit\n\n",
				"number": [2],
				"sub_items": [
					{
						"Chapter": {
							"name": "ops",
							"content": "",
							"number": [2, 1],
							"sub_items": [],
							"path": "api/bit/ops.md",
							"source_path": None,
							"parent_names": ["bit"],
						}
					}
				],
				"path": "api/bit.md",
				"source_path": None,
				"parent_names": [],
			}
		}

	def test_unnumbered(self) -> None:
		"""Test that a chapter without a number serializes it as null."""
		assert Chapter(name="x", content="").to_book_item()["Chapter"]["number"] is None


@pytest.mark.unit
class TestBookSections:
	"""Test cases for adding chapters to a book."""

	def test_next_chapter_number(self) -> None:
		"""Test numbering after existing chapters."""
		book: dict[str, Any] = {
			"sections": [
				{"Chapter": {"name": "Intro", "number": None}},
				{"Chapter": {"name": "Guide", "number": [1]}},
				"Separator",
				{"Chapter": {"name": "Advanced", "number": [2]}},
				{"PartTitle": "Extras"},
			]
		}
		assert next_chapter_number(book) == 3

	def test_next_chapter_number_empty(self) -> None:
		"""Test numbering in an empty book."""
		assert next_chapter_number({"sections": []}) == 1
		assert next_chapter_number({}) == 1

	def test_append_part(self, fixture_workspace: Workspace) -> None:
		"""Test that the part title precedes the new chapters."""
		book: dict[str, Any] = {"sections": ["Separator"], "__non_exhaustive": None}
		result = append_part(book, "API Reference", build_chapters(fixture_workspace))

		assert result is book
		assert book["sections"][0] == "Separator"
		assert book["sections"][1] == {"PartTitle": "API Reference"}
		assert book["sections"][2]["Chapter"]["name"] == "hello"
		assert len(book["sections"]) == 3
		assert "__non_exhaustive" in book

	def test_append_part_without_sections(self) -> None:
		"""Test appending to a book with no sections key."""
		book: dict[str, Any] = {}
		append_part(book, "API", [Chapter(name="a", content="")])
		assert book["sections"][0] == {"PartTitle": "API"}
