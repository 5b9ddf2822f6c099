"""
Definitions workspace.

A workspace is a folder of ``@meta`` files. Definitions exported for that
folder are grouped by the file they are defined in, and the files are
arranged into the same hierarchy the book uses: ``renoise/midi.lua`` is a
sub file of ``renoise.lua``.

"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlparse
from urllib.request import url2pathname

from luacats_doc.errors import InvalidLocationError

if TYPE_CHECKING:
	from collections.abc import Iterable, Iterator

	from luacats_doc.docs.models import Definition

logger = logging.getLogger(__name__)


def file_uri_to_path(uri: str) -> Path:
	"""
	Convert a ``file://`` URI to an absolute, lexically normalized path.

	Args:
	    uri: Location URI from a define or field

	Returns:
	    The absolute file system path

	Raises:
	    InvalidLocationError: If the URI is not a local, absolute file URI

	"""
	parsed = urlparse(uri)
	if parsed.scheme != "file":
		raise InvalidLocationError(uri, "scheme is not file://")
	if parsed.netloc not in ("", "localhost"):
		raise InvalidLocationError(uri, f"remote host {parsed.netloc!r}")

	path = Path(os.path.normpath(url2pathname(parsed.path))) if parsed.path else None
	if path is None or not path.is_absolute():
		raise InvalidLocationError(uri, "path is not absolute")
	return path


@dataclass
class MetaFile:
	"""A ``@meta`` file of the workspace."""

	path: Path
	"""Path relative to the workspace root."""

	definitions: list[Definition] = field(default_factory=list)
	"""Definitions documented in this file, in source order."""

	depth: int = 0
	"""Number of path components minus one."""

	sub_files: list[MetaFile] = field(default_factory=list)
	"""Files one level deeper, in the directory named after this file."""

	@classmethod
	def from_group(cls, path: Path, entries: Iterable[tuple[int, Definition]]) -> MetaFile:
		"""
		Create a file from ``(start offset, definition)`` pairs.

		Args:
		    path: File path relative to the workspace root
		    entries: Definitions paired with the offset of their define in this file

		Returns:
		    The file, with definitions sorted by offset

		"""
		ordered = sorted(entries, key=lambda entry: entry[0])
		return cls(
			path=path,
			definitions=[definition for _, definition in ordered],
			depth=len(path.parts) - 1,
		)

	@property
	def file_name(self) -> str:
		return self.path.name

	@property
	def file_stem(self) -> str:
		return self.path.stem

	@property
	def directory_name(self) -> str | None:
		"""Name of the directory holding this file, or None for root files."""
		if self.depth == 0:
			return None
		return self.path.parent.name

	def add_sub_file(self, file: MetaFile) -> None:
		self.sub_files.append(file)

	def walk(self) -> Iterator[MetaFile]:
		"""Yield this file and then every sub file, depth first."""
		yield self
		for sub_file in self.sub_files:
			yield from sub_file.walk()


@dataclass
class Workspace:
	"""A folder containing LuaCATS definition files."""

	root: Path
	"""Absolute path to the workspace folder."""

	files: list[MetaFile] = field(default_factory=list)
	"""Top level files; nested files hang off their parents."""

	_nodes: list[MetaFile] = field(default_factory=list, init=False, repr=False, compare=False)

	def __post_init__(self) -> None:
		# Same lexical normalisation as the define paths
		self.root = Path(os.path.normpath(Path(self.root).absolute()))

	def load(self, definitions: Iterable[Definition]) -> None:
		"""
		Group definitions into files and arrange the files into a hierarchy.

		Args:
		    definitions: Decoded definitions, in any order

		Raises:
		    InvalidLocationError: If a define's file URI cannot be resolved

		"""
		groups: dict[Path, list[tuple[int, Definition]]] = {}
		for definition in definitions:
			seen: set[Path] = set()
			for define in definition.defines:
				file_path = file_uri_to_path(define.file)
				# One entry per file, at the first define in that file
				if file_path in seen:
					continue
				seen.add(file_path)
				groups.setdefault(file_path, []).append((define.start, definition))

		meta_files: list[MetaFile] = []
		for file_path, entries in groups.items():
			try:
				relative = file_path.relative_to(self.root)
			except ValueError:
				# Library and system definitions live outside the workspace
				logger.debug("Skipping %s: outside workspace %s", file_path, self.root)
				continue
			if not relative.parts:
				continue
			meta_files.append(MetaFile.from_group(relative, entries))

		# Parents before children, then alphabetically
		meta_files.sort(key=lambda f: (f.depth, f.file_name, f.path.as_posix()))

		for meta_file in meta_files:
			self.add_file(meta_file)

	def add_file(self, file: MetaFile) -> None:
		"""
		Insert a file under its parent, or at the top level.

		The parent is the first file one level up whose stem equals this
		file's directory name. Files without such a parent are kept at the
		top level.

		"""
		parent = self._find_parent(file)
		self._nodes.append(file)

		if parent is not None:
			parent.add_sub_file(file)
			return

		if file.depth > 0:
			# mdBook chapters need a parent chapter, so orphans go to the top
			logger.warning("No parent found for %s", file.path.as_posix())
		self.files.append(file)

	def _find_parent(self, file: MetaFile) -> MetaFile | None:
		if file.depth == 0:
			return None
		directory_name = file.directory_name
		for other in self._nodes:
			if other.depth == file.depth - 1 and other.file_stem == directory_name:
				return other
		return None

	def walk(self) -> Iterator[MetaFile]:
		"""Yield every file in the workspace, depth first."""
		for file in self.files:
			yield from file.walk()


def build_workspace(root: Path | str, definitions: Iterable[Definition]) -> Workspace:
	"""
	Build a workspace from decoded definitions.

	Args:
	    root: Absolute path to the definitions folder
	    definitions: Decoded definitions

	Returns:
	    The populated workspace

	Raises:
	    InvalidLocationError: If a define's file URI cannot be resolved

	"""
	workspace = Workspace(Path(root))
	workspace.load(definitions)
	logger.info("Built workspace %s with %d file(s)", workspace.root, sum(1 for _ in workspace.walk()))
	return workspace
