"""
Documentation export through lua-language-server.

``lua-language-server --doc <folder>`` writes a ``doc.json`` describing every
definition it can see, including the bundled standard library. This module
runs the export in a temporary folder and decodes the result.

"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from luacats_doc.docs.decode import decode_definitions
from luacats_doc.errors import ExternalToolError
from luacats_doc.workspace import file_uri_to_path

if TYPE_CHECKING:
	from collections.abc import Iterable, Sequence

	from luacats_doc.docs.models import Definition

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "lua-language-server"
DOC_FILE_NAME = "doc.json"


def generate_docs(
	definitions_path: Path,
	command: str = DEFAULT_COMMAND,
	extra_args: Sequence[str] = (),
) -> list[Definition]:
	"""
	Run the documentation export for a definitions folder.

	Args:
	    definitions_path: Folder holding the ``@meta`` files
	    command: lua-language-server executable
	    extra_args: Additional arguments for the executable

	Returns:
	    Decoded definitions, including ones from outside the folder

	Raises:
	    ExternalToolError: If the tool cannot run, fails or writes no output
	    DecodeError: If the output is not a valid documentation export

	"""
	with tempfile.TemporaryDirectory(prefix="luals-docs") as tmp_dir:
		tmp_path = Path(tmp_dir)
		cmd = [
			command,
			"--doc",
			str(definitions_path),
			"--doc_out_path",
			str(tmp_path),
			"--logpath",
			str(tmp_path),
			*extra_args,
		]
		logger.debug("Running %s", " ".join(cmd))

		try:
			result = subprocess.run(cmd, capture_output=True, text=True, check=False)  # noqa: S603
		except OSError as e:
			msg = f"Failed to execute {command}: {e}"
			raise ExternalToolError(msg, command=cmd) from e

		if result.returncode != 0:
			msg = f"{command} exited with status {result.returncode}"
			logger.error("%s\n%s", msg, result.stderr)
			raise ExternalToolError(msg, command=cmd, returncode=result.returncode, stderr=result.stderr)

		return load_docs(tmp_path / DOC_FILE_NAME, command=cmd)


def load_docs(json_path: Path, command: list[str] | None = None) -> list[Definition]:
	"""
	Decode a ``doc.json`` file written by an earlier export.

	Args:
	    json_path: Path to the JSON file
	    command: Command that produced the file, for error reporting

	Raises:
	    ExternalToolError: If the file cannot be read
	    DecodeError: If the content is not a valid documentation export

	"""
	try:
		json_doc = json_path.read_text(encoding="utf-8")
	except OSError as e:
		msg = f"Unable to read documentation output {json_path}: {e}"
		raise ExternalToolError(msg, command=command) from e

	return decode_definitions(json_doc)


def clean_docs(root: Path, definitions: Iterable[Definition]) -> list[Definition]:
	"""
	Keep definitions defined inside ``root``, ordered by file and position.

	A definition is kept when any of its defines lies under ``root``; it is
	ordered by its primary define.

	Raises:
	    InvalidLocationError: If a define's file URI cannot be resolved

	"""
	kept = [definition for definition in definitions if _defined_under(root, definition)]
	logger.debug("Kept %d definitions under %s", len(kept), root)
	# Definitions without defines were filtered out above
	return sorted(kept, key=lambda definition: definition.location() or ("", 0))


def _defined_under(root: Path, definition: Definition) -> bool:
	return any(file_uri_to_path(define.file).is_relative_to(root) for define in definition.defines)
