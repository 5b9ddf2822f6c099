"""Decoding and encoding of ``doc.json`` documents."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from luacats_doc.errors import DecodeError

from .models import Definition

if TYPE_CHECKING:
	from collections.abc import Sequence

logger = logging.getLogger(__name__)

_DEFINITIONS = TypeAdapter(list[Definition])


def decode_definitions(document: str | bytes) -> list[Definition]:
	"""
	Decode a documentation export into definitions.

	Args:
	    document: JSON text holding an array of definition objects

	Returns:
	    Definitions in document order

	Raises:
	    DecodeError: If the JSON is malformed or a record does not fit the schema

	"""
	try:
		data = json.loads(document)
	except json.JSONDecodeError as e:
		msg = f"Malformed documentation JSON: {e}"
		raise DecodeError(msg) from e

	definitions = _validate(_DEFINITIONS, data)
	logger.debug("Decoded %d definitions", len(definitions))
	return definitions


def decode_definition(document: str | bytes | dict[str, Any]) -> Definition:
	"""
	Decode a single definition object.

	Args:
	    document: JSON text or an already parsed mapping

	Returns:
	    The decoded definition

	Raises:
	    DecodeError: If the input is malformed

	"""
	if isinstance(document, str | bytes):
		try:
			document = json.loads(document)
		except json.JSONDecodeError as e:
			msg = f"Malformed definition JSON: {e}"
			raise DecodeError(msg) from e
	return _validate(TypeAdapter(Definition), document)


def encode_definitions(definitions: Sequence[Definition], indent: int | None = None) -> str:
	"""
	Encode definitions back to the export's JSON layout.

	Kind tags and field names use the export's spellings and absent optional
	values are left out.

	"""
	return _DEFINITIONS.dump_json(list(definitions), by_alias=True, exclude_none=True, indent=indent).decode("utf-8")


def _validate(adapter: TypeAdapter, data: Any) -> Any:  # noqa: ANN401
	try:
		return adapter.validate_python(data)
	except ValidationError as e:
		msg = f"Invalid documentation record: {e}"
		raise DecodeError(msg) from e
