"""
Tolerant decoding for fields that may hold one object or many.

The documentation export writes ``extends`` as ``null``, omits it, writes a
single object or writes an array of objects depending on how many type
refinements a location has. Every field with that shape goes through
:func:`as_object_list` so callers always see an ordered list.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel


def as_object_list(value: Any) -> list[Any]:  # noqa: ANN401
	"""
	Normalize ``None``, a single object or a sequence of objects to a list.

	Args:
	    value: Raw value taken from the decoded JSON

	Returns:
	    A new list; empty when ``value`` is ``None``

	Raises:
	    ValueError: If ``value`` is neither null, an object nor an array

	"""
	if value is None:
		return []
	if isinstance(value, Mapping | BaseModel):
		return [value]
	if isinstance(value, list | tuple):
		return list(value)
	msg = f"expected an object, an array of objects or null, got {type(value).__name__}"
	raise ValueError(msg)
