"""Tests for the tolerant extends decoding."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from luacats_doc.docs import Define, DocField, as_object_list

EXTEND = {"start": 1, "finish": 5, "type": "function", "view": "function f()"}


def _define(**extra: Any) -> dict[str, Any]:
	return {"start": 0, "finish": 10, "type": "setglobal", "file": "file:///lib/a.lua", **extra}


@pytest.mark.unit
class TestAsObjectList:
	"""Test cases for as_object_list."""

	def test_none_is_empty(self) -> None:
		"""Test that null becomes an empty list."""
		assert as_object_list(None) == []

	def test_single_object_is_wrapped(self) -> None:
		"""Test that a single object becomes a one element list."""
		assert as_object_list(EXTEND) == [EXTEND]

	def test_array_is_copied(self) -> None:
		"""Test that arrays are returned as a new list in order."""
		values = [EXTEND, {**EXTEND, "view": "g"}]
		result = as_object_list(values)
		assert result == values
		assert result is not values

	@pytest.mark.parametrize("value", ["function f()", 3, True])
	def test_scalars_are_rejected(self, value: object) -> None:
		"""Test that scalar values are rejected."""
		with pytest.raises(ValueError, match="expected an object"):
			as_object_list(value)


@pytest.mark.unit
class TestExtendsField:
	"""Test cases for extends normalization on records."""

	def test_absent_single_and_array_agree(self) -> None:
		"""Test that equivalent content decodes equally regardless of shape."""
		single = Define.model_validate(_define(extends=EXTEND))
		array = Define.model_validate(_define(extends=[EXTEND]))
		assert single.extends == array.extends
		assert len(single.extends) == 1
		assert single.extends[0].view == "function f()"

	def test_absent_and_null_are_empty(self) -> None:
		"""Test that missing and null extends both decode to an empty list."""
		absent = Define.model_validate(_define())
		null = Define.model_validate(_define(extends=None))
		empty = Define.model_validate(_define(extends=[]))
		assert absent.extends == null.extends == empty.extends == []

	def test_array_order_is_kept(self) -> None:
		"""Test that extends keep their order."""
		define = Define.model_validate(_define(extends=[{**EXTEND, "view": "a"}, {**EXTEND, "view": "b"}]))
		assert [extend.view for extend in define.extends] == ["a", "b"]

	def test_field_extends_use_same_rule(self) -> None:
		"""Test that fields normalize extends like defines do."""
		field = DocField.model_validate(
			{"name": "x", "type": "doc.field", "file": "file:///lib/a.lua", "start": 0, "finish": 1, "extends": EXTEND}
		)
		assert len(field.extends) == 1

	def test_malformed_entry_fails_whole_record(self) -> None:
		"""Test that one bad extend rejects the record."""
		broken = {key: value for key, value in EXTEND.items() if key != "view"}
		with pytest.raises(ValidationError):
			Define.model_validate(_define(extends=[EXTEND, broken]))

	def test_unknown_extend_kind_fails(self) -> None:
		"""Test that an unknown kind inside an extend is rejected."""
		with pytest.raises(ValidationError):
			Define.model_validate(_define(extends={**EXTEND, "type": "doc.generic"}))

	def test_scalar_extends_fail(self) -> None:
		"""Test that a string extends value is rejected."""
		with pytest.raises(ValidationError):
			Define.model_validate(_define(extends="function f()"))
