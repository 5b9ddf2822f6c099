"""
Documentation records exported by lua-language-server.

The models mirror the layout of ``doc.json``: a list of :class:`Definition`
entries, each with the :class:`Define` locations that established the name.
Field names follow Python conventions; the JSON spellings (``desc``,
``rawdesc``, ``type``) are kept as aliases so records can be written back
out unchanged.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from .normalize import as_object_list
from .types import DefinitionType

if TYPE_CHECKING:
	from pathlib import Path


class DocModel(BaseModel):
	"""Common configuration for documentation records."""

	model_config = ConfigDict(populate_by_name=True)


class SpanModel(DocModel):
	"""A record that covers a byte range of a source file."""

	start: int = Field(ge=0)
	finish: int = Field(ge=0)

	@model_validator(mode="after")
	def check_span(self) -> Self:
		"""Reject ranges that end before they start."""
		if self.start > self.finish:
			msg = f"start offset {self.start} is after finish offset {self.finish}"
			raise ValueError(msg)
		return self


class FuncArg(SpanModel):
	"""A function parameter."""

	name: str | None = None
	"""Parameter name; missing for varargs."""

	kind: DefinitionType = Field(alias="type")
	view: str
	description: str | None = Field(default=None, alias="desc")
	raw_description: str | None = Field(default=None, alias="rawdesc")


class FuncReturn(DocModel):
	"""A function return value."""

	name: str | None = None
	kind: DefinitionType = Field(alias="type")
	view: str
	description: str | None = Field(default=None, alias="desc")
	raw_description: str | None = Field(default=None, alias="rawdesc")


class Extend(SpanModel):
	"""Refined type information attached to a location."""

	kind: DefinitionType = Field(alias="type")
	view: str
	"""Canonical rendering of the type or signature."""

	description: str | None = Field(default=None, alias="desc")
	raw_description: str | None = Field(default=None, alias="rawdesc")
	args: list[FuncArg] | None = None
	"""Only present for function-like extends."""

	returns: list[FuncReturn] | None = None
	"""Only present for function-like extends."""


ExtendList = Annotated[list[Extend], BeforeValidator(as_object_list)]


class Define(SpanModel):
	"""One source location contributing to a definition."""

	kind: DefinitionType = Field(alias="type")
	file: str
	"""``file://`` URI of the source file."""

	extends: ExtendList = Field(default_factory=list)


class DocField(SpanModel):
	"""A member of a class or table definition."""

	name: str
	kind: DefinitionType = Field(alias="type")
	file: str
	description: str | None = Field(default=None, alias="desc")
	raw_description: str | None = Field(default=None, alias="rawdesc")
	visible: str | None = None
	extends: ExtendList = Field(default_factory=list)


class Definition(DocModel):
	"""One documented name and every location that established it."""

	name: str
	kind: DefinitionType = Field(alias="type")
	description: str | None = Field(default=None, alias="desc")
	raw_description: str | None = Field(default=None, alias="rawdesc")
	defines: list[Define] = Field(default_factory=list)
	fields: list[DocField] = Field(default_factory=list)

	@property
	def primary(self) -> Define | None:
		"""The first define, which decides where the definition is documented."""
		return self.defines[0] if self.defines else None

	def location(self) -> tuple[str, int] | None:
		"""Return ``(file, start)`` of the primary define, if any."""
		primary = self.primary
		if primary is None:
			return None
		return primary.file, primary.start

	def file_path(self) -> Path | None:
		"""
		Resolve the primary define's file to a path.

		Raises:
		    InvalidLocationError: If the file URI cannot be converted

		"""
		from luacats_doc.workspace import file_uri_to_path

		location = self.location()
		if location is None:
			return None
		return file_uri_to_path(location[0])
