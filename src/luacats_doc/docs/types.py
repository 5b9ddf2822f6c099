"""Kind tags used by the lua-language-server documentation export."""

from enum import Enum


class DefinitionType(str, Enum):
	"""
	Closed set of kinds a definition, define or extend can carry.

	Values are the exact spellings found in ``doc.json``. Unknown spellings
	are rejected when decoding.

	"""

	BINARY = "binary"
	BOOLEAN = "boolean"
	DOC_ALIAS = "doc.alias"
	DOC_CLASS = "doc.class"
	DOC_ENUM = "doc.enum"
	DOC_EXTENDS_NAME = "doc.extends.name"
	DOC_FIELD = "doc.field"
	DOC_TYPE = "doc.type"
	FUNCTION = "function"
	FUNCTION_RETURN = "function.return"
	INTEGER = "integer"
	LOCAL = "local"
	NIL = "nil"
	NUMBER = "number"
	SELF = "self"
	SET_FIELD = "setfield"
	SET_GLOBAL = "setglobal"
	SET_INDEX = "setindex"
	SET_METHOD = "setmethod"
	STRING = "string"
	TABLE = "table"
	TABLE_FIELD = "tablefield"
	TYPE = "type"
	VARIABLE = "variable"
	VAR_ARG = "..."

	@property
	def label(self) -> str:
		"""Human readable label for the kind."""
		return _LABELS[self]

	@property
	def is_function(self) -> bool:
		"""Whether extends of this kind carry arguments and returns."""
		return self in (DefinitionType.FUNCTION, DefinitionType.SET_METHOD)


_LABELS: dict[DefinitionType, str] = {
	DefinitionType.BINARY: "binary expression",
	DefinitionType.BOOLEAN: "boolean",
	DefinitionType.DOC_ALIAS: "alias",
	DefinitionType.DOC_CLASS: "class",
	DefinitionType.DOC_ENUM: "enum",
	DefinitionType.DOC_EXTENDS_NAME: "parent class",
	DefinitionType.DOC_FIELD: "field",
	DefinitionType.DOC_TYPE: "type annotation",
	DefinitionType.FUNCTION: "function",
	DefinitionType.FUNCTION_RETURN: "function return",
	DefinitionType.INTEGER: "integer",
	DefinitionType.LOCAL: "local variable",
	DefinitionType.NIL: "nil",
	DefinitionType.NUMBER: "number",
	DefinitionType.SELF: "self",
	DefinitionType.SET_FIELD: "field assignment",
	DefinitionType.SET_GLOBAL: "global assignment",
	DefinitionType.SET_INDEX: "index assignment",
	DefinitionType.SET_METHOD: "method",
	DefinitionType.STRING: "string",
	DefinitionType.TABLE: "table",
	DefinitionType.TABLE_FIELD: "table field",
	DefinitionType.TYPE: "type",
	DefinitionType.VARIABLE: "variable",
	DefinitionType.VAR_ARG: "varargs",
}
