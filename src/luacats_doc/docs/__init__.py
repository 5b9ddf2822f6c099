"""Documentation record model and ``doc.json`` decoding."""

from .decode import decode_definition, decode_definitions, encode_definitions
from .models import Define, Definition, DocField, Extend, FuncArg, FuncReturn
from .normalize import as_object_list
from .types import DefinitionType

__all__ = [
	"Define",
	"Definition",
	"DefinitionType",
	"DocField",
	"Extend",
	"FuncArg",
	"FuncReturn",
	"as_object_list",
	"decode_definition",
	"decode_definitions",
	"encode_definitions",
]
