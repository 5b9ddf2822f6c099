"""
luacats-doc: markdown API documentation from LuaCATS definitions.

Definitions exported by lua-language-server are decoded, grouped into a
workspace that follows the layout of the definitions folder, and rendered
as markdown, either as one document or as mdBook chapters.

"""

from luacats_doc.docs import Definition, DefinitionType, decode_definitions
from luacats_doc.errors import DecodeError, ExternalToolError, InvalidLocationError, LuaCatsError
from luacats_doc.printer import MarkdownOptions, MarkdownPrinter
from luacats_doc.workspace import MetaFile, Workspace, build_workspace

__version__ = "0.1.0"

__all__ = [
	"DecodeError",
	"Definition",
	"DefinitionType",
	"ExternalToolError",
	"InvalidLocationError",
	"LuaCatsError",
	"MarkdownOptions",
	"MarkdownPrinter",
	"MetaFile",
	"Workspace",
	"__version__",
	"build_workspace",
	"decode_definitions",
]
