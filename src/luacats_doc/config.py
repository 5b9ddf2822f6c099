"""Default configuration settings for luacats-doc."""

DEFAULT_CONFIG = {
	# Documentation export from lua-language-server
	"luals": {
		# Executable to run; must be on PATH unless absolute
		"command": "lua-language-server",
		# Extra arguments appended after the --doc options
		"extra_args": [],
	},
	# Markdown rendering
	"markdown": {
		# Heading level used for definition names (1-6)
		"heading_level": 2,
		# Info string for signature code blocks
		"language": "lua",
	},
	# mdBook integration
	"book": {
		# Definitions folder, relative to the book root
		"definitions_path": "library",
		# Title of the part holding the generated chapters
		"part_title": "API Reference",
		# Folder prefix for generated chapter paths
		"chapter_dir": "api",
		# Deepest file level that gets its own chapter (None for no limit)
		"nav_depth": None,
	},
}
