"""
Configuration loader for luacats-doc.

This module provides functionality for loading and managing
configuration settings.

"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import yaml
from xdg.BaseDirectory import xdg_config_home

from luacats_doc.config import DEFAULT_CONFIG
from luacats_doc.printer import MarkdownOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Environment overrides look like LUACATS_<SECTION>_<KEY>
ENV_PREFIX = "LUACATS_"
MIN_ENV_VAR_PARTS = 2

CONFIG_FILE_NAME = ".luacats-doc.yml"

ConfigValue = str | int | float | bool | dict[str, Any] | list[Any] | None


class ConfigError(Exception):
	"""Exception raised for configuration errors."""


class ConfigLoader:
	"""
	Loads and manages configuration for luacats-doc.

	Configuration is layered: built-in defaults, then the YAML config file,
	then environment variables.

	"""

	def __init__(self, config_file: str | Path | None = None) -> None:
		"""
		Initialize the configuration loader.

		Args:
		        config_file: Path to configuration file (optional)

		"""
		self.config: dict[str, Any] = {}
		self.config_file = self._resolve_config_file(config_file)
		self.load_config()

	def _resolve_config_file(self, config_file: str | Path | None = None) -> Path | None:
		"""
		Resolve the configuration file path.

		If a config file is specified, use that. Otherwise, look in standard locations:
		1. ./.luacats-doc.yml in the current directory
		2. $XDG_CONFIG_HOME/luacats-doc/config.yml

		Args:
		        config_file: Explicitly provided config file path (optional)

		Returns:
		        Optional[Path]: Resolved config file path or None if no suitable file found

		"""
		if config_file:
			path = Path(config_file).expanduser().resolve()
			if not path.exists():
				logger.warning("Specified config file not found: %s", path)
			return path

		local_config = Path(CONFIG_FILE_NAME)
		if local_config.exists():
			return local_config

		xdg_config_file = Path(xdg_config_home) / "luacats-doc" / "config.yml"
		if xdg_config_file.exists():
			return xdg_config_file

		return None

	def load_config(self) -> dict[str, Any]:
		"""
		Load configuration from file and apply environment variable overrides.

		Returns:
		        Dict[str, Any]: Loaded configuration

		Raises:
		        ConfigError: If configuration file exists but cannot be loaded

		"""
		self.config = copy.deepcopy(DEFAULT_CONFIG)

		if self.config_file:
			try:
				if self.config_file.exists():
					with self.config_file.open(encoding="utf-8") as f:
						file_config = yaml.safe_load(f)
					if file_config is not None and not isinstance(file_config, dict):
						error_msg = f"{self.config_file} does not contain a YAML mapping"
						raise ConfigError(error_msg)
					if file_config:
						self._merge_configs(self.config, file_config)
					logger.info("Loaded configuration from %s", self.config_file)
				else:
					logger.warning("Configuration file not found: %s", self.config_file)
			except (OSError, yaml.YAMLError) as e:
				error_msg = f"Error loading configuration from {self.config_file}: {e}"
				logger.exception(error_msg)
				raise ConfigError(error_msg) from e

		self._apply_env_overrides()

		return self.config

	def _merge_configs(self, base: dict[str, Any], override: dict[str, Any]) -> None:
		"""
		Recursively merge two configuration dictionaries.

		Args:
		        base: Base configuration dictionary to merge into
		        override: Override configuration to apply

		"""
		for key, value in override.items():
			if isinstance(value, dict) and key in base and isinstance(base[key], dict):
				self._merge_configs(base[key], value)
			else:
				base[key] = value

	def _apply_env_overrides(self) -> None:
		"""Apply environment variable overrides to configuration."""
		for env_var, value in os.environ.items():
			if not env_var.startswith(ENV_PREFIX):
				continue
			parts = env_var.lower().split("_")[1:]
			if len(parts) < MIN_ENV_VAR_PARTS:
				continue
			section, key = parts[0], "_".join(parts[1:])

			typed_value: ConfigValue
			if value.lower() in ("true", "yes"):
				typed_value = True
			elif value.lower() in ("false", "no"):
				typed_value = False
			else:
				try:
					typed_value = int(value)
				except ValueError:
					try:
						typed_value = float(value)
					except ValueError:
						typed_value = value

			if not isinstance(self.config.get(section), dict):
				self.config[section] = {}
			self.config[section][key] = typed_value
			logger.debug("Applied environment override %s: %s", env_var, typed_value)

	def get(self, key: str, default: T = None) -> T:
		"""
		Get a configuration value, optionally with a section.

		Examples:
		        # Get a top-level key
		        config.get("book")

		        # Get a nested key with dot notation
		        config.get("book.part_title")

		Args:
		        key: Configuration key, can include dots for nested access
		        default: Default value if key not found

		Returns:
		        T: Configuration value or default

		"""
		current: Any = self.config
		for part in key.split("."):
			if isinstance(current, dict) and part in current:
				current = current[part]
			else:
				return default
		return cast("T", current)

	def set(self, key: str, value: ConfigValue) -> None:
		"""
		Set a configuration value.

		Args:
		        key: Configuration key, can include dots for nested access
		        value: Value to set

		"""
		parts = key.split(".")
		current = self.config
		for part in parts[:-1]:
			if not isinstance(current.get(part), dict):
				current[part] = {}
			current = current[part]
		current[parts[-1]] = value

	def get_markdown_options(self) -> MarkdownOptions:
		"""
		Build markdown printer options from the ``markdown`` section.

		Raises:
		        ConfigError: If the heading level is not an integer between 1 and 6

		"""
		heading_level = self.get("markdown.heading_level")
		if heading_level is not None and (isinstance(heading_level, bool) or not isinstance(heading_level, int)):
			error_msg = f"markdown.heading_level must be an integer, got {heading_level!r}"
			raise ConfigError(error_msg)
		try:
			return MarkdownOptions(heading_level=heading_level, language=str(self.get("markdown.language", "lua")))
		except ValueError as e:
			raise ConfigError(str(e)) from e

	def get_luals_command(self) -> list[str]:
		"""Return the documentation tool executable followed by its extra arguments."""
		command = str(self.get("luals.command", "lua-language-server"))
		extra_args = self.get("luals.extra_args", []) or []
		if isinstance(extra_args, str):
			extra_args = extra_args.split()
		return [command, *(str(arg) for arg in extra_args)]
