"""Exception hierarchy for luacats-doc."""

from __future__ import annotations


class LuaCatsError(Exception):
	"""Base exception for all luacats-doc errors."""


class DecodeError(LuaCatsError):
	"""Raised when documentation JSON is malformed or uses an unknown kind."""


class InvalidLocationError(LuaCatsError):
	"""Raised when a definition location cannot be converted to a file path."""

	def __init__(self, uri: str, reason: str = "not an absolute file:// URI") -> None:
		"""
		Initialize the error.

		Args:
		    uri: The offending location URI
		    reason: Why the URI was rejected

		"""
		self.uri = uri
		self.reason = reason
		super().__init__(f"Invalid location {uri!r}: {reason}")


class ExternalToolError(LuaCatsError):
	"""Raised when the documentation generator process fails."""

	def __init__(
		self,
		message: str,
		command: list[str] | None = None,
		returncode: int | None = None,
		stderr: str = "",
	) -> None:
		"""
		Initialize the error.

		Args:
		    message: Human readable description
		    command: The command line that was executed
		    returncode: Exit status of the process, if it ran
		    stderr: Captured standard error output

		"""
		self.command = command or []
		self.returncode = returncode
		self.stderr = stderr
		super().__init__(message)
