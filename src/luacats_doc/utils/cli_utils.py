"""Utility functions for CLI operations in luacats-doc."""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import typer
from rich.progress import Progress, SpinnerColumn, TextColumn

from luacats_doc.utils.log_setup import console, display_summary

if TYPE_CHECKING:
	from collections.abc import Iterator

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def loading_spinner(message: str = "Processing...") -> Iterator[None]:
	"""
	Show a transient spinner on stderr while the block runs.

	Args:
	    message: Text shown next to the spinner

	"""
	if not console.is_terminal:
		yield
		return

	with Progress(
		SpinnerColumn(),
		TextColumn("[progress.description]{task.description}"),
		console=console,
		transient=True,
	) as progress:
		progress.add_task(message, total=None)
		yield


def show_error(message: str, exception: Exception | None = None) -> None:
	"""
	Display an error summary with standardized formatting.

	Args:
	        message: The error message to display
	        exception: Optional exception that caused the error

	"""
	error_text = message
	if exception:
		error_text += f"\n\nDetails: {exception!s}"
		logger.debug("Error occurred", exc_info=exception)

	display_summary(error_text, "error")


def show_warning(message: str) -> None:
	"""
	Display a warning summary with standardized formatting.

	Args:
	        message: The warning message to display

	"""
	display_summary(message, "warning")


def exit_with_error(message: str, exit_code: int = 1, exception: Exception | None = None) -> None:
	"""
	Display an error message and exit.

	Args:
	        message: Error message to display
	        exit_code: Exit code to use
	        exception: Optional exception that caused the error

	"""
	show_error(message, exception)
	raise typer.Exit(exit_code) from exception
