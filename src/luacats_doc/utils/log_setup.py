"""
Logging setup for luacats-doc.

Log records and diagnostics go to stderr: stdout carries generated
markdown or the mdBook JSON protocol.

"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.rule import Rule
from rich.text import Text

console = Console(stderr=True)


def setup_logging(
	is_verbose: bool = False,
	log_to_console: bool = True,
	log_file_path: Path | str | None = None,
) -> None:
	"""
	Set up logging configuration.

	Args:
	    is_verbose: Enable verbose logging
	    log_to_console: Whether to log to the console
	    log_file_path: Optional path to a file for logging. If None, no file logging.

	"""
	log_level = logging.DEBUG if is_verbose else logging.WARNING

	root_logger = logging.getLogger()
	root_logger.setLevel(log_level)

	# Clear existing handlers to avoid duplicate logs if called multiple times
	for handler in root_logger.handlers[:]:
		root_logger.removeHandler(handler)

	if log_to_console:
		console_handler = RichHandler(
			level=log_level,
			console=console,
			rich_tracebacks=True,
			show_time=is_verbose,
			show_path=is_verbose,
		)
		root_logger.addHandler(console_handler)

	if log_file_path:
		try:
			file_handler_path = Path(log_file_path)
			file_handler_path.parent.mkdir(parents=True, exist_ok=True)

			file_handler = logging.FileHandler(file_handler_path, mode="a", encoding="utf-8")
			file_handler.setLevel(logging.DEBUG)
			file_handler.setFormatter(
				logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(lineno)d - %(message)s")
			)
			root_logger.addHandler(file_handler)
			root_logger.debug("Logging to file: %s", file_handler_path)
		except (OSError, PermissionError, TypeError) as e:
			console.print(f"[bold red]Failed to set up file logging to {log_file_path}: {e}[/bold red]")


_SUMMARY_STYLES = {
	"error": ("Error Summary", "red"),
	"warning": ("Warning Summary", "yellow"),
}


def display_summary(message: str, kind: str = "error") -> None:
	"""
	Print ``message`` between two rules on stderr.

	Args:
	    message: Text to show; printed without rich markup
	    kind: ``"error"`` or ``"warning"``, selects the title and colour

	"""
	title, color = _SUMMARY_STYLES[kind]
	console.print()
	console.print(Rule(Text(title, style=f"bold {color}"), style=color))
	console.print(f"\n{message}\n", markup=False)
	console.print(Rule(style=color))
	console.print()
