"""Global test fixtures and configuration."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from luacats_doc.docs import Definition, decode_definitions

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Root used by the URIs in fixtures/library/doc.json
FIXTURE_ROOT = Path("/workspace/library")


@pytest.fixture
def doc_json_text() -> str:
	"""Raw doc.json exported for the fixture library."""
	return (FIXTURES_DIR / "library" / "doc.json").read_text(encoding="utf-8")


@pytest.fixture
def fixture_definitions(doc_json_text: str) -> list[Definition]:
	"""Definitions decoded from the fixture export."""
	return decode_definitions(doc_json_text)


@pytest.fixture
def make_definition() -> Callable[..., Definition]:
	"""Factory for minimal definitions located in a single file."""

	def _make(
		file: str,
		name: str = "test",
		start: int = 0,
		finish: int = 10,
		description: str | None = None,
		views: list[str] | None = None,
	) -> Definition:
		return Definition(
			name=name,
			kind="nil",
			description=description,
			defines=[
				{
					"start": start,
					"finish": max(start, finish),
					"type": "nil",
					"file": file,
					"extends": [
						{"start": start, "finish": max(start, finish), "type": "function", "view": view}
						for view in views or []
					],
				}
			],
		)

	return _make


@pytest.fixture
def write_doc_json(tmp_path: Path) -> Callable[[list[dict[str, Any]]], Path]:
	"""Write records to a doc.json file in a temporary directory."""

	def _write(records: list[dict[str, Any]]) -> Path:
		path = tmp_path / "doc.json"
		path.write_text(json.dumps(records), encoding="utf-8")
		return path

	return _write
