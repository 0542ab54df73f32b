"""
JSON parsing utilities.

Provides tolerant extraction of a JSON document from process output
that may carry banners or progress text around the payload.
"""

from __future__ import annotations

import json
from typing import Any, Optional


def _balanced_objects(text: str) -> list[str]:
	"""Return every top-level balanced ``{...}`` span in text.

	Braces inside JSON string literals are skipped so that messages
	such as ``"expected '}'"`` do not break the scan.
	"""
	spans: list[str] = []
	depth = 0
	start = None
	in_string = False
	escaped = False
	for i, ch in enumerate(text):
		if in_string:
			if escaped:
				escaped = False
			elif ch == "\\":
				escaped = True
			elif ch == '"':
				in_string = False
			continue
		if ch == '"' and depth > 0:
			in_string = True
		elif ch == '{':
			if depth == 0:
				start = i
			depth += 1
		elif ch == '}' and depth > 0:
			depth -= 1
			if depth == 0 and start is not None:
				spans.append(text[start:i + 1])
				start = None
	return spans


def extract_json(text: str) -> Optional[Any]:
	"""
	Parse text as a JSON document, tolerating surrounding noise.

	The whole text is tried first. Failing that, the last balanced
	object found in the text is tried, then earlier ones.

	Parameters:
		text: Raw process output.

	Returns:
		Parsed JSON value, or None if nothing parses.
	"""
	stripped = text.strip()
	if not stripped:
		return None
	try:
		return json.loads(stripped)
	except ValueError:
		pass
	for cand in reversed(_balanced_objects(stripped)):
		try:
			return json.loads(cand)
		except ValueError:
			continue
	return None


def truncate(text: str, limit: int = 2000) -> str:
	"""Trim text to ``limit`` characters, marking the cut."""
	if len(text) <= limit:
		return text
	return text[:limit] + f"... [truncated {len(text) - limit} chars]"


__all__ = ["extract_json", "truncate"]
