"""
Schema normalization for validator payloads.

Validator releases have used different names for the same logical
field. Every accepted spelling is listed once, in preference order,
in FIELD_ALIASES; nothing else in the package reads raw payload keys.

Each function here is pure and never raises on unexpected shapes;
a field of the wrong type falls back to a neutral value instead of
invalidating the whole payload.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping

from agent_card_action.models.validation_result import (
    Finding,
    ScoreDimension,
    ScoringResult,
    ValidationResult,
)

# Logical field -> accepted payload keys, most preferred first.
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "success": ("success", "valid"),
    "errors": ("errors", ),
    "warnings": ("warnings", ),
    "scoring": ("scoringResult", "scoring"),
    "compliance": ("compliance", ),
    "trust": ("trust", ),
    "availability": ("availability", ),
    "production_ready": ("productionReady", "production_ready"),
    "score_value": ("total", "score"),
    "rating": ("rating", ),
    "message": ("message", ),
}

_MISSING = object()


def resolve_field(data: Mapping[str, Any], logical: str,
                  default: Any = None) -> Any:
	"""
	Return the value of the first alias of ``logical`` present in data.

	A key that is present with a null value counts as present.

	Parameters:
		data: Raw payload object.
		logical: Key into FIELD_ALIASES.
		default: Returned when no alias is present.
	"""
	for key in FIELD_ALIASES[logical]:
		value = data.get(key, _MISSING)
		if value is not _MISSING:
			return value
	return default


def coerce_sequence(value: Any) -> list[Any]:
	"""Missing/None becomes [], a single value becomes a one-item list."""
	if value is None:
		return []
	if isinstance(value, (list, tuple)):
		return list(value)
	return [value]


def finding_message(entry: Any) -> str:
	"""
	Extract the display message of a finding.

	Objects yield their message field; bare strings are the message
	themselves; objects without a usable message are shown as compact
	JSON so nothing reported by the validator is silently lost.
	"""
	if isinstance(entry, str):
		return entry
	if isinstance(entry, Mapping):
		message = resolve_field(entry, "message")
		if isinstance(message, str):
			return message
		if message is not None:
			return str(message)
		return json.dumps(entry, sort_keys=True, separators=(",", ":"))
	return str(entry)


def coerce_flag(value: Any) -> bool:
	"""True only for a JSON true or the string "true"; anything else is False."""
	if isinstance(value, bool):
		return value
	if isinstance(value, str):
		return value.strip().lower() == "true"
	return False


def coerce_score(value: Any) -> float | None:
	"""A finite number (or numeric string) as float, otherwise None."""
	if isinstance(value, bool) or value is None:
		return None
	if isinstance(value, str):
		try:
			value = float(value.strip())
		except ValueError:
			return None
	if not isinstance(value, (int, float)) or not math.isfinite(value):
		return None
	return float(value)


def coerce_rating(value: Any) -> str | None:
	if value is None:
		return None
	if isinstance(value, str):
		return value
	return str(value)


def _dimension(raw: Any) -> ScoreDimension | None:
	if not isinstance(raw, Mapping):
		return None
	return ScoreDimension(
	    value=coerce_score(resolve_field(raw, "score_value")),
	    rating=coerce_rating(resolve_field(raw, "rating")),
	)


def normalize_scoring(raw: Any) -> ScoringResult | None:
	"""Build a ScoringResult, or None when scoring is absent."""
	if not isinstance(raw, Mapping):
		return None
	return ScoringResult(
	    compliance=_dimension(resolve_field(raw, "compliance")),
	    trust=_dimension(resolve_field(raw, "trust")),
	    availability=_dimension(resolve_field(raw, "availability")),
	    production_ready=coerce_flag(resolve_field(raw, "production_ready")),
	)


def normalize_payload(data: Mapping[str, Any]) -> ValidationResult:
	"""
	Resolve aliases and coerce shapes into a ValidationResult.

	Never raises: every field has a fallback. A pass/fail field that
	is missing or unreadable counts as failed, an unusable score
	becomes None, and a non-string rating is stringified.
	"""
	return ValidationResult(
	    success=coerce_flag(resolve_field(data, "success")),
	    errors=[
	        Finding(message=finding_message(e))
	        for e in coerce_sequence(resolve_field(data, "errors"))
	    ],
	    warnings=[
	        Finding(message=finding_message(w))
	        for w in coerce_sequence(resolve_field(data, "warnings"))
	    ],
	    scoring=normalize_scoring(resolve_field(data, "scoring")),
	)


__all__ = [
    "FIELD_ALIASES",
    "resolve_field",
    "coerce_sequence",
    "finding_message",
    "coerce_flag",
    "coerce_score",
    "coerce_rating",
    "normalize_scoring",
    "normalize_payload",
]
