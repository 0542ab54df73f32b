"""
Validation result models.

Canonical, structurally-validated shape of the validator's JSON
payload. Field aliases across tool versions are resolved before
these models are built (see core.normalize).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class Finding(BaseModel):
	"""A single error or warning reported by the validator."""

	message: str = Field(description="Human-readable finding text")


class ScoreDimension(BaseModel):
	"""One scored dimension (compliance, trust, or availability)."""

	value: Optional[float] = Field(default=None,
	                               description="Score between 0 and 100")
	rating: Optional[str] = Field(default=None,
	                              description="Rating label, e.g. 'A'")


class ScoringResult(BaseModel):
	"""Quality scores; absent when the validator did not score."""

	compliance: Optional[ScoreDimension] = None
	trust: Optional[ScoreDimension] = None
	availability: Optional[ScoreDimension] = Field(
	    default=None, description="None when live testing was not requested")
	production_ready: bool = False


class ValidationResult(BaseModel):
	"""Normalized validator verdict."""

	success: bool = Field(description="Top-level pass/fail indicator")
	errors: list[Finding] = Field(default_factory=list)
	warnings: list[Finding] = Field(default_factory=list)
	scoring: Optional[ScoringResult] = None

	@property
	def error_count(self) -> int:
		return len(self.errors)

	@property
	def warning_count(self) -> int:
		return len(self.warnings)


__all__ = [
    "Finding",
    "ScoreDimension",
    "ScoringResult",
    "ValidationResult",
]
