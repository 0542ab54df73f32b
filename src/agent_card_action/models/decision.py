"""
Decision models.

The Decision Engine returns a Decision: the outputs to publish, the
ordered log lines to write, and the final job outcome.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["info", "warning", "error"]
OutcomeReason = Literal["passed", "semantic", "policy", "malformed",
                        "infrastructure"]

# Published output names.
OUTPUT_RESULT = "result"
OUTPUT_ERROR_COUNT = "error-count"
OUTPUT_WARNING_COUNT = "warning-count"
OUTPUT_COMPLIANCE_SCORE = "compliance-score"
OUTPUT_TRUST_SCORE = "trust-score"
OUTPUT_AVAILABILITY_SCORE = "availability-score"
OUTPUT_PRODUCTION_READY = "production-ready"

# Sentinels for scores that were not produced.
NOT_AVAILABLE = "N/A"
NOT_TESTED = "not-tested"


class LogLine(BaseModel):
	"""A single log line with its severity."""

	model_config = ConfigDict(frozen=True)

	severity: Severity = "info"
	text: str = ""


class JobOutcome(BaseModel):
	"""Final job state and, on failure, the status message."""

	model_config = ConfigDict(frozen=True)

	success: bool
	reason: OutcomeReason
	message: Optional[str] = Field(
	    default=None, description="Failure message; None on success")

	@classmethod
	def passed(cls) -> "JobOutcome":
		return cls(success=True, reason="passed")

	@classmethod
	def failed(cls, reason: OutcomeReason, message: str) -> "JobOutcome":
		return cls(success=False, reason=reason, message=message)


class Decision(BaseModel):
	"""Everything the host needs to publish for one run."""

	outputs: dict[str, str] = Field(default_factory=dict)
	log_plan: list[LogLine] = Field(default_factory=list)
	outcome: JobOutcome


__all__ = [
    "Severity",
    "OutcomeReason",
    "LogLine",
    "JobOutcome",
    "Decision",
    "OUTPUT_RESULT",
    "OUTPUT_ERROR_COUNT",
    "OUTPUT_WARNING_COUNT",
    "OUTPUT_COMPLIANCE_SCORE",
    "OUTPUT_TRUST_SCORE",
    "OUTPUT_AVAILABILITY_SCORE",
    "OUTPUT_PRODUCTION_READY",
    "NOT_AVAILABLE",
    "NOT_TESTED",
]
