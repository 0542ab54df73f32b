"""
Decision engine for validator results.

Turns the captured validator process result and the run policy into
a Decision: published outputs, an ordered log plan, and the job
outcome. Everything here is pure; no function performs I/O or reads
the clock, so identical inputs always give identical decisions.
"""

from __future__ import annotations

import math
from collections.abc import Mapping

from agent_card_action.core.normalize import normalize_payload
from agent_card_action.models.decision import (
    Decision,
    JobOutcome,
    LogLine,
    NOT_AVAILABLE,
    NOT_TESTED,
    OUTPUT_AVAILABILITY_SCORE,
    OUTPUT_COMPLIANCE_SCORE,
    OUTPUT_ERROR_COUNT,
    OUTPUT_PRODUCTION_READY,
    OUTPUT_RESULT,
    OUTPUT_TRUST_SCORE,
    OUTPUT_WARNING_COUNT,
)
from agent_card_action.models.policy import PolicyConfig
from agent_card_action.models.process_result import RawProcessResult
from agent_card_action.models.validation_result import (
    ScoreDimension,
    ValidationResult,
)
from agent_card_action.utils.parsing import extract_json, truncate

PARSE_FAILURE_MESSAGE = "Failed to parse validation output"


def format_score(value: float | None) -> str:
	"""Render a score as a CI output string ("90", "87.5", or N/A)."""
	if value is None or not math.isfinite(value):
		return NOT_AVAILABLE
	rounded = round(float(value), 2)
	if rounded == int(rounded):
		return str(int(rounded))
	return f"{rounded:.2f}".rstrip("0").rstrip(".")


def _dimension_output(dim: ScoreDimension | None) -> str:
	return format_score(dim.value if dim else None)


def _dimension_line(label: str, dim: ScoreDimension | None) -> str:
	if dim is None or dim.value is None:
		return f"  {label}: {NOT_AVAILABLE}"
	text = f"  {label}: {format_score(dim.value)}/100"
	if dim.rating:
		text += f" ({dim.rating})"
	return text


def banner_line(policy: PolicyConfig) -> LogLine:
	"""Opening line naming the agent card under validation."""
	return LogLine(text=f"🚀 Validating A2A agent card: {policy.agent_card}")


def build_outputs(result: ValidationResult) -> dict[str, str]:
	"""Derive the published outputs from a normalized result."""
	outputs = {
	    OUTPUT_RESULT: "passed" if result.success else "failed",
	    OUTPUT_ERROR_COUNT: str(result.error_count),
	    OUTPUT_WARNING_COUNT: str(result.warning_count),
	}
	scoring = result.scoring
	if scoring is None:
		outputs[OUTPUT_COMPLIANCE_SCORE] = NOT_AVAILABLE
		outputs[OUTPUT_TRUST_SCORE] = NOT_AVAILABLE
		outputs[OUTPUT_AVAILABILITY_SCORE] = NOT_AVAILABLE
		outputs[OUTPUT_PRODUCTION_READY] = "false"
		return outputs
	outputs[OUTPUT_COMPLIANCE_SCORE] = _dimension_output(scoring.compliance)
	outputs[OUTPUT_TRUST_SCORE] = _dimension_output(scoring.trust)
	outputs[OUTPUT_AVAILABILITY_SCORE] = (
	    _dimension_output(scoring.availability)
	    if scoring.availability is not None else NOT_TESTED)
	outputs[OUTPUT_PRODUCTION_READY] = str(scoring.production_ready).lower()
	return outputs


def build_log_plan(result: ValidationResult,
                   policy: PolicyConfig) -> list[LogLine]:
	"""Derive the ordered log lines for a normalized result."""
	lines = [banner_line(policy)]
	scoring = result.scoring
	if scoring is not None:
		lines.append(LogLine(text=""))
		lines.append(LogLine(text="📊 Quality Scores:"))
		lines.append(LogLine(text=_dimension_line("Compliance",
		                                          scoring.compliance)))
		lines.append(LogLine(text=_dimension_line("Trust", scoring.trust)))
		if scoring.availability is not None:
			lines.append(
			    LogLine(text=_dimension_line("Availability",
			                                 scoring.availability)))
		lines.append(LogLine(text=""))
		ready = "✅ YES" if scoring.production_ready else "❌ NO"
		lines.append(LogLine(text=f"🎯 Production Ready: {ready}"))

	if result.error_count:
		lines.append(LogLine(text=""))
		lines.append(
		    LogLine(severity="error",
		            text=f"❌ Found {result.error_count} error(s):"))
		lines.extend(
		    LogLine(severity="error", text=f"  - {e.message}")
		    for e in result.errors)

	if result.warning_count:
		lines.append(LogLine(text=""))
		lines.append(
		    LogLine(severity="warning",
		            text=f"⚠️  Found {result.warning_count} warning(s):"))
		lines.extend(
		    LogLine(severity="warning", text=f"  - {w.message}")
		    for w in result.warnings)

	lines.append(LogLine(text=""))
	if result.success:
		lines.append(LogLine(text="✅ Validation passed!"))
	else:
		lines.append(LogLine(text="❌ Validation failed"))
	return lines


def decide_outcome(result: ValidationResult,
                   policy: PolicyConfig) -> JobOutcome:
	"""
	Decide the job outcome.

	A failed result always fails the job. A passing result with
	warnings fails only when fail-on-warnings is enabled, and does so
	with a message that names the switch.
	"""
	if not result.success:
		return JobOutcome.failed(
		    "semantic",
		    f"Validation failed with {result.error_count} error(s)",
		)
	if policy.fail_on_warnings and result.warning_count > 0:
		return JobOutcome.failed(
		    "policy",
		    f"Validation passed but found {result.warning_count} warning(s) "
		    "(fail-on-warnings enabled)",
		)
	return JobOutcome.passed()


def malformed_output(raw: RawProcessResult, policy: PolicyConfig) -> Decision:
	"""Decision for stdout that is not a usable validation document."""
	message = PARSE_FAILURE_MESSAGE
	if raw.exit_code != 0:
		message += f" (validator exited with code {raw.exit_code})"
	lines = [
	    banner_line(policy),
	    LogLine(severity="error", text=message),
	]
	lines.append(
	    LogLine(severity="error",
	            text="stdout: " + (truncate(raw.stdout.strip()) or "<empty>")))
	lines.append(
	    LogLine(severity="error",
	            text="stderr: " + (truncate(raw.stderr.strip()) or "<empty>")))
	return Decision(
	    outputs={},
	    log_plan=lines,
	    outcome=JobOutcome.failed("malformed", message),
	)


def infrastructure_failure(message: str, policy: PolicyConfig) -> Decision:
	"""Decision for a run where the validator could not be run at all."""
	return Decision(
	    outputs={},
	    log_plan=[banner_line(policy),
	              LogLine(severity="error", text=message)],
	    outcome=JobOutcome.failed("infrastructure", message),
	)


def interpret(raw: RawProcessResult, policy: PolicyConfig) -> Decision:
	"""
	Interpret a validator run.

	Parameters:
		raw: Exit code and captured output of the validator.
		policy: Run policy; only fail_on_warnings and agent_card
			affect interpretation.

	Returns:
		The Decision. Never raises for malformed or unexpected
		validator output; those become failure outcomes.
	"""
	payload = extract_json(raw.stdout)
	if not isinstance(payload, Mapping):
		return malformed_output(raw, policy)
	result = normalize_payload(payload)
	return Decision(
	    outputs=build_outputs(result),
	    log_plan=build_log_plan(result, policy),
	    outcome=decide_outcome(result, policy),
	)


__all__ = [
    "PARSE_FAILURE_MESSAGE",
    "banner_line",
    "interpret",
    "build_outputs",
    "build_log_plan",
    "decide_outcome",
    "format_score",
    "malformed_output",
    "infrastructure_failure",
]
