"""
Job summary rendering.

Renders a Decision as Markdown for the CI job summary page.
"""

from __future__ import annotations

from string import Template

from agent_card_action.models.decision import (
    Decision,
    OUTPUT_AVAILABILITY_SCORE,
    OUTPUT_COMPLIANCE_SCORE,
    OUTPUT_ERROR_COUNT,
    OUTPUT_PRODUCTION_READY,
    OUTPUT_RESULT,
    OUTPUT_TRUST_SCORE,
    OUTPUT_WARNING_COUNT,
)
from agent_card_action.models.policy import PolicyConfig

SUMMARY_TEMPLATE = Template("""## A2A Agent Card Validation

| Item               | Value                     |
| ------------------ | ------------------------- |
| Agent Card         | ${agent_card}             |
| Result             | ${result}                 |
| Errors             | ${error_count}            |
| Warnings           | ${warning_count}          |
| Compliance Score   | ${compliance_score}       |
| Trust Score        | ${trust_score}            |
| Availability Score | ${availability_score}     |
| Production Ready   | ${production_ready}       |

> **Outcome:** ${outcome}
${findings}""")

_SEVERITY_LABELS = {"error": "Error", "warning": "Warning"}


def _cell(value: str | None) -> str:
	if not value:
		return "-"
	return value.replace("|", "\\|").replace("\n", " ")


def _bullet(text: str) -> str:
	return " ".join(text.strip().lstrip("- ").split())


def _findings_md(decision: Decision) -> str:
	"""Bullet list of the error and warning lines of the log plan."""
	items = [
	    f"- **{_SEVERITY_LABELS[line.severity]}:** {_bullet(line.text)}"
	    for line in decision.log_plan
	    if line.severity in _SEVERITY_LABELS and line.text.strip()
	]
	if not items:
		return ""
	return "\n### Findings\n\n" + "\n".join(items) + "\n"


def render_summary_md(decision: Decision, policy: PolicyConfig) -> str:
	"""
	Render a Markdown job summary.

	Parameters:
		decision: Decision produced by the engine.
		policy: Policy of the run, for the subject reference.

	Returns:
		Rendered Markdown string.
	"""
	out = decision.outputs
	outcome = decision.outcome
	data = {
	    "agent_card": _cell(policy.agent_card),
	    "result": _cell(out.get(OUTPUT_RESULT)),
	    "error_count": _cell(out.get(OUTPUT_ERROR_COUNT)),
	    "warning_count": _cell(out.get(OUTPUT_WARNING_COUNT)),
	    "compliance_score": _cell(out.get(OUTPUT_COMPLIANCE_SCORE)),
	    "trust_score": _cell(out.get(OUTPUT_TRUST_SCORE)),
	    "availability_score": _cell(out.get(OUTPUT_AVAILABILITY_SCORE)),
	    "production_ready": _cell(out.get(OUTPUT_PRODUCTION_READY)),
	    "outcome": ("✅ success" if outcome.success else
	                f"❌ {outcome.message or 'failure'}"),
	    "findings": _findings_md(decision),
	}
	return SUMMARY_TEMPLATE.safe_substitute(**data)


__all__ = ["render_summary_md", "SUMMARY_TEMPLATE"]
