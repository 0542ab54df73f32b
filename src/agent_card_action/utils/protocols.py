"""
Protocol definitions for dependency injection.

Defines the capability interface of the CI host so the action can
run against GitHub Actions, a local console, or a test double.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
	from agent_card_action.models.decision import Severity


class HostProtocol(Protocol):
	"""
	Protocol for the CI host interface.

	Covers reading configuration values, publishing outputs,
	writing log lines, and reporting job failure.
	"""

	def get_input(self, name: str) -> str:
		"""Return the raw configuration value, or '' when unset."""
		...

	def set_output(self, name: str, value: str) -> None:
		"""Publish a named output for downstream steps."""
		...

	def log(self, severity: Severity, text: str) -> None:
		"""Write a log line at the given severity."""
		...

	def set_failed(self, message: str) -> None:
		"""Mark the job as failed with a status message."""
		...

	def write_summary(self, markdown: str) -> None:
		"""Append markdown to the job summary, if supported."""
		...


__all__ = ["HostProtocol"]
