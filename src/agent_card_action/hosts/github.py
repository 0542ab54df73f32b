"""
GitHub Actions host.

Implements the host capability interface using the runner's
environment: ``INPUT_*`` variables for inputs, the ``GITHUB_OUTPUT``
and ``GITHUB_STEP_SUMMARY`` files, and workflow commands on stdout
for annotations.
"""

from __future__ import annotations

import os
import sys
import uuid
from pathlib import Path
from typing import Mapping, TextIO

from agent_card_action.models.decision import Severity
from agent_card_action.utils.logging import get_logger, mask_credentials

logger = get_logger(__name__)


def input_env_name(name: str) -> str:
	"""Return the environment variable the runner uses for an input."""
	return f"INPUT_{name.replace(' ', '_').upper()}"


def escape_data(text: str) -> str:
	"""Escape a workflow command message."""
	return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(text: str) -> str:
	"""Escape a workflow command property value."""
	return (escape_data(text).replace(":", "%3A").replace(",", "%2C"))


def format_file_command(name: str, value: str,
                        delimiter: str | None = None) -> str:
	"""
	Format a ``name<<DELIM`` block for the GITHUB_OUTPUT file.

	Raises:
		ValueError: If the delimiter occurs in the name or value.
	"""
	delimiter = delimiter or f"ghadelimiter_{uuid.uuid4()}"
	if delimiter in name or delimiter in value:
		raise ValueError(
		    f"Unexpected input: name or value contains delimiter {delimiter}")
	return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


class GitHubActionsHost:
	"""Host backed by the GitHub Actions runner environment."""

	def __init__(
	    self,
	    env: Mapping[str, str] | None = None,
	    stream: TextIO | None = None,
	    output_file: str | None = None,
	    summary_file: str | None = None,
	):
		self._env = os.environ if env is None else env
		self._stream = stream or sys.stdout
		self._output_file = output_file or self._env.get("GITHUB_OUTPUT")
		self._summary_file = (summary_file
		                      or self._env.get("GITHUB_STEP_SUMMARY"))
		self.failed = False

	def _write(self, line: str) -> None:
		self._stream.write(line + "\n")
		self._stream.flush()

	def _command(self, command: str, message: str) -> None:
		self._write(f"::{command}::{escape_data(message)}")

	def get_input(self, name: str) -> str:
		return self._env.get(input_env_name(name), "").strip()

	def set_output(self, name: str, value: str) -> None:
		if self._output_file:
			with Path(self._output_file).open("a", encoding="utf-8") as fh:
				fh.write(format_file_command(name, value))
			return
		# Legacy runners without output files.
		self._write(f"::set-output name={escape_property(name)}::"
		            f"{escape_data(value)}")

	def log(self, severity: Severity, text: str) -> None:
		text = mask_credentials(text)
		if severity == "info":
			self._write(text)
		else:
			self._command(severity, text)

	def set_failed(self, message: str) -> None:
		self.failed = True
		self._command("error", mask_credentials(message))

	def write_summary(self, markdown: str) -> None:
		if not self._summary_file:
			logger.debug("GITHUB_STEP_SUMMARY not set; skipping job summary")
			return
		with Path(self._summary_file).open("a", encoding="utf-8") as fh:
			fh.write(mask_credentials(markdown))


__all__ = [
    "GitHubActionsHost",
    "input_env_name",
    "escape_data",
    "escape_property",
    "format_file_command",
]
