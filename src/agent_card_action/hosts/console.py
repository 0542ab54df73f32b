"""
Console host for local runs.

Reads inputs from the same ``INPUT_*`` variables the runner would set
and renders everything with Rich.
"""

from __future__ import annotations

import os
from typing import Mapping

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from agent_card_action.hosts.github import input_env_name
from agent_card_action.models.decision import Severity
from agent_card_action.utils.logging import mask_credentials

_STYLES: dict[str, str] = {
    "info": "",
    "warning": "yellow",
    "error": "red",
}


class ConsoleHost:
	"""Host that prints to a terminal and collects outputs in memory."""

	def __init__(
	    self,
	    env: Mapping[str, str] | None = None,
	    console: Console | None = None,
	):
		self._env = os.environ if env is None else env
		self.console = console or Console()
		self.outputs: dict[str, str] = {}
		self.failure_message: str | None = None

	def get_input(self, name: str) -> str:
		return self._env.get(input_env_name(name), "").strip()

	def set_output(self, name: str, value: str) -> None:
		self.outputs[name] = value

	def log(self, severity: Severity, text: str) -> None:
		self.console.print(Text(mask_credentials(text),
		                        style=_STYLES.get(severity, "")))

	def set_failed(self, message: str) -> None:
		self.failure_message = message
		self.console.print(
		    Text(f"Job failed: {mask_credentials(message)}", style="bold red"))

	def outputs_table(self) -> Table:
		"""Render the collected outputs as a name/value table."""
		table = Table(title="Outputs", show_header=True)
		table.add_column("name", style="cyan")
		table.add_column("value")
		for name, value in self.outputs.items():
			table.add_row(name, value)
		return table

	def write_summary(self, markdown: str) -> None:
		self.console.rule("Summary")
		self.console.print(Markdown(mask_credentials(markdown)))
		if self.outputs:
			self.console.print(self.outputs_table())


__all__ = ["ConsoleHost"]
