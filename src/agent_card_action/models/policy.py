"""
Policy configuration model.

PolicyConfig is built once per run from the host's configuration
surface and is read-only afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

from .run_params import RunParams

if TYPE_CHECKING:
	from agent_card_action.utils.protocols import HostProtocol

DEFAULT_AGENT_CARD = "./agent-card.json"

# Accepted spellings for boolean inputs (YAML 1.2 core schema).
TRUE_VALUES = frozenset({"true", "True", "TRUE"})
FALSE_VALUES = frozenset({"false", "False", "FALSE"})


class InputError(ValueError):
	"""A configuration input is present but unusable."""

	def __init__(self, name: str, value: str):
		super().__init__(
		    f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}\n"
		    "Support boolean input list: "
		    "`true | True | TRUE | false | False | FALSE`")
		self.name = name
		self.value = value


def parse_bool_input(name: str, raw: str, default: bool = False) -> bool:
	"""
	Interpret a boolean configuration input.

	Parameters:
		name: Input name, used in the error message.
		raw: Raw input value; empty means unset.
		default: Value used when the input is unset.

	Returns:
		The parsed boolean.

	Raises:
		InputError: If the value is not an accepted spelling.
	"""
	value = raw.strip()
	if not value:
		return default
	if value in TRUE_VALUES:
		return True
	if value in FALSE_VALUES:
		return False
	raise InputError(name, raw)


class PolicyConfig(BaseModel):
	"""Immutable run policy: what to validate and how to judge it."""

	model_config = ConfigDict(frozen=True)

	agent_card: str = Field(DEFAULT_AGENT_CARD,
	                        description="Agent card path or URL")
	strict: bool = Field(False, description="Forward --strict")
	test_live: bool = Field(False, description="Forward --test-live")
	skip_signature: bool = Field(False,
	                             description="Forward --skip-signature")
	timeout: Optional[str] = Field(
	    default=None,
	    description="Forwarded verbatim as --timeout; None uses tool default")
	fail_on_warnings: bool = Field(
	    False, description="Treat warnings as a job failure")

	@classmethod
	def from_host(cls, host: "HostProtocol") -> "PolicyConfig":
		"""Read every policy input from the host configuration surface."""
		return cls(
		    agent_card=host.get_input("agent-card").strip()
		    or DEFAULT_AGENT_CARD,
		    strict=parse_bool_input("strict", host.get_input("strict")),
		    test_live=parse_bool_input("test-live",
		                               host.get_input("test-live")),
		    skip_signature=parse_bool_input("skip-signature",
		                                    host.get_input("skip-signature")),
		    timeout=host.get_input("timeout").strip() or None,
		    fail_on_warnings=parse_bool_input(
		        "fail-on-warnings", host.get_input("fail-on-warnings")),
		)

	def with_overrides(self, params: RunParams) -> "PolicyConfig":
		"""Return a copy with every non-None field of params applied."""
		update = params.model_dump(exclude_none=True)
		if update.get("timeout") == "":
			update["timeout"] = None
		return self.model_copy(update=update)

	def validator_args(self) -> list[str]:
		"""Build the validator argument list (without the executable)."""
		args = ["validate", self.agent_card, "--json"]
		if self.strict:
			args.append("--strict")
		if self.test_live:
			args.append("--test-live")
		if self.skip_signature:
			args.append("--skip-signature")
		if self.timeout:
			args.extend(["--timeout", self.timeout])
		return args


__all__ = [
    "PolicyConfig",
    "InputError",
    "parse_bool_input",
    "DEFAULT_AGENT_CARD",
]
