from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables.

	These settings govern how the action runs the validator, not how
	its result is judged; judging is driven by PolicyConfig.
	"""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	validator_command: str = Field(
	    "capiscio",
	    alias="VALIDATOR_COMMAND",
	    description="Executable name or path of the agent-card validator",
	)
	install_command: str = Field(
	    "npm install -g capiscio-cli@2.0.0",
	    alias="INSTALL_COMMAND",
	    description="Command that provisions the validator before running it",
	)
	skip_install: bool = Field(
	    False,
	    alias="SKIP_INSTALL",
	    description="Assume the validator is already on PATH",
	)
	supervisor_timeout_seconds: int | None = Field(
	    default=None,
	    alias="SUPERVISOR_TIMEOUT_SECONDS",
	    description="Kill the validator if it runs longer than this",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level for diagnostic logging")
	github_actions: bool = Field(
	    False,
	    alias="GITHUB_ACTIONS",
	    description="Set to true by the GitHub Actions runner",
	)
	github_output: str | None = Field(
	    default=None,
	    alias="GITHUB_OUTPUT",
	    description="File that receives step outputs",
	)
	github_step_summary: str | None = Field(
	    default=None,
	    alias="GITHUB_STEP_SUMMARY",
	    description="File that receives the job summary markdown",
	)

	@field_validator("supervisor_timeout_seconds", mode="before")
	@classmethod
	def empty_as_none(cls, v: Any) -> Any:
		if v == "":
			return None
		return v

	@field_validator("supervisor_timeout_seconds")
	@classmethod
	def validate_positive(cls, v: Any, info: ValidationInfo) -> Any:
		if v is None:
			return v
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator("install_command")
	@classmethod
	def validate_install_command(cls, v: str) -> str:
		if not shlex.split(v):
			raise ValueError("install_command must not be empty")
		return v

	@property
	def install_argv(self) -> list[str]:
		"""Return the install command split into an argument list."""
		return shlex.split(self.install_command)


__all__ = ["Config", "load_env"]
