"""
Raw process result model.

Holds what the validator subprocess produced once it has exited.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawProcessResult(BaseModel):
	"""Captured exit code and output streams of one validator run."""

	model_config = ConfigDict(frozen=True)

	exit_code: int = Field(description="Process exit code")
	stdout: str = Field("", description="Captured standard output")
	stderr: str = Field("", description="Captured standard error")


__all__ = ["RawProcessResult"]
