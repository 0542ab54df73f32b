"""
Run parameters model.

Defines CLI overrides for the policy inputs. Every field is optional;
None keeps whatever the host configuration supplied.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class RunParams(BaseModel):
	"""Validated CLI overrides for a single action run."""

	agent_card: Optional[str] = Field(default=None,
	                                  description="Agent card path or URL")
	strict: Optional[bool] = Field(default=None, description="Strict mode")
	test_live: Optional[bool] = Field(default=None,
	                                  description="Probe the live endpoint")
	skip_signature: Optional[bool] = Field(
	    default=None, description="Skip signature verification")
	timeout: Optional[str] = Field(default=None,
	                               description="Validator timeout in ms")
	fail_on_warnings: Optional[bool] = Field(
	    default=None, description="Fail the job when warnings are found")

	@field_validator('agent_card')
	@classmethod
	def validate_agent_card(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if not v.strip():
			raise ValueError("agent_card must not be blank")
		return v.strip()

	@field_validator('timeout')
	@classmethod
	def validate_timeout(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		v = v.strip()
		if v and not v.isdigit():
			raise ValueError("timeout must be a whole number of milliseconds")
		return v


__all__ = ["RunParams"]
