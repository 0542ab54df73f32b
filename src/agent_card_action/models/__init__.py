"""
Agent card action models.

This subpackage contains Pydantic models for configuration, the run
policy, the validator's result, and the engine's decision.

Key models:
    - Config: Runtime configuration loaded from environment
    - PolicyConfig: Immutable per-run policy built from action inputs
    - RunParams: CLI overrides for the policy
    - RawProcessResult: Captured validator exit code and output
    - ValidationResult: Normalized validator verdict
    - Decision: Outputs, log plan, and job outcome
"""

from .config import Config, load_env
from .run_params import RunParams
from .policy import (
    PolicyConfig,
    InputError,
    parse_bool_input,
    DEFAULT_AGENT_CARD,
)
from .process_result import RawProcessResult
from .validation_result import (
    Finding,
    ScoreDimension,
    ScoringResult,
    ValidationResult,
)
from .decision import Decision, JobOutcome, LogLine, Severity

__all__ = [
    "Config",
    "load_env",
    "RunParams",
    "PolicyConfig",
    "InputError",
    "parse_bool_input",
    "DEFAULT_AGENT_CARD",
    "RawProcessResult",
    "Finding",
    "ScoreDimension",
    "ScoringResult",
    "ValidationResult",
    "Decision",
    "JobOutcome",
    "LogLine",
    "Severity",
]
