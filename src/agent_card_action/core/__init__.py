"""Core logic.

Key modules:
    - normalize: Field alias resolution for validator payloads
    - decision: Pure decision engine (interpret)
    - runner: Process orchestration and publishing
"""

from agent_card_action.core.normalize import normalize_payload, resolve_field
from agent_card_action.core.decision import interpret
from agent_card_action.core.runner import ValidatorError, run_action

__all__ = [
    "normalize_payload",
    "resolve_field",
    "interpret",
    "ValidatorError",
    "run_action",
]
