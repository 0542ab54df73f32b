"""
Agent Card Action - CI gate for A2A agent card validation.

Runs an external agent-card validator, interprets its JSON result,
and turns it into CI outputs, log lines, and a pass/fail job status.

Main entry points:
    - agent_card_action.main: CLI entrypoint
    - agent_card_action.core.decision: interpret() decision engine
    - agent_card_action.core.runner: run_action() orchestration
    - agent_card_action.models.config: Config and load_env()
"""
