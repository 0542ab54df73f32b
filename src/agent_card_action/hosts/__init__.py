"""CI host implementations.

Key modules:
    - github: GitHub Actions runner host
    - console: Rich console host for local runs
"""

from __future__ import annotations

from agent_card_action.models.config import Config
from agent_card_action.utils.protocols import HostProtocol

from .github import GitHubActionsHost
from .console import ConsoleHost


def select_host(config: Config) -> HostProtocol:
	"""Return the GitHub host on an Actions runner, else the console host."""
	if config.github_actions:
		return GitHubActionsHost(
		    output_file=config.github_output,
		    summary_file=config.github_step_summary,
		)
	return ConsoleHost()


__all__ = ["GitHubActionsHost", "ConsoleHost", "select_host"]
