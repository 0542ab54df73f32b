from __future__ import annotations

import asyncio
import sys
from typing import Optional

import typer
from pydantic import ValidationError
from typer.main import get_command

from agent_card_action.models.config import Config, load_env
from agent_card_action.models.policy import PolicyConfig
from agent_card_action.models.run_params import RunParams
from agent_card_action.core.runner import run_action
from agent_card_action.hosts import select_host
from agent_card_action.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

cli = typer.Typer(add_completion=False)


@cli.callback()
def root() -> None:
	"""
	Validate an A2A agent card and gate the CI job on the result.
	"""
	return None


def run_impl(
    agent_card: str | None = None,
    strict: bool | None = None,
    test_live: bool | None = None,
    skip_signature: bool | None = None,
    timeout: str | None = None,
    fail_on_warnings: bool | None = None,
) -> int:
	"""
	Run the action once and return the process exit code.

	Inputs come from the host (``INPUT_*`` variables on a runner);
	any argument that is not None overrides the matching input.

	Parameters:
		agent_card: Agent card path or URL.
		strict: Forward --strict to the validator.
		test_live: Forward --test-live to the validator.
		skip_signature: Forward --skip-signature to the validator.
		timeout: Validator timeout in milliseconds.
		fail_on_warnings: Fail the job when warnings are reported.

	Returns:
		0 when the job succeeded, 1 otherwise.
	"""
	load_env()
	try:
		config = Config()
	except ValidationError as exc:
		typer.echo(f"Invalid configuration: {exc}", err=True)
		return 1
	configure_logging(config.log_level)
	host = select_host(config)

	try:
		params = RunParams(
		    agent_card=agent_card,
		    strict=strict,
		    test_live=test_live,
		    skip_signature=skip_signature,
		    timeout=timeout,
		    fail_on_warnings=fail_on_warnings,
		)
		policy = PolicyConfig.from_host(host).with_overrides(params)
	except ValueError as exc:
		host.set_failed(str(exc))
		return 1

	try:
		outcome = asyncio.run(run_action(config, policy, host))
	except Exception as exc:  # noqa: BLE001
		logger.exception("action run failed")
		host.set_failed(str(exc) or "An unknown error occurred")
		return 1
	return 0 if outcome.success else 1


@cli.command()
def run(
    agent_card: Optional[str] = typer.Option(
        None, "--agent-card", help="Agent card path or URL"),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Enable strict validation"),
    test_live: Optional[bool] = typer.Option(
        None, "--test-live/--no-test-live",
        help="Probe the live agent endpoint"),
    skip_signature: Optional[bool] = typer.Option(
        None, "--skip-signature/--no-skip-signature",
        help="Skip JWS signature verification"),
    timeout: Optional[str] = typer.Option(
        None, "--timeout", help="Validator request timeout in ms"),
    fail_on_warnings: Optional[bool] = typer.Option(
        None, "--fail-on-warnings/--no-fail-on-warnings",
        help="Fail the job when warnings are found"),
) -> None:
	"""
	Validate an agent card and set outputs and job status.
	"""
	code = run_impl(agent_card, strict, test_live, skip_signature, timeout,
	                fail_on_warnings)
	raise typer.Exit(code)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run`.

	The action is invoked without arguments on a runner, so anything
	other than an explicit command or root help is routed to `run`.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args or (args[0] not in commands
	                and args[0] not in ("--help", "-h")):
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="agent-card-action",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
