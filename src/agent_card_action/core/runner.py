"""
Orchestrator for a single action run.

Provisions the validator, runs it, hands the captured result to the
decision engine, and publishes the decision through the host.
"""

from __future__ import annotations

import asyncio
import contextlib
import shlex

from agent_card_action.core.decision import (
    banner_line,
    infrastructure_failure,
    interpret,
)
from agent_card_action.models.config import Config
from agent_card_action.models.decision import Decision, JobOutcome
from agent_card_action.models.policy import PolicyConfig
from agent_card_action.models.process_result import RawProcessResult
from agent_card_action.ui.reporting import render_summary_md
from agent_card_action.utils.logging import get_logger
from agent_card_action.utils.parsing import truncate
from agent_card_action.utils.protocols import HostProtocol

logger = get_logger(__name__)


class ValidatorError(RuntimeError):
	"""The validator could not be installed or run."""


async def run_process(argv: list[str],
                      timeout: float | None = None) -> RawProcessResult:
	"""
	Run a command to completion and capture its output.

	A nonzero exit code is returned, not raised.

	Parameters:
		argv: Executable followed by its arguments.
		timeout: Seconds to wait before killing the process; None waits
			indefinitely.

	Returns:
		The captured exit code, stdout, and stderr.

	Raises:
		ValidatorError: If the process cannot be spawned or times out.
	"""
	logger.debug("spawning %s", shlex.join(argv))
	try:
		proc = await asyncio.create_subprocess_exec(
		    *argv,
		    stdout=asyncio.subprocess.PIPE,
		    stderr=asyncio.subprocess.PIPE,
		)
	except OSError as exc:
		raise ValidatorError(f"Unable to run {argv[0]}: {exc}") from exc

	try:
		stdout, stderr = await asyncio.wait_for(proc.communicate(),
		                                        timeout=timeout)
	except asyncio.TimeoutError:
		with contextlib.suppress(ProcessLookupError):
			proc.kill()
		await proc.wait()
		raise ValidatorError(
		    f"{argv[0]} did not finish within {timeout} seconds")

	exit_code = proc.returncode if proc.returncode is not None else -1
	logger.debug("%s exited with code %d", argv[0], exit_code)
	return RawProcessResult(
	    exit_code=exit_code,
	    stdout=(stdout or b"").decode(errors="replace"),
	    stderr=(stderr or b"").decode(errors="replace"),
	)


async def install_validator(config: Config) -> None:
	"""
	Provision the validator with the configured install command.

	Raises:
		ValidatorError: If the command cannot be run or exits nonzero.
	"""
	if config.skip_install:
		logger.info("skipping validator install")
		return
	result = await run_process(config.install_argv,
	                           timeout=config.supervisor_timeout_seconds)
	if result.exit_code != 0:
		logger.warning("install stderr: %s", truncate(result.stderr, 500))
		raise ValidatorError(
		    f"Validator installation failed with exit code {result.exit_code}"
		    f": {truncate(result.stderr.strip(), 500) or 'no output'}")
	logger.info("validator installed")


async def run_validator(policy: PolicyConfig,
                        config: Config) -> RawProcessResult:
	"""Run the validator for the policy's agent card."""
	argv = [config.validator_command, *policy.validator_args()]
	result = await run_process(argv,
	                           timeout=config.supervisor_timeout_seconds)
	if result.exit_code != 0:
		logger.info("validator exited with code %d", result.exit_code)
	return result


def publish(decision: Decision,
            policy: PolicyConfig,
            host: HostProtocol,
            announced: bool = False) -> None:
	"""Write outputs, log lines, summary, and failure through the host.

	When ``announced`` is set the banner was already logged and its
	copy at the head of the log plan is skipped.
	"""
	for name, value in decision.outputs.items():
		host.set_output(name, value)
	lines = decision.log_plan
	if announced and lines and lines[0] == banner_line(policy):
		lines = lines[1:]
	for line in lines:
		host.log(line.severity, line.text)
	host.write_summary(render_summary_md(decision, policy))
	if not decision.outcome.success:
		host.set_failed(decision.outcome.message or "Validation failed")


async def run_action(config: Config, policy: PolicyConfig,
                     host: HostProtocol) -> JobOutcome:
	"""
	Run the whole action once.

	Parameters:
		config: Runtime configuration (validator command, install).
		policy: Run policy built from the action inputs.
		host: CI host used for logging and publishing.

	Returns:
		The job outcome; already reported through the host.
	"""
	banner = banner_line(policy)
	host.log(banner.severity, banner.text)
	try:
		if not config.skip_install:
			host.log("info",
			         f"📦 Installing validator: {config.install_command}")
		await install_validator(config)
		argv = [config.validator_command, *policy.validator_args()]
		host.log("info", f"🔍 Running: {shlex.join(argv)}")
		raw = await run_validator(policy, config)
		decision = interpret(raw, policy)
	except ValidatorError as exc:
		logger.error("validator run failed: %s", exc)
		decision = infrastructure_failure(str(exc), policy)
	publish(decision, policy, host, announced=True)
	return decision.outcome


__all__ = [
    "ValidatorError",
    "run_process",
    "install_validator",
    "run_validator",
    "publish",
    "run_action",
]
