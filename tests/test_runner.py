"""Tests for process orchestration in the runner."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agent_card_action.core.runner import (
    ValidatorError,
    install_validator,
    run_action,
    run_process,
    run_validator,
)
from agent_card_action.models.config import Config
from agent_card_action.models.policy import PolicyConfig


def _proc(returncode: int, stdout: bytes = b"", stderr: bytes = b""):
	proc = AsyncMock()
	proc.returncode = returncode
	proc.communicate = AsyncMock(return_value=(stdout, stderr))
	proc.kill = MagicMock()
	return proc


class RecordingHost:
	"""Host double that records every call."""

	def __init__(self):
		self.outputs: dict[str, str] = {}
		self.lines: list[tuple[str, str]] = []
		self.summaries: list[str] = []
		self.failures: list[str] = []

	def get_input(self, name: str) -> str:
		return ""

	def set_output(self, name: str, value: str) -> None:
		self.outputs[name] = value

	def log(self, severity, text: str) -> None:
		self.lines.append((severity, text))

	def set_failed(self, message: str) -> None:
		self.failures.append(message)

	def write_summary(self, markdown: str) -> None:
		self.summaries.append(markdown)


@pytest.fixture
def config(monkeypatch):
	for name in ("VALIDATOR_COMMAND", "INSTALL_COMMAND", "SKIP_INSTALL",
	             "SUPERVISOR_TIMEOUT_SECONDS"):
		monkeypatch.delenv(name, raising=False)
	return Config()


class TestRunProcess:
	"""Tests for the run_process helper."""

	@pytest.mark.asyncio
	async def test_captures_output_and_nonzero_exit(self):
		proc = _proc(1, b'{"valid": false}', b"warn")
		with patch("asyncio.create_subprocess_exec",
		           return_value=proc) as spawn:
			result = await run_process(["capiscio", "validate", "x"])
		assert spawn.call_args.args == ("capiscio", "validate", "x")
		assert result.exit_code == 1
		assert result.stdout == '{"valid": false}'
		assert result.stderr == "warn"

	@pytest.mark.asyncio
	async def test_spawn_failure_raises_validator_error(self):
		with patch("asyncio.create_subprocess_exec",
		           side_effect=FileNotFoundError("no such file")):
			with pytest.raises(ValidatorError) as exc_info:
				await run_process(["capiscio"])
		assert "Unable to run capiscio" in str(exc_info.value)

	@pytest.mark.asyncio
	async def test_timeout_kills_process(self):

		async def hang():
			await asyncio.sleep(10)

		proc = _proc(None)
		proc.communicate = hang
		proc.wait = AsyncMock(return_value=-9)
		with patch("asyncio.create_subprocess_exec", return_value=proc):
			with pytest.raises(ValidatorError) as exc_info:
				await run_process(["capiscio"], timeout=0.01)
		proc.kill.assert_called_once()
		assert "did not finish" in str(exc_info.value)

	@pytest.mark.asyncio
	async def test_timeout_after_process_exited(self):
		"""A process that is already gone still yields a ValidatorError."""

		async def hang():
			await asyncio.sleep(10)

		proc = _proc(None)
		proc.communicate = hang
		proc.kill = MagicMock(side_effect=ProcessLookupError())
		proc.wait = AsyncMock(return_value=0)
		with patch("asyncio.create_subprocess_exec", return_value=proc):
			with pytest.raises(ValidatorError):
				await run_process(["capiscio"], timeout=0.01)
		proc.kill.assert_called_once()


class TestInstallValidator:
	"""Tests for install_validator."""

	@pytest.mark.asyncio
	async def test_runs_install_command(self, config):
		proc = _proc(0)
		with patch("asyncio.create_subprocess_exec",
		           return_value=proc) as spawn:
			await install_validator(config)
		assert spawn.call_args.args == ("npm", "install", "-g",
		                                "capiscio-cli@2.0.0")

	@pytest.mark.asyncio
	async def test_install_failure_raises(self, config):
		proc = _proc(1, b"", b"E404 not found")
		with patch("asyncio.create_subprocess_exec", return_value=proc):
			with pytest.raises(ValidatorError) as exc_info:
				await install_validator(config)
		assert "exit code 1" in str(exc_info.value)
		assert "E404" in str(exc_info.value)

	@pytest.mark.asyncio
	async def test_skip_install(self, config):
		config.skip_install = True
		with patch("asyncio.create_subprocess_exec") as spawn:
			await install_validator(config)
		spawn.assert_not_called()


@pytest.mark.asyncio
async def test_run_validator_builds_arguments(config):
	proc = _proc(0, b"{}")
	policy = PolicyConfig(agent_card="card.json", strict=True, timeout="500")
	with patch("asyncio.create_subprocess_exec", return_value=proc) as spawn:
		await run_validator(policy, config)
	assert spawn.call_args.args == ("capiscio", "validate", "card.json",
	                                "--json", "--strict", "--timeout", "500")


class TestRunAction:
	"""End-to-end orchestration with a fake process and host."""

	@pytest.mark.asyncio
	async def test_success_publishes_everything(self, config):
		payload = {"success": True, "errors": [], "warnings": []}
		procs = [_proc(0), _proc(0, json.dumps(payload).encode())]
		host = RecordingHost()
		with patch("asyncio.create_subprocess_exec", side_effect=procs):
			outcome = await run_action(config, PolicyConfig(), host)
		assert outcome.success is True
		assert host.outputs["result"] == "passed"
		assert host.outputs["compliance-score"] == "N/A"
		assert host.failures == []
		assert len(host.summaries) == 1
		texts = [t for _, t in host.lines]
		assert texts[0] == "🚀 Validating A2A agent card: ./agent-card.json"
		assert texts[1].startswith("📦 Installing validator")
		assert texts[2] == ("🔍 Running: capiscio validate ./agent-card.json "
		                    "--json")
		assert sum(t.startswith("🚀") for t in texts) == 1

	@pytest.mark.asyncio
	async def test_policy_failure_reported(self, config):
		payload = {"valid": True, "warnings": [{"message": "w"}]}
		procs = [_proc(0), _proc(0, json.dumps(payload).encode())]
		host = RecordingHost()
		with patch("asyncio.create_subprocess_exec", side_effect=procs):
			outcome = await run_action(config,
			                           PolicyConfig(fail_on_warnings=True),
			                           host)
		assert outcome.success is False
		assert outcome.reason == "policy"
		assert host.failures == [outcome.message]

	@pytest.mark.asyncio
	async def test_install_failure_is_infrastructure_failure(self, config):
		host = RecordingHost()
		with patch("asyncio.create_subprocess_exec",
		           return_value=_proc(243, b"", b"EACCES")) as spawn:
			outcome = await run_action(config, PolicyConfig(), host)
		assert spawn.call_count == 1
		assert outcome.reason == "infrastructure"
		assert "installation failed" in host.failures[0]
		banners = [t for _, t in host.lines if t.startswith("🚀")]
		assert len(banners) == 1
		assert host.lines[0][1] == banners[0]
		assert host.outputs == {}

	@pytest.mark.asyncio
	async def test_missing_validator_is_infrastructure_failure(self, config):
		config.skip_install = True
		host = RecordingHost()
		with patch("asyncio.create_subprocess_exec",
		           side_effect=FileNotFoundError("capiscio")):
			outcome = await run_action(config, PolicyConfig(), host)
		assert outcome.success is False
		assert outcome.reason == "infrastructure"
		assert host.failures[0].startswith("Unable to run capiscio")

	@pytest.mark.asyncio
	async def test_malformed_output_reported(self, config):
		config.skip_install = True
		host = RecordingHost()
		with patch("asyncio.create_subprocess_exec",
		           return_value=_proc(3, b"Segmentation fault", b"core")):
			outcome = await run_action(config, PolicyConfig(), host)
		assert outcome.reason == "malformed"
		assert host.failures == [
		    "Failed to parse validation output "
		    "(validator exited with code 3)"
		]
		assert ("error", "stdout: Segmentation fault") in host.lines
