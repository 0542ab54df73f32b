import pytest

from agent_card_action.models.config import Config, load_env


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for name in ("VALIDATOR_COMMAND", "INSTALL_COMMAND", "SKIP_INSTALL",
	             "SUPERVISOR_TIMEOUT_SECONDS", "LOG_LEVEL", "GITHUB_ACTIONS",
	             "GITHUB_OUTPUT", "GITHUB_STEP_SUMMARY"):
		monkeypatch.delenv(name, raising=False)


def test_defaults():
	cfg = Config()
	assert cfg.validator_command == "capiscio"
	assert cfg.install_argv == ["npm", "install", "-g", "capiscio-cli@2.0.0"]
	assert cfg.skip_install is False
	assert cfg.supervisor_timeout_seconds is None
	assert cfg.github_actions is False


def test_env_overrides(monkeypatch):
	monkeypatch.setenv("VALIDATOR_COMMAND", "/opt/bin/capiscio")
	monkeypatch.setenv("SKIP_INSTALL", "true")
	monkeypatch.setenv("GITHUB_ACTIONS", "true")
	cfg = Config()
	assert cfg.validator_command == "/opt/bin/capiscio"
	assert cfg.skip_install is True
	assert cfg.github_actions is True


def test_install_command_split():
	cfg = Config(INSTALL_COMMAND="pipx run 'capiscio cli' --version")
	assert cfg.install_argv == ["pipx", "run", "capiscio cli", "--version"]


def test_install_command_rejects_empty():
	with pytest.raises(ValueError):
		Config(INSTALL_COMMAND="   ")


def test_supervisor_timeout_empty_is_unset():
	assert Config(SUPERVISOR_TIMEOUT_SECONDS="").supervisor_timeout_seconds is None


def test_supervisor_timeout_rejects_zero():
	with pytest.raises(ValueError):
		Config(SUPERVISOR_TIMEOUT_SECONDS=0)


def test_supervisor_timeout_custom():
	assert Config(SUPERVISOR_TIMEOUT_SECONDS=120).supervisor_timeout_seconds == 120


def test_load_env_reads_file(tmp_path, monkeypatch):
	env_file = tmp_path / ".env"
	# register the variable so monkeypatch removes it again on teardown
	monkeypatch.setenv("VALIDATOR_COMMAND", "placeholder")
	monkeypatch.delenv("VALIDATOR_COMMAND")
	env_file.write_text("VALIDATOR_COMMAND=from-dotenv\n")
	load_env(env_file)
	assert Config().validator_command == "from-dotenv"


def test_load_env_missing_file_is_noop(tmp_path):
	load_env(tmp_path / "missing.env")
