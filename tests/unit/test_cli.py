"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from raw_proxy import cli as cli_module
from raw_proxy.config.settings import get_settings


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    monkeypatch.setattr(cli_module, "configure_logging", lambda **kwargs: None)
    monkeypatch.setenv("BACKEND", "github")
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


@pytest.mark.unit
class TestCli:
    """Tests for the click commands."""

    def test_url_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_module.cli, ["url", "/octocat/Hello-World/raw/main/README.md"])

        assert result.exit_code == 0
        assert result.output.strip() == (
            "https://raw.githubusercontent.com/octocat/hello-world/main/README.md"
        )

    def test_url_command_invalid_path(self, runner: CliRunner) -> None:
        result = runner.invoke(cli_module.cli, ["url", "/octocat"])

        assert result.exit_code == 1
        assert "Invalid path" in result.output
