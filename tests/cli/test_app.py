# tests/cli/test_app.py
"""
Tests for cli/app.py - find-private-ip command

Tests cover:
- Help and version (exit 0 regardless of other arguments)
- Usage errors (exit 1, no AWS call)
- Option mapping into FinderConfig
- Exit code propagation from the runner
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cli.app import VERSION, find_private_ip, main

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_runner():
    """FinderRunner mock (AWS 호출 차단)"""
    with patch("cli.app.FinderRunner") as mock_cls:
        mock_cls.return_value.run.return_value = 0
        yield mock_cls


# =============================================================================
# Help / Version Tests
# =============================================================================


class TestHelpAndVersion:
    """Help and version output"""

    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, runner, mock_runner, flag):
        result = runner.invoke(find_private_ip, [flag])

        assert result.exit_code == 0
        assert "--all-regions" in result.output
        assert "--parallel" in result.output
        mock_runner.assert_not_called()

    @pytest.mark.parametrize(
        "args",
        [
            ["--help", "--bogus"],
            ["not-an-ip", "-h"],
            ["10.0.1.100", "extra", "--help"],
            ["--region", "us-east-1", "--help"],
        ],
    )
    def test_help_wins_over_bad_arguments(self, runner, mock_runner, args):
        """도움말은 다른 인자 상태와 관계없이 0으로 종료"""
        result = runner.invoke(find_private_ip, args)

        assert result.exit_code == 0
        assert "Usage:" in result.output
        mock_runner.assert_not_called()

    def test_help_after_double_dash_is_argument(self, mock_runner):
        assert main(["--", "--help"]) == 1
        mock_runner.assert_not_called()

    def test_version(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["--version"])

        assert result.exit_code == 0
        assert f"find-private-ip, version {VERSION}" in result.output
        mock_runner.assert_not_called()


# =============================================================================
# Usage Error Tests
# =============================================================================


class TestUsageErrors:
    """All usage errors exit with status 1 before any AWS call"""

    def test_missing_ip(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, [])

        assert result.exit_code == 1
        assert "Missing argument" in result.output
        mock_runner.assert_not_called()

    @pytest.mark.parametrize("ip", ["10.0.1", "10.0.1.x", "abc", "10.0.1.100.5"])
    def test_invalid_ip(self, runner, mock_runner, ip):
        result = runner.invoke(find_private_ip, [ip])

        assert result.exit_code == 1
        assert f"Invalid IP address format: {ip}" in result.output
        assert "Example: find-private-ip" in result.output
        mock_runner.assert_not_called()

    def test_non_ascii_digits(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["\u0661\u0660.0.1.100"])

        assert result.exit_code == 1
        assert "Invalid IP address format" in result.output
        mock_runner.assert_not_called()

    def test_extra_positional(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["10.0.1.100", "10.0.1.101"])

        assert result.exit_code == 1
        assert "unexpected extra argument" in result.output
        mock_runner.assert_not_called()

    def test_unknown_option(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["10.0.1.100", "--bogus"])

        assert result.exit_code == 1
        assert "No such option" in result.output
        mock_runner.assert_not_called()

    def test_invalid_lang(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["10.0.1.100", "--lang", "fr"])

        assert result.exit_code == 1
        mock_runner.assert_not_called()

    def test_main_returns_usage_exit_code(self, mock_runner, capsys):
        assert main(["not-an-ip"]) == 1
        assert "Invalid IP address format" in capsys.readouterr().err
        mock_runner.assert_not_called()


# =============================================================================
# Option Mapping Tests
# =============================================================================


class TestOptionMapping:
    """Options are mapped into FinderConfig"""

    def test_defaults(self, runner, mock_runner):
        result = runner.invoke(find_private_ip, ["10.0.1.100"], env={"AWS_PROFILE": "", "FIND_PRIVATE_IP_LANG": ""})

        assert result.exit_code == 0
        config = mock_runner.call_args.args[0]
        assert config.ip == "10.0.1.100"
        assert config.regions == []
        assert config.all_regions is False
        assert config.parallel is False
        assert config.profile is None
        assert config.lang == "en"
        assert config.quiet is False

    def test_all_options(self, runner, mock_runner):
        result = runner.invoke(
            find_private_ip,
            [
                "10.0.1.100",
                "-r",
                "us-east-1",
                "--region",
                "eu-west-1",
                "--all-regions",
                "--parallel",
                "--profile",
                "prod",
                "--lang",
                "ko",
                "--quiet",
            ],
        )

        assert result.exit_code == 0
        config = mock_runner.call_args.args[0]
        assert config.regions == ["us-east-1", "eu-west-1"]
        assert config.all_regions is True
        assert config.parallel is True
        assert config.profile == "prod"
        assert config.lang == "ko"
        assert config.quiet is True

    def test_env_settings(self, runner, mock_runner):
        runner.invoke(
            find_private_ip,
            ["10.0.1.100"],
            env={"AWS_PROFILE": "dev", "FIND_PRIVATE_IP_LANG": "ko", "FIND_PRIVATE_IP_DNS_TIMEOUT": "2"},
        )

        config = mock_runner.call_args.args[0]
        assert config.profile == "dev"
        assert config.lang == "ko"
        assert config.dns_timeout == 2.0


# =============================================================================
# Exit Code Tests
# =============================================================================


class TestExitCodes:
    """Runner exit codes are returned unchanged"""

    @pytest.mark.parametrize("code", [0, 1, 130])
    def test_main_returns_runner_code(self, mock_runner, code):
        mock_runner.return_value.run.return_value = code

        assert main(["10.0.1.100"]) == code

    def test_cli_runner_exit_code(self, runner, mock_runner):
        mock_runner.return_value.run.return_value = 1

        result = runner.invoke(find_private_ip, ["10.0.1.100"])

        assert result.exit_code == 1
