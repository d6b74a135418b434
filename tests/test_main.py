"""Tests for CLI argument handling in main.py."""
import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from emuclip.bridge_config import BridgeConfig
from emuclip.main import main
from emuclip.main_logging import configure_logging


class TestCLIArguments:
    """Tests for command-line argument validation."""

    def test_cid_and_tcp_host_exits_with_code_2(self):
        """Test that both --cid and --tcp-host gives usage error."""
        runner = CliRunner()
        result = runner.invoke(main, ["--cid", "3", "--tcp-host", "localhost"])
        assert result.exit_code == 2
        assert "mutually exclusive" in result.output
        assert "--tcp-host" in result.output

    def test_non_ascii_service_exits_with_code_2(self):
        """Test that a service name the handshake cannot carry is rejected."""
        runner = CliRunner()
        result = runner.invoke(main, ["--service", "pipe:clipböard"])
        assert result.exit_code == 2
        assert "ASCII" in result.output

    def test_negative_max_frame_size_exits_with_code_2(self):
        """Test that a negative frame limit is rejected."""
        runner = CliRunner()
        result = runner.invoke(main, ["--max-frame-size", "-1"])
        assert result.exit_code == 2

    def test_help_exits_with_code_0(self):
        """Test that --help exits cleanly with code 0."""
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "--tcp-host" in result.output
        assert "--stdin" in result.output


class TestCLIConfig:
    """Tests for the BridgeConfig built from options."""

    def test_defaults_use_vsock_host(self):
        """Test that no options selects the vsock host on port 5000."""
        runner = CliRunner()
        with patch("emuclip.main._run_daemon") as mock_run, patch(
            "emuclip.main.configure_logging"
        ):
            result = runner.invoke(main, [])
        assert result.exit_code == 0
        mock_run.assert_called_once_with(BridgeConfig(), False)

    def test_options_reach_config(self):
        """Test every option is carried into the config."""
        runner = CliRunner()
        with patch("emuclip.main._run_daemon") as mock_run, patch(
            "emuclip.main.configure_logging"
        ) as mock_logging:
            result = runner.invoke(
                main,
                [
                    "--tcp-host", "10.0.2.2",
                    "--port", "5555",
                    "--service", "pipe:other",
                    "--stdin",
                    "--log-clipboard-access",
                    "--max-frame-size", "1024",
                    "--verbose",
                ],
            )
        assert result.exit_code == 0
        config, read_stdin = mock_run.call_args.args
        assert config == BridgeConfig(
            service_name="pipe:other",
            port=5555,
            tcp_host="10.0.2.2",
            log_clipboard_access=True,
            max_frame_size=1024,
        )
        assert read_stdin is True
        mock_logging.assert_called_once_with(True, True)

    def test_cid_option(self):
        """Test --cid overrides the host context ID."""
        runner = CliRunner()
        with patch("emuclip.main._run_daemon") as mock_run, patch(
            "emuclip.main.configure_logging"
        ):
            result = runner.invoke(main, ["--cid", "3"])
        assert result.exit_code == 0
        assert mock_run.call_args.args[0].cid == 3


@pytest.mark.parametrize(
    ("verbose", "log_access", "expected"),
    [
        (False, False, logging.WARNING),
        (False, True, logging.INFO),
        (True, False, logging.DEBUG),
    ],
)
def test_configure_logging_level(verbose, log_access, expected):
    """Test the root log level chosen for each flag combination."""
    with patch("logging.basicConfig") as mock_basic:
        configure_logging(verbose, log_access)
    assert mock_basic.call_args.kwargs["level"] == expected
