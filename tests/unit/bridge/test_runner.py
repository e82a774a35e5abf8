"""Unit tests for the adb command runner."""

import subprocess
from unittest.mock import patch

import pytest
from debloatctl.bridge.errors import CommandFailedError, SpawnFailedError
from debloatctl.bridge.runner import AdbRunner
from debloatctl.utils.shell import CommandResult


class TestAdbRunner:
    """Tests for AdbRunner class."""

    @pytest.fixture
    def runner(self) -> AdbRunner:
        """Create AdbRunner instance."""
        return AdbRunner(executable="adb", timeout=5.0)

    def test_run_returns_stdout(self, runner: AdbRunner) -> None:
        """run() returns stdout on success."""
        with patch("debloatctl.bridge.runner.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="ok\n", stderr="", returncode=0)

            assert runner.run(["devices"]) == "ok\n"

        mock_run.assert_called_once_with(["adb", "devices"], timeout=5.0)

    def test_run_raises_command_failed(self, runner: AdbRunner) -> None:
        """run() raises CommandFailedError carrying stderr on non-zero exit."""
        with patch("debloatctl.bridge.runner.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="", stderr="Failure [DELETE_FAILED_INTERNAL_ERROR]", returncode=1
            )

            with pytest.raises(CommandFailedError) as exc_info:
                runner.run(["shell", "pm", "uninstall", "--user", "0", "com.android.phone"])

        assert exc_info.value.stderr == "Failure [DELETE_FAILED_INTERNAL_ERROR]"
        assert exc_info.value.returncode == 1

    def test_invoke_does_not_raise_on_failure(self, runner: AdbRunner) -> None:
        """invoke() returns the failed result without raising."""
        with patch("debloatctl.bridge.runner.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="", stderr="boom", returncode=2)

            result = runner.invoke(["connect", "10.0.0.1:5555"])

        assert result.success is False
        assert result.returncode == 2

    def test_missing_executable_raises_spawn_failed(self, runner: AdbRunner) -> None:
        """A missing executable maps to SpawnFailedError."""
        with (
            patch(
                "debloatctl.bridge.runner.run_command",
                side_effect=FileNotFoundError(2, "No such file"),
            ),
            pytest.raises(SpawnFailedError, match="adb not found"),
        ):
            runner.run(["devices"])

    def test_timeout_raises_spawn_failed(self, runner: AdbRunner) -> None:
        """A timeout maps to SpawnFailedError."""
        error = subprocess.TimeoutExpired(cmd=["adb", "devices"], timeout=5.0)
        with (
            patch("debloatctl.bridge.runner.run_command", side_effect=error),
            pytest.raises(SpawnFailedError, match="timed out"),
        ):
            runner.run(["devices"])

    def test_permission_error_raises_spawn_failed(self, runner: AdbRunner) -> None:
        """Other OS errors map to SpawnFailedError."""
        with (
            patch("debloatctl.bridge.runner.run_command", side_effect=PermissionError("denied")),
            pytest.raises(SpawnFailedError, match="denied"),
        ):
            runner.run(["devices"])

    def test_is_available_true(self, runner: AdbRunner) -> None:
        """is_available() is True when `adb version` succeeds."""
        with patch("debloatctl.bridge.runner.run_command") as mock_run:
            mock_run.return_value = CommandResult(
                stdout="Android Debug Bridge", stderr="", returncode=0
            )

            assert runner.is_available() is True

        mock_run.assert_called_once_with(["adb", "version"], timeout=5.0)

    def test_is_available_false_when_missing(self, runner: AdbRunner) -> None:
        """is_available() is False when adb cannot be spawned."""
        with patch("debloatctl.bridge.runner.run_command", side_effect=FileNotFoundError()):
            assert runner.is_available() is False

    def test_custom_executable(self) -> None:
        """The configured executable is used."""
        runner = AdbRunner(executable="/opt/platform-tools/adb")
        with patch("debloatctl.bridge.runner.run_command") as mock_run:
            mock_run.return_value = CommandResult(stdout="", stderr="", returncode=0)
            runner.run(["devices"])

        assert mock_run.call_args[0][0][0] == "/opt/platform-tools/adb"
