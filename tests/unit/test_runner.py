import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from asset_build.compression.exceptions import (
    FileSystemError,
    ToolLaunchError,
    ToolTimeoutError,
)
from asset_build.compression.runner import ProcessRunner


def _make_process(stderr: str = "", returncode: int = 0) -> MagicMock:
    proc = MagicMock()
    proc.communicate.return_value = ("", stderr)
    proc.returncode = returncode
    proc.poll.return_value = returncode
    return proc


class TestCommand:
    def test_prefixes_java_and_jar(self) -> None:
        runner = ProcessRunner("/opt/java/bin/java", "/opt/yui.jar")
        assert runner.command(["--type", "js"]) == [
            "/opt/java/bin/java", "-jar", "/opt/yui.jar", "--type", "js",
        ]


class TestRunWithinTimeout:
    def test_returns_stderr_and_exit_code(self) -> None:
        proc = _make_process(stderr="[WARNING] x", returncode=0)
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc) as popen:
            result = ProcessRunner("java", "yui.jar").run(["--type", "css"])

        assert result.exited_in_time is True
        assert result.diagnostics == "[WARNING] x"
        assert result.exit_code == 0
        cmd = popen.call_args.args[0]
        assert cmd == ["java", "-jar", "yui.jar", "--type", "css"]

    def test_never_uses_a_shell_and_redirects_streams(self) -> None:
        proc = _make_process()
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc) as popen:
            ProcessRunner("java", "yui.jar").run([])

        kwargs = popen.call_args.kwargs
        assert kwargs.get("shell", False) is False
        assert kwargs["stdout"] is subprocess.PIPE
        assert kwargs["stderr"] is subprocess.PIPE

    def test_passes_timeout_in_seconds(self) -> None:
        proc = _make_process()
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc):
            ProcessRunner("java", "yui.jar", timeout_ms=5000).run([])

        proc.communicate.assert_called_once_with(timeout=5.0)

    def test_nonzero_exit_is_not_an_error(self) -> None:
        proc = _make_process(stderr="[ERROR] bad input", returncode=2)
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc):
            result = ProcessRunner("java", "yui.jar").run([])

        assert result.exit_code == 2
        assert result.diagnostics == "[ERROR] bad input"


class TestRunPastTimeout:
    def test_continue_policy_reads_remaining_output(self) -> None:
        proc = _make_process(returncode=0)
        proc.communicate.side_effect = [
            subprocess.TimeoutExpired(cmd="java", timeout=5),
            ("", "[WARNING] late"),
        ]
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc):
            result = ProcessRunner("java", "yui.jar", timeout_policy="continue").run([])

        assert result.exited_in_time is False
        assert result.diagnostics == "[WARNING] late"
        proc.kill.assert_not_called()

    def test_fail_policy_kills_and_raises(self) -> None:
        proc = _make_process()
        proc.communicate.side_effect = [
            subprocess.TimeoutExpired(cmd="java", timeout=5),
            ("", ""),
        ]
        with patch("asset_build.compression.runner.subprocess.Popen", return_value=proc):
            runner = ProcessRunner("java", "yui.jar", timeout_ms=5000, timeout_policy="fail")
            with pytest.raises(ToolTimeoutError, match="5000 ms"):
                runner.run([])

        proc.kill.assert_called_once()

    def test_timeout_error_is_file_scoped(self) -> None:
        assert issubclass(ToolTimeoutError, FileSystemError)


class TestRunRealProcess:
    def test_missing_binary_raises_launch_error(self, tmp_path: Path) -> None:
        runner = ProcessRunner(str(tmp_path / "no-such-java"), "yui.jar")
        with pytest.raises(ToolLaunchError, match="no-such-java"):
            runner.run([])

    def test_collects_stderr_from_real_process(self) -> None:
        # The interpreter rejects "-jar", which yields a usage error on stderr.
        runner = ProcessRunner(sys.executable, "yui.jar", timeout_ms=30000)
        result = runner.run([])

        assert result.exited_in_time is True
        assert result.exit_code != 0
        assert result.diagnostics != ""
