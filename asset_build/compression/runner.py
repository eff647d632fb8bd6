import subprocess
from typing import Literal

from asset_build.compression.exceptions import ToolLaunchError, ToolTimeoutError
from asset_build.compression.models import InvocationResult
from asset_build.logging.logger import Log

DEFAULT_TIMEOUT_MS = 5000

TimeoutPolicy = Literal["continue", "fail"]


class ProcessRunner:
    """Runs the compressor jar as a subprocess and collects its stderr.

    The command is passed as a list and never goes through a shell. When the
    tool overruns the timeout, ``timeout_policy`` decides what happens:
    ``"continue"`` keeps reading until the tool finishes and reports
    ``exited_in_time=False``; ``"fail"`` kills it and raises ToolTimeoutError.
    """

    def __init__(
        self,
        java_executable: str,
        compressor_jar: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        timeout_policy: TimeoutPolicy = "continue",
    ) -> None:
        self._java_executable = java_executable
        self._compressor_jar = compressor_jar
        self._timeout_ms = timeout_ms
        self._timeout_policy = timeout_policy

    def command(self, args: list[str]) -> list[str]:
        return [self._java_executable, "-jar", self._compressor_jar, *args]

    def run(self, args: list[str]) -> InvocationResult:
        cmd = self.command(args)
        Log.debug(f"Launching {' '.join(cmd)}")

        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise ToolLaunchError(
                f"Could not start compressor with '{self._java_executable}': {exc}"
            ) from exc

        try:
            _stdout, stderr = proc.communicate(timeout=self._timeout_ms / 1000)
        except subprocess.TimeoutExpired:
            return self._handle_timeout(proc)

        return InvocationResult(
            exited_in_time=True,
            diagnostics=stderr or "",
            exit_code=proc.returncode,
        )

    def _handle_timeout(self, proc: subprocess.Popen[str]) -> InvocationResult:
        if self._timeout_policy == "fail":
            proc.kill()
            proc.communicate()
            raise ToolTimeoutError(
                f"Compressor did not exit within {self._timeout_ms} ms"
            )

        Log.debug(
            f"Compressor still running after {self._timeout_ms} ms, waiting for its output"
        )
        _stdout, stderr = proc.communicate()
        return InvocationResult(
            exited_in_time=False,
            diagnostics=stderr or "",
            exit_code=proc.poll(),
        )
