import logging
import sys


def _attributed(message: str, file: str | None, line: int | None, column: int | None) -> str:
    if not file:
        return message
    if line is None:
        return f"{file}: {message}"
    return f"{file}({line},{column or 1}): {message}"


class Log:
    """Process-wide logger for build steps.

    Messages can be attributed to a source file and position; attribution is
    rendered MSBuild-style, ``path(line,col): message``.
    """

    _logger: logging.Logger = logging.getLogger("asset_build")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, *, file: str | None = None) -> None:
        cls._logger.info(_attributed(message, file, None, None))

    @classmethod
    def error(
        cls,
        message: str,
        *,
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        cls._logger.error(_attributed(message, file, line, column))

    @classmethod
    def warning(
        cls,
        message: str,
        *,
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        cls._logger.warning(_attributed(message, file, line, column))

    @classmethod
    def debug(cls, message: str, *, file: str | None = None) -> None:
        cls._logger.debug(_attributed(message, file, None, None))
