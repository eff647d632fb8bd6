from dataclasses import dataclass, field
from enum import Enum

from asset_build.logging.logger import Log


class EntryLevel(str, Enum):
    MESSAGE = "message"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class BuildLogEntry:
    level: EntryLevel
    message: str
    file: str | None = None
    line: int | None = None
    column: int | None = None


@dataclass
class BuildLog:
    """Build-log collaborator for one task run.

    Keeps every entry so the orchestrator (and tests) can inspect them, and
    forwards each one to the process logger as it is recorded.
    """

    entries: list[BuildLogEntry] = field(default_factory=list)

    @property
    def has_logged_errors(self) -> bool:
        return any(e.level is EntryLevel.ERROR for e in self.entries)

    @property
    def errors(self) -> list[BuildLogEntry]:
        return [e for e in self.entries if e.level is EntryLevel.ERROR]

    @property
    def warnings(self) -> list[BuildLogEntry]:
        return [e for e in self.entries if e.level is EntryLevel.WARNING]

    def message(self, text: str) -> None:
        self.entries.append(BuildLogEntry(EntryLevel.MESSAGE, text))
        Log.info(text)

    def warning(
        self,
        text: str,
        file: str | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.entries.append(BuildLogEntry(EntryLevel.WARNING, text, file, line, column))
        Log.warning(text, file=file, line=line, column=column)

    def error(self, text: str, file: str | None = None) -> None:
        self.entries.append(BuildLogEntry(EntryLevel.ERROR, text, file))
        Log.error(text, file=file)

    def error_from_exception(self, exc: BaseException, file: str) -> None:
        """Record a non-throwing error for ``exc``, attributed to ``file``."""
        self.error(f"{type(exc).__name__}: {exc}", file=file)
