from dataclasses import dataclass
from enum import Enum

SENTINEL_LINE = 1
SENTINEL_COLUMN = 1


class AssetKind(str, Enum):
    SCRIPT = "js"
    STYLESHEET = "css"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def minified_suffix(self) -> str:
        """Suffix every generated artifact of this kind ends with."""
        return f"-min.{self.value}"

    @classmethod
    def parse(cls, value: str) -> "AssetKind":
        key = value.strip().lower()
        kind = _KIND_ALIASES.get(key)
        if kind is None:
            raise ValueError(
                f"Unknown asset kind '{value}'. Choose from: {sorted(_KIND_ALIASES)}"
            )
        return kind


_KIND_ALIASES: dict[str, AssetKind] = {
    "js": AssetKind.SCRIPT,
    "script": AssetKind.SCRIPT,
    "css": AssetKind.STYLESHEET,
    "stylesheet": AssetKind.STYLESHEET,
}


@dataclass(frozen=True)
class CompressionOptions:
    """Compressor settings shared read-only by every file of a run.

    ``line_break``: 0 keeps the tool's per-statement default, a positive
    value breaks lines after that column, None means no limit.
    """

    kind: AssetKind
    minify_only: bool = False
    preserve_semicolons: bool = False
    disable_optimizations: bool = False
    charset: str | None = None
    line_break: int | None = None
    verbose: bool = False


@dataclass(frozen=True)
class InvocationResult:
    exited_in_time: bool
    diagnostics: str
    exit_code: int | None


@dataclass(frozen=True)
class DiagnosticRecord:
    message: str
    file: str
    line: int = SENTINEL_LINE
    column: int = SENTINEL_COLUMN
