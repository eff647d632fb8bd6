from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(str, Enum):
    MISSING_INPUT = "missing_input"
    FILE_SYSTEM = "file_system"
    UNCLASSIFIED = "unclassified"


class OutcomeStatus(str, Enum):
    PRODUCED = "produced"
    DELETED_STALE = "deleted_stale"
    MISSING = "missing"
    FAILED = "failed"


@dataclass(frozen=True)
class AssetFile:
    """One input of a run. The asset kind is supplied once for the whole run."""

    path: str


@dataclass(frozen=True)
class FileOutcome:
    path: str
    status: OutcomeStatus
    output_path: str | None = None
    error_kind: ErrorKind | None = None
    error_message: str = ""


@dataclass
class PipelineResult:
    """Outputs of a run, built incrementally and finalized at the end."""

    outputs: list[str] = field(default_factory=list)
    outcomes: list[FileOutcome] = field(default_factory=list)
    success: bool = True

    def add_outcome(self, outcome: FileOutcome) -> None:
        self.outcomes.append(outcome)
        if outcome.status is OutcomeStatus.PRODUCED and outcome.output_path is not None:
            self.outputs.append(outcome.output_path)
