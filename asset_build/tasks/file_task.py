import os
from abc import ABC, abstractmethod
from collections.abc import Iterable

from asset_build.compression.exceptions import MissingInputError
from asset_build.logging.build_log import BuildLog
from asset_build.tasks.classification import classify_exception
from asset_build.tasks.models import (
    AssetFile,
    ErrorKind,
    FileOutcome,
    OutcomeStatus,
    PipelineResult,
)


class FileTask(ABC):
    """Sequential per-file loop shared by the build tasks.

    Empty paths are skipped, missing inputs and file-system failures are
    logged as errors against the file and the loop moves on. Any other
    exception propagates and aborts the run.
    """

    def __init__(self, build_log: BuildLog | None = None) -> None:
        self.log = build_log if build_log is not None else BuildLog()

    def execute(self, files: Iterable[AssetFile | str]) -> PipelineResult:
        result = PipelineResult()

        for file in files:
            path = file.path if isinstance(file, AssetFile) else file
            if not path:
                continue
            result.add_outcome(self._run_one(path))

        result.success = not self.log.has_logged_errors
        return result

    def _run_one(self, path: str) -> FileOutcome:
        try:
            if not os.path.isfile(path):
                raise MissingInputError(f"Error in trying to find {path}, it doesn't exist.")
            return self.process_file(path)
        except Exception as exc:
            kind = classify_exception(exc)
            if kind is ErrorKind.UNCLASSIFIED:
                raise
            if kind is ErrorKind.MISSING_INPUT:
                self.log.error(str(exc))
                status = OutcomeStatus.MISSING
            else:
                self.log.error_from_exception(exc, file=path)
                status = OutcomeStatus.FAILED
            return FileOutcome(
                path=path,
                status=status,
                error_kind=kind,
                error_message=str(exc),
            )

    @abstractmethod
    def process_file(self, path: str) -> FileOutcome:
        """Handle one existing input file.

        Raises:
            OSError, FileSystemError: recorded as a failure of this file.
        """
