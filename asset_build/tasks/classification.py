from asset_build.compression.exceptions import FileSystemError, MissingInputError
from asset_build.tasks.models import ErrorKind


def classify_exception(exc: BaseException) -> ErrorKind:
    """Map an exception raised while handling one file to an error kind.

    OSError covers I/O failures, permission and access denials, names that
    are too long and missing directories. Everything outside the closed set
    is UNCLASSIFIED and must abort the run.
    """
    if isinstance(exc, MissingInputError):
        return ErrorKind.MISSING_INPUT
    if isinstance(exc, (OSError, FileSystemError)):
        return ErrorKind.FILE_SYSTEM
    return ErrorKind.UNCLASSIFIED
