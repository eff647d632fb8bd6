class AssetBuildError(Exception):
    """Base exception for all asset build errors."""


class MissingInputError(AssetBuildError):
    """Raised when a referenced input file does not exist."""


class FileSystemError(AssetBuildError):
    """Raised for a file-scoped failure that should not abort the run."""


class ToolTimeoutError(FileSystemError):
    """Raised when the compressor does not exit within the timeout."""


class ToolLaunchError(AssetBuildError):
    """Raised when the compressor binary cannot be started."""
