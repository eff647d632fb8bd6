from asset_build.logging.build_log import BuildLog
from asset_build.tasks.file_task import FileTask
from asset_build.tasks.models import FileOutcome, OutcomeStatus

LOADER_MARKER = "AlphaImageLoader(src="


class CdnPrefixRewriter(FileTask):
    """Prefixes asset-loader URLs with a delivery-network host, in place.

    Files are read and written with ``surrogateescape`` and no newline
    translation, so bytes outside the replaced markers are preserved.
    """

    def __init__(self, host: str, build_log: BuildLog | None = None) -> None:
        if not host:
            raise ValueError("CDN host must not be empty")
        super().__init__(build_log)
        self._host = host

    def rewrite(self, text: str) -> str:
        return text.replace(LOADER_MARKER, LOADER_MARKER + self._host)

    def process_file(self, path: str) -> FileOutcome:
        self.log.message(f"Adding {self._host} to {path}")
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            text = fh.read()
        with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(self.rewrite(text))
        return FileOutcome(path=path, status=OutcomeStatus.PRODUCED, output_path=path)
