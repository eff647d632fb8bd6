from asset_build.compression.models import DiagnosticRecord

WARNING_TAG = "[WARNING] "
BLOCK_SEPARATOR = "\n\n"


class DiagnosticParser:
    """Splits the compressor's stderr into warning records.

    The tool's own line/column reporting is unreliable, so every record is
    attributed to the input file at the sentinel position 1,1.
    """

    def parse(self, diagnostics: str, source_file: str) -> list[DiagnosticRecord]:
        text = diagnostics.replace("\r", "")
        records: list[DiagnosticRecord] = []
        for block in text.split(BLOCK_SEPARATOR):
            message = block.strip().removeprefix(WARNING_TAG)
            if not message:
                continue
            records.append(DiagnosticRecord(message=message, file=source_file))
        return records
