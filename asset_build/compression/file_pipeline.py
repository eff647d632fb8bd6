import os

from asset_build.compression.arguments import ArgumentBuilder
from asset_build.compression.diagnostics import DiagnosticParser
from asset_build.compression.models import CompressionOptions
from asset_build.compression.pipeline import FileContext, PipelineStep
from asset_build.compression.runner import ProcessRunner
from asset_build.compression.steps import (
    BuildArgumentsStep,
    DeriveOutputPathStep,
    ParseDiagnosticsStep,
    RecordWarningsStep,
    RunCompressorStep,
)
from asset_build.config.settings import Settings
from asset_build.config.tool_paths import resolve_java_executable
from asset_build.logging.build_log import BuildLog
from asset_build.tasks.file_task import FileTask
from asset_build.tasks.models import FileOutcome, OutcomeStatus


class FilePipeline(FileTask):
    """Compresses each input file with the external compressor.

    Per file: inputs that already carry the ``-min.<ext>`` suffix are stale
    outputs and get deleted; everything else runs through the compression
    steps and its output path is recorded.
    """

    def __init__(
        self,
        options: CompressionOptions,
        runner: ProcessRunner,
        argument_builder: ArgumentBuilder | None = None,
        parser: DiagnosticParser | None = None,
        build_log: BuildLog | None = None,
    ) -> None:
        super().__init__(build_log)
        self._options = options
        self._steps: list[PipelineStep] = [
            DeriveOutputPathStep(options.kind, self.log),
            BuildArgumentsStep(argument_builder or ArgumentBuilder(), options),
            RunCompressorStep(runner, self.log),
            ParseDiagnosticsStep(parser or DiagnosticParser()),
            RecordWarningsStep(self.log),
        ]

    def process_file(self, path: str) -> FileOutcome:
        if path.endswith(self._options.kind.minified_suffix):
            os.remove(path)
            self.log.message(f"Deleted previously compressed file {path}")
            return FileOutcome(path=path, status=OutcomeStatus.DELETED_STALE)

        context = FileContext(input_path=path)
        for step in self._steps:
            context = step.run(context)

        return FileOutcome(
            path=path,
            status=OutcomeStatus.PRODUCED,
            output_path=context.output_path,
        )


def build_file_pipeline(
    settings: Settings,
    options: CompressionOptions,
    build_log: BuildLog | None = None,
) -> FilePipeline:
    """Build a FilePipeline with the tool location resolved once from settings."""
    if not settings.yui_compressor_jar_location:
        raise ValueError("YUI_COMPRESSOR_JAR_LOCATION must be configured")
    runner = ProcessRunner(
        java_executable=resolve_java_executable(settings.java_exe_location),
        compressor_jar=settings.yui_compressor_jar_location,
        timeout_ms=settings.tool_timeout_ms,
        timeout_policy=settings.tool_timeout_policy,
    )
    return FilePipeline(options=options, runner=runner, build_log=build_log)
