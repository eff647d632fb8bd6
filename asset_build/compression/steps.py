import os

from asset_build.compression.arguments import ArgumentBuilder
from asset_build.compression.diagnostics import DiagnosticParser
from asset_build.compression.exceptions import FileSystemError
from asset_build.compression.models import AssetKind, CompressionOptions
from asset_build.compression.pipeline import FileContext, PipelineStep
from asset_build.compression.runner import ProcessRunner
from asset_build.logging.build_log import BuildLog


def derive_output_path(input_path: str, kind: AssetKind) -> str:
    """Replace the first ``.<ext>`` in the path with ``-min.<ext>``."""
    return input_path.replace(f".{kind.extension}", kind.minified_suffix, 1)


class DeriveOutputPathStep(PipelineStep):
    def __init__(self, kind: AssetKind, build_log: BuildLog) -> None:
        self._kind = kind
        self._log = build_log

    def run(self, context: FileContext) -> FileContext:
        output_path = derive_output_path(context.input_path, self._kind)
        if output_path == context.input_path:
            raise FileSystemError(
                f"Refusing to compress {context.input_path}: no '.{self._kind.extension}' "
                f"in the path, so the output would overwrite the source file"
            )
        context.output_path = output_path
        self._log.message(
            f"Compressing {context.input_path} to {os.path.basename(output_path)}"
        )
        return context


class BuildArgumentsStep(PipelineStep):
    def __init__(self, argument_builder: ArgumentBuilder, options: CompressionOptions) -> None:
        self._argument_builder = argument_builder
        self._options = options

    def run(self, context: FileContext) -> FileContext:
        context.arguments = self._argument_builder.build(
            self._options,
            output_path=context.output_path,
            input_path=context.input_path,
        )
        return context


class RunCompressorStep(PipelineStep):
    def __init__(self, runner: ProcessRunner, build_log: BuildLog) -> None:
        self._runner = runner
        self._log = build_log

    def run(self, context: FileContext) -> FileContext:
        invocation = self._runner.run(context.arguments)
        context.invocation = invocation
        if not invocation.exited_in_time:
            self._log.warning(
                "Compressor did not exit within the timeout", file=context.input_path
            )
        if invocation.exit_code:
            self._log.warning(
                f"Compressor exited with code {invocation.exit_code}",
                file=context.input_path,
            )
        return context


class ParseDiagnosticsStep(PipelineStep):
    def __init__(self, parser: DiagnosticParser) -> None:
        self._parser = parser

    def run(self, context: FileContext) -> FileContext:
        if context.invocation is None:
            raise ValueError("FileContext.invocation must be set before parsing diagnostics")
        context.diagnostics = self._parser.parse(
            context.invocation.diagnostics,
            source_file=context.input_path,
        )
        return context


class RecordWarningsStep(PipelineStep):
    """Forwards parsed diagnostics to the build log. Never escalates to errors."""

    def __init__(self, build_log: BuildLog) -> None:
        self._log = build_log

    def run(self, context: FileContext) -> FileContext:
        for record in context.diagnostics:
            self._log.warning(
                record.message,
                file=record.file,
                line=record.line,
                column=record.column,
            )
        return context
