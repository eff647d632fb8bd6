from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from asset_build.compression.models import DiagnosticRecord, InvocationResult


@dataclass(slots=True)
class FileContext:
    input_path: str
    output_path: str = ""
    arguments: list[str] = field(default_factory=list)
    invocation: InvocationResult | None = None
    diagnostics: list[DiagnosticRecord] = field(default_factory=list)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
