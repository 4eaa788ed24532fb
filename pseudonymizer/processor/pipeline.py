from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from pseudonymizer.anonymization.models import CategoryStats, FieldCategory


@dataclass(slots=True)
class PipelineContext:
    input_path: Path
    output_path: Path
    frame: pd.DataFrame | None = None
    bindings: dict[FieldCategory, Hashable] = field(default_factory=dict)
    rows_processed: int = 0
    stats: dict[FieldCategory, CategoryStats] = field(default_factory=dict)
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
