from functools import partial
from pathlib import Path

from pseudonymizer.anonymization.factory import PseudonymizerFactory
from pseudonymizer.config.settings import Settings
from pseudonymizer.logging.logger import Log
from pseudonymizer.processor.column_binder import ColumnBinder
from pseudonymizer.processor.exceptions import ConfigurationError
from pseudonymizer.processor.pipeline import PipelineContext, PipelineStep
from pseudonymizer.processor.steps import (
    BindColumnsStep,
    LoadTableStep,
    PseudonymizeStep,
    ReportFailureStep,
    WriteTableStep,
)
from pseudonymizer.table.factory import TableStoreFactory


class Processor:
    """Runs the dataset pipeline: load -> bind -> pseudonymize -> write.

    Any step failure runs the failure step and re-raises; the run is then
    treated as failed as a whole.
    """

    def __init__(self, steps: list[PipelineStep], failed_step: PipelineStep) -> None:
        self._steps = steps
        self._failed_step = failed_step

    def process(self, input_path: Path, output_path: Path) -> PipelineContext:
        Log.info(f"Processing {input_path} -> {output_path}")
        context = PipelineContext(input_path=input_path, output_path=output_path)
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        Log.info(f"Pseudonymized {context.rows_processed} rows from {input_path}")
        return context


def require_paths(settings: Settings) -> tuple[Path, Path]:
    """Return the configured (input, output) paths.

    Raises:
        ConfigurationError: if either path is missing or blank.
    """
    input_path = settings.input_file_path.strip()
    output_path = settings.output_file_path.strip()
    if not input_path or not output_path:
        raise ConfigurationError("Invalid file paths in config: input and output are required")
    return Path(input_path), Path(output_path)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters.

    Raises:
        ConfigurationError: if the configured paths are missing.
        ValueError: if a path has an unsupported format or the identifier
            policy is unknown.
    """
    input_path, output_path = require_paths(settings)
    # Fail on unsupported formats before any data is read.
    TableStoreFactory.for_path(input_path, settings)
    TableStoreFactory.for_path(output_path, settings)
    PseudonymizerFactory.create(settings)

    store_for = partial(TableStoreFactory.for_path, settings=settings)
    binder = ColumnBinder(
        {category: settings.column_for(category) for category in settings.categories}
    )
    steps: list[PipelineStep] = [
        LoadTableStep(store_for),
        BindColumnsStep(binder),
        PseudonymizeStep(partial(PseudonymizerFactory.create, settings)),
        WriteTableStep(store_for),
    ]
    return Processor(steps=steps, failed_step=ReportFailureStep())
