from collections.abc import Callable
from pathlib import Path

from pseudonymizer.anonymization.base import BasePseudonymizer
from pseudonymizer.logging.logger import Log
from pseudonymizer.processor.column_binder import ColumnBinder
from pseudonymizer.processor.exceptions import InputFileNotFoundError
from pseudonymizer.processor.pipeline import PipelineContext, PipelineStep
from pseudonymizer.table.base import BaseTableStore
from pseudonymizer.table.rows import iter_rows, write_back

StoreResolver = Callable[[Path], BaseTableStore]


class ReportFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(
            f"Pseudonymization of {context.input_path} failed, "
            f"no output written: {context.error_message}"
        )
        return context


class LoadTableStep(PipelineStep):
    def __init__(self, store_for: StoreResolver) -> None:
        self._store_for = store_for

    def run(self, context: PipelineContext) -> PipelineContext:
        if not context.input_path.is_file():
            raise InputFileNotFoundError(f"Input file not found: {context.input_path}")
        store = self._store_for(context.input_path)
        context.frame = store.read(context.input_path)
        Log.info(f"Loaded {len(context.frame)} rows from {context.input_path}")
        return context


class BindColumnsStep(PipelineStep):
    def __init__(self, binder: ColumnBinder) -> None:
        self._binder = binder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.frame is None:
            raise ValueError("PipelineContext.frame must be set before column binding")
        context.bindings = self._binder.bind(context.frame)
        Log.info(
            "Bound columns: "
            + ", ".join(f"{c.value}={label!r}" for c, label in context.bindings.items())
        )
        return context


class PseudonymizeStep(PipelineStep):
    """Runs a fresh engine over every row and writes masked values back."""

    def __init__(self, engine_builder: Callable[[], BasePseudonymizer]) -> None:
        self._engine_builder = engine_builder

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.frame is None:
            raise ValueError("PipelineContext.frame must be set before pseudonymization")
        engine = self._engine_builder()
        processed = 0
        for row in engine.process(iter_rows(context.frame, context.bindings)):
            write_back(context.frame, row, context.bindings)
            processed += 1
        context.rows_processed = processed
        context.stats = engine.stats
        for category, stats in context.stats.items():
            Log.info(
                f"{category.value}: {stats.distinct} distinct masked, "
                f"{stats.reused} reused, {stats.invalid} invalid, {stats.blank} blank"
            )
        return context


class WriteTableStep(PipelineStep):
    def __init__(self, store_for: StoreResolver) -> None:
        self._store_for = store_for

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.frame is None:
            raise ValueError("PipelineContext.frame must be set before writing output")
        store = self._store_for(context.output_path)
        context.output_path.parent.mkdir(parents=True, exist_ok=True)
        store.write(context.frame, context.output_path)
        Log.info(f"Processed file saved as {context.output_path}")
        return context
