from pathlib import Path

from pseudonymizer.config.settings import Settings
from pseudonymizer.table.base import BaseTableStore
from pseudonymizer.table.csv_adapter import CsvTableStore
from pseudonymizer.table.excel_adapter import ExcelTableStore


class TableStoreFactory:
    """Creates the table adapter matching a dataset's file suffix."""

    SUFFIXES: dict[str, str] = {
        ".xlsx": "excel",
        ".xlsm": "excel",
        ".csv": "csv",
    }

    @classmethod
    def for_path(cls, path: Path, settings: Settings) -> BaseTableStore:
        suffix = path.suffix.lower()
        kind = cls.SUFFIXES.get(suffix)
        if kind is None:
            raise ValueError(
                f"Unsupported dataset format '{suffix}'. Choose from: {list(cls.SUFFIXES)}"
            )
        if kind == "excel":
            return ExcelTableStore(sheet_index=settings.sheet_index)
        return CsvTableStore()
