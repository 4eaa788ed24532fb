from pathlib import Path

import pandas as pd

from pseudonymizer.table.base import BaseTableStore
from pseudonymizer.table.exceptions import TableReadError, TableWriteError


class ExcelTableStore(BaseTableStore):
    """Reads and writes one worksheet of an .xlsx workbook through openpyxl."""

    def __init__(self, sheet_index: int = 0) -> None:
        self._sheet_index = sheet_index

    def read(self, path: Path) -> pd.DataFrame:
        try:
            return pd.read_excel(
                path,
                sheet_name=self._sheet_index,
                dtype=str,
                keep_default_na=False,
                engine="openpyxl",
            )
        except Exception as exc:
            raise TableReadError(f"Failed to read workbook {path}: {exc}") from exc

    def write(self, frame: pd.DataFrame, path: Path) -> None:
        try:
            frame.to_excel(path, index=False, engine="openpyxl")
        except Exception as exc:
            raise TableWriteError(f"Failed to write workbook {path}: {exc}") from exc
