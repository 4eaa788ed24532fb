from pathlib import Path

import pandas as pd

from pseudonymizer.table.base import BaseTableStore
from pseudonymizer.table.exceptions import TableReadError, TableWriteError


class CsvTableStore(BaseTableStore):
    """Reads and writes comma-separated datasets."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read(self, path: Path) -> pd.DataFrame:
        try:
            return pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                encoding=self._encoding,
            )
        except Exception as exc:
            raise TableReadError(f"Failed to read CSV {path}: {exc}") from exc

    def write(self, frame: pd.DataFrame, path: Path) -> None:
        try:
            frame.to_csv(path, index=False, encoding=self._encoding)
        except Exception as exc:
            raise TableWriteError(f"Failed to write CSV {path}: {exc}") from exc
