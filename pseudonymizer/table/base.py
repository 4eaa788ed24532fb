from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd


class BaseTableStore(ABC):
    """Contract for all tabular dataset adapters."""

    @abstractmethod
    def read(self, path: Path) -> pd.DataFrame:
        """Read a dataset with every cell as a string.

        Args:
            path: Dataset location. The first row holds the headers.

        Returns:
            DataFrame of ``str`` cells; blank cells are ``""``.

        Raises:
            TableReadError: if reading fails for any reason.
        """

    @abstractmethod
    def write(self, frame: pd.DataFrame, path: Path) -> None:
        """Write *frame* to *path*, headers first, without the index.

        Raises:
            TableWriteError: if writing fails for any reason.
        """
