from pathlib import Path

import pandas as pd
import pytest

SAMPLE_RECORDS = [
    {"Name": "Amit", "PAN": "ABCDE1234F", "Account Number": "12345678"},
    {"Name": "Amit", "PAN": "ABCDE1234F", "Account Number": "87654321"},
    {"Name": "Raj", "PAN": "ZZZZZ0000z", "Account Number": "12345678"},
]


@pytest.fixture()
def sample_frame() -> pd.DataFrame:
    """Three-row dataset with a repeated person and one malformed PAN."""
    return pd.DataFrame(SAMPLE_RECORDS, dtype=str)


@pytest.fixture()
def sample_xlsx(tmp_path: Path, sample_frame: pd.DataFrame) -> Path:
    """Write the sample dataset as a single-sheet workbook."""
    path = tmp_path / "customers.xlsx"
    sample_frame.to_excel(path, index=False, engine="openpyxl")
    return path


@pytest.fixture()
def sample_csv(tmp_path: Path, sample_frame: pd.DataFrame) -> Path:
    """Write the sample dataset as CSV."""
    path = tmp_path / "customers.csv"
    sample_frame.to_csv(path, index=False)
    return path
