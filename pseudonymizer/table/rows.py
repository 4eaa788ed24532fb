"""Bridges DataFrame records and engine rows."""

from collections.abc import Hashable, Iterator, Mapping

import pandas as pd

from pseudonymizer.anonymization.models import FieldCategory, Row


def iter_rows(
    frame: pd.DataFrame,
    bindings: Mapping[FieldCategory, Hashable],
) -> Iterator[Row]:
    """Lazily yield one :class:`Row` per record, in frame order."""
    for position in range(len(frame)):
        fields = {
            category: _cell_text(frame.iat[position, frame.columns.get_loc(column)])
            for category, column in bindings.items()
        }
        yield Row(index=position, fields=fields)


def write_back(
    frame: pd.DataFrame,
    row: Row,
    bindings: Mapping[FieldCategory, Hashable],
) -> None:
    """Store the row's (masked) field values into their bound columns."""
    for category, value in row.fields.items():
        frame.iat[row.index, frame.columns.get_loc(bindings[category])] = value


def _cell_text(value: object) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)
