from collections.abc import Hashable, Sequence

import pandas as pd

from pseudonymizer.anonymization.models import FieldCategory
from pseudonymizer.processor.exceptions import ColumnBindingError


class ColumnBinder:
    """Resolves each configured category to exactly one dataset column.

    A column reference made of digits is a 1-based position; anything else must
    equal a header after trimming, ignoring case.
    """

    def __init__(self, columns: dict[FieldCategory, str]) -> None:
        self._columns = columns

    def bind(self, frame: pd.DataFrame) -> dict[FieldCategory, Hashable]:
        """Return category -> column label for *frame*.

        Raises:
            ColumnBindingError: if a reference matches no column, or two
                categories resolve to the same column.
        """
        labels = list(frame.columns)
        bindings: dict[FieldCategory, Hashable] = {}
        for category, column in self._columns.items():
            bindings[category] = self._resolve(category, str(column).strip(), labels)

        seen: dict[Hashable, FieldCategory] = {}
        for category, label in bindings.items():
            if label in seen:
                raise ColumnBindingError(
                    f"Column '{label}' is bound to both {seen[label].value} "
                    f"and {category.value}"
                )
            seen[label] = category
        return bindings

    @staticmethod
    def _resolve(category: FieldCategory, column: str, labels: Sequence[Hashable]) -> Hashable:
        if column.isdigit():
            position = int(column)
            if not 1 <= position <= len(labels):
                raise ColumnBindingError(
                    f"Column position {position} for {category.value} is out of range "
                    f"(dataset has {len(labels)} columns)"
                )
            return labels[position - 1]

        wanted = column.casefold()
        matches = [label for label in labels if str(label).strip().casefold() == wanted]
        if not matches:
            raise ColumnBindingError(
                f"No column named '{column}' for {category.value}. Headers: {labels}"
            )
        if len(matches) > 1:
            raise ColumnBindingError(
                f"Header '{column}' for {category.value} matches several columns: {matches}"
            )
        return matches[0]
