from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from pseudonymizer.anonymization.models import CategoryStats, FieldCategory, Row


class BasePseudonymizer(ABC):
    """Contract for a single pseudonymization run."""

    @abstractmethod
    def mask(self, category: FieldCategory, value: str) -> str:
        """Return the masked replacement for one raw field value.

        Args:
            category: Field category selecting the policy.
            value: Raw value; surrounding whitespace is trimmed first.

        Returns:
            The masked value, ``""`` for blank input.

        Raises:
            UnknownFieldCategoryError: if no policy exists for *category*.
        """

    @abstractmethod
    def process(self, rows: Iterable[Row]) -> Iterator[Row]:
        """Mask every field of every row in place, yielding rows in input order."""

    @property
    @abstractmethod
    def stats(self) -> dict[FieldCategory, CategoryStats]:
        """Counters collected so far in this run."""
