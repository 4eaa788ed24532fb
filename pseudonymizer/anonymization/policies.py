"""Masking policies, one per field category.

Each policy answers two questions for a trimmed, non-empty original value:
is it valid, and what should replace it. Policies never look at the mapping
table themselves; the engine passes in the set of masked values already
handed out so random policies can retry on collision.
"""

from __future__ import annotations

import random
import string
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence, Set
from typing import ClassVar

from pseudonymizer.anonymization.exceptions import GenerationExhaustedError
from pseudonymizer.anonymization.models import FieldCategory
from pseudonymizer.anonymization.validators import is_valid_identifier

INVALID_IDENTIFIER = "Invalid PAN"


class BaseMaskingPolicy(ABC):
    """Contract for all per-category masking policies."""

    category: ClassVar[FieldCategory]

    def validate(self, value: str) -> bool:
        """Return whether *value* may receive a mapped replacement."""
        _ = value
        return True

    @abstractmethod
    def mask(self, value: str, is_valid: bool, taken: Set[str]) -> str:
        """Produce the replacement for a value not yet present in the table.

        Args:
            value: Trimmed, non-empty original value.
            is_valid: Result of :meth:`validate` for *value*.
            taken: Masked values already assigned in this run.

        Raises:
            GenerationExhaustedError: if a unique value could not be drawn.
        """


class _RandomPolicy(BaseMaskingPolicy):
    """Shared retry loop for policies drawing from the run's RNG."""

    def __init__(self, rng: random.Random, max_attempts: int = 1000) -> None:
        self._rng = rng
        self._max_attempts = max_attempts

    def _draw_unique(self, draw: Callable[[], str], taken: Set[str]) -> str:
        for _ in range(self._max_attempts):
            candidate = draw()
            if candidate not in taken:
                return candidate
        raise GenerationExhaustedError(
            f"No unused {self.category.value} value after {self._max_attempts} attempts"
        )


class PositionalIdentifierPolicy(BaseMaskingPolicy):
    """Mask valid identifiers as ``XXXXX<ordinal:04d>X``.

    The ordinal counts distinct valid identifiers in order of first sight,
    starting at 1, so output depends on row order but never on content.
    """

    category = FieldCategory.IDENTIFIER

    def __init__(self) -> None:
        self._counter = 1

    @property
    def counter(self) -> int:
        return self._counter

    def validate(self, value: str) -> bool:
        return is_valid_identifier(value)

    def mask(self, value: str, is_valid: bool, taken: Set[str]) -> str:
        _ = value, taken
        if not is_valid:
            return INVALID_IDENTIFIER
        masked = f"XXXXX{self._counter:04d}X"
        self._counter += 1
        return masked


class SyntheticIdentifierPolicy(_RandomPolicy):
    """Mask valid identifiers with a random value of the same shape."""

    category = FieldCategory.IDENTIFIER

    def validate(self, value: str) -> bool:
        return is_valid_identifier(value)

    def mask(self, value: str, is_valid: bool, taken: Set[str]) -> str:
        _ = value
        if not is_valid:
            return INVALID_IDENTIFIER
        return self._draw_unique(self._draw, taken)

    def _draw(self) -> str:
        letters = self._rng.choices(string.ascii_uppercase, k=6)
        digits = self._rng.choices(string.digits, k=4)
        return "".join(letters[:5]) + "".join(digits) + letters[5]


class AccountNumberPolicy(_RandomPolicy):
    """Replace any account value with a random 8-digit number without a leading zero."""

    category = FieldCategory.ACCOUNT_NUMBER

    LENGTH: ClassVar[int] = 8

    def mask(self, value: str, is_valid: bool, taken: Set[str]) -> str:
        _ = value, is_valid
        return self._draw_unique(self._draw, taken)

    def _draw(self) -> str:
        lead = self._rng.choice("123456789")
        rest = self._rng.choices(string.digits, k=self.LENGTH - 1)
        return lead + "".join(rest)


class PersonalNamePolicy(BaseMaskingPolicy):
    """Replace names with a placeholder picked uniformly from a fixed list.

    Several originals may share a placeholder; the list is small on purpose.
    """

    category = FieldCategory.PERSONAL_NAME

    def __init__(self, rng: random.Random, names: Sequence[str]) -> None:
        self._rng = rng
        self._names = tuple(names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def mask(self, value: str, is_valid: bool, taken: Set[str]) -> str:
        _ = value, is_valid, taken
        return self._rng.choice(self._names)
