from dataclasses import dataclass, field
from enum import Enum


class FieldCategory(str, Enum):
    """Kind of sensitive column; selects the validation and masking policy."""

    IDENTIFIER = "identifier"
    ACCOUNT_NUMBER = "account_number"
    PERSONAL_NAME = "personal_name"


@dataclass(slots=True)
class Row:
    """One dataset record, reduced to its sensitive fields.

    The engine overwrites ``fields`` in place with masked values.
    """

    index: int
    fields: dict[FieldCategory, str] = field(default_factory=dict)


@dataclass
class CategoryStats:
    """Per-category counters collected over a single run."""

    distinct: int = 0  # new mappings created
    reused: int = 0  # cache hits
    invalid: int = 0  # values replaced by the sentinel
    blank: int = 0  # empty values passed through
