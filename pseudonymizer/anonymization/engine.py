"""Run-scoped pseudonymization engine.

Processing flow for one raw value:
1. Trim surrounding whitespace; blank values pass through untouched.
2. Look the value up in its category's mapping table; a hit is returned as is.
3. Validate the value with the category policy.
4. Invalid values get the policy's sentinel and are not cached.
5. Valid values get a fresh replacement, which is bound in the table.
"""

from collections.abc import Iterable, Iterator, Mapping

from pseudonymizer.anonymization.base import BasePseudonymizer
from pseudonymizer.anonymization.exceptions import UnknownFieldCategoryError
from pseudonymizer.anonymization.mapping import MappingTable
from pseudonymizer.anonymization.models import CategoryStats, FieldCategory, Row
from pseudonymizer.anonymization.policies import BaseMaskingPolicy
from pseudonymizer.logging.logger import Log


class PseudonymizationEngine(BasePseudonymizer):
    """Masks identity fields consistently for the lifetime of one instance.

    Owns one :class:`MappingTable` per configured category. Build a new
    engine for each run; nothing carries over between instances.
    """

    def __init__(self, policies: Mapping[FieldCategory, BaseMaskingPolicy]) -> None:
        self._policies = dict(policies)
        self._tables = {category: MappingTable(category) for category in self._policies}
        self._stats = {category: CategoryStats() for category in self._policies}

    @property
    def categories(self) -> tuple[FieldCategory, ...]:
        return tuple(self._policies)

    @property
    def stats(self) -> dict[FieldCategory, CategoryStats]:
        return self._stats

    def table(self, category: FieldCategory) -> MappingTable:
        """Return the mapping table for *category*."""
        self._policy_for(category)
        return self._tables[category]

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def mask(self, category: FieldCategory, value: str) -> str:
        policy = self._policy_for(category)
        table = self._tables[category]
        stats = self._stats[category]

        original = value.strip()
        if not original:
            stats.blank += 1
            return ""

        cached = table.get(original)
        if cached is not None:
            stats.reused += 1
            return cached

        is_valid = policy.validate(original)
        masked = policy.mask(original, is_valid, table.masked_values)
        if not is_valid:
            stats.invalid += 1
            Log.debug(f"Invalid {policy.category.value} {Log.redact(original)} flagged")
            return masked

        table.bind(original, masked)
        stats.distinct += 1
        return masked

    def process_row(self, row: Row) -> Row:
        """Mask every field of *row* in place and return it."""
        for category, value in list(row.fields.items()):
            row.fields[category] = self.mask(category, value)
        return row

    def process(self, rows: Iterable[Row]) -> Iterator[Row]:
        for row in rows:
            yield self.process_row(row)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _policy_for(self, category: FieldCategory) -> BaseMaskingPolicy:
        policy = self._policies.get(category)
        if policy is None:
            configured = [c.value for c in self._policies]
            raise UnknownFieldCategoryError(
                f"No masking policy for field category {category!r}. "
                f"Configured: {configured}"
            )
        return policy
