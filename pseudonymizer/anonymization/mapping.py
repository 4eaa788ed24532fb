from collections.abc import Set

from pseudonymizer.anonymization.models import FieldCategory


class MappingTable:
    """Run-scoped cache of original value -> masked value for one field category.

    An original value is bound at most once; rebinding it raises.
    """

    def __init__(self, category: FieldCategory) -> None:
        self.category = category
        self._forward: dict[str, str] = {}
        self._masked: set[str] = set()

    def get(self, original: str) -> str | None:
        return self._forward.get(original)

    def bind(self, original: str, masked: str) -> None:
        if original in self._forward:
            raise KeyError(f"{self.category.value} value is already mapped")
        self._forward[original] = masked
        self._masked.add(masked)

    @property
    def masked_values(self) -> Set[str]:
        """Masked values handed out so far (read-only view)."""
        return self._masked

    def __contains__(self, original: object) -> bool:
        return original in self._forward

    def __len__(self) -> int:
        return len(self._forward)
