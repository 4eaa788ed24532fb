import random
from typing import ClassVar

from pseudonymizer.anonymization.base import BasePseudonymizer
from pseudonymizer.anonymization.engine import PseudonymizationEngine
from pseudonymizer.anonymization.models import FieldCategory
from pseudonymizer.anonymization.names_loader import load_placeholder_names
from pseudonymizer.anonymization.policies import (
    AccountNumberPolicy,
    BaseMaskingPolicy,
    PersonalNamePolicy,
    PositionalIdentifierPolicy,
    SyntheticIdentifierPolicy,
)
from pseudonymizer.config.settings import Settings


class PseudonymizerFactory:
    """Creates a fresh engine, with its own RNG and tables, for one run."""

    IDENTIFIER_POLICIES: ClassVar[tuple[str, ...]] = ("positional", "synthetic")

    @classmethod
    def create(cls, settings: Settings) -> BasePseudonymizer:
        """Create an engine covering ``settings.categories``."""
        rng = random.Random(settings.random_seed)
        policies: dict[FieldCategory, BaseMaskingPolicy] = {}
        for category in settings.categories:
            policies[category] = cls._build_policy(category, settings, rng)
        return PseudonymizationEngine(policies)

    @classmethod
    def _build_policy(
        cls,
        category: FieldCategory,
        settings: Settings,
        rng: random.Random,
    ) -> BaseMaskingPolicy:
        if category == FieldCategory.IDENTIFIER:
            return cls._build_identifier_policy(settings, rng)
        if category == FieldCategory.ACCOUNT_NUMBER:
            return AccountNumberPolicy(rng, settings.max_generation_attempts)
        names = load_placeholder_names(settings.placeholder_names_path)
        return PersonalNamePolicy(rng, names)

    @classmethod
    def _build_identifier_policy(
        cls, settings: Settings, rng: random.Random
    ) -> BaseMaskingPolicy:
        policy = settings.identifier_policy.lower()
        if policy == "positional":
            return PositionalIdentifierPolicy()
        if policy == "synthetic":
            return SyntheticIdentifierPolicy(rng, settings.max_generation_attempts)
        raise ValueError(
            f"Unknown identifier policy '{policy}'. Choose from: {list(cls.IDENTIFIER_POLICIES)}"
        )
