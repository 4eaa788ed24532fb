import random
from unittest.mock import MagicMock

import pytest

from pseudonymizer.anonymization.exceptions import GenerationExhaustedError
from pseudonymizer.anonymization.models import FieldCategory
from pseudonymizer.anonymization.policies import (
    INVALID_IDENTIFIER,
    AccountNumberPolicy,
    PersonalNamePolicy,
    PositionalIdentifierPolicy,
    SyntheticIdentifierPolicy,
)
from pseudonymizer.anonymization.validators import is_valid_identifier

NAMES = [f"Person {i}" for i in range(12)]


class TestPositionalIdentifierPolicy:
    def test_first_valid_identifier_gets_ordinal_one(self) -> None:
        policy = PositionalIdentifierPolicy()
        assert policy.mask("ABCDE1234F", True, set()) == "XXXXX0001X"

    def test_ordinal_increments_per_call(self) -> None:
        policy = PositionalIdentifierPolicy()
        policy.mask("ABCDE1234F", True, set())
        assert policy.mask("PQRST6789U", True, set()) == "XXXXX0002X"
        assert policy.counter == 3

    def test_invalid_returns_sentinel_without_counting(self) -> None:
        policy = PositionalIdentifierPolicy()
        assert policy.mask("abcde1234f", False, set()) == INVALID_IDENTIFIER
        assert policy.counter == 1

    def test_output_does_not_depend_on_content(self) -> None:
        first = PositionalIdentifierPolicy().mask("ABCDE1234F", True, set())
        second = PositionalIdentifierPolicy().mask("QWERT9876Y", True, set())
        assert first == second

    def test_validate_uses_identifier_shape(self) -> None:
        policy = PositionalIdentifierPolicy()
        assert policy.validate("ABCDE1234F")
        assert not policy.validate("1234ABCDE5")

    def test_ordinal_beyond_four_digits_keeps_growing(self) -> None:
        policy = PositionalIdentifierPolicy()
        policy._counter = 10000
        assert policy.mask("ABCDE1234F", True, set()) == "XXXXX10000X"


class TestSyntheticIdentifierPolicy:
    def test_produces_identifier_shape(self) -> None:
        policy = SyntheticIdentifierPolicy(random.Random(1))
        for _ in range(50):
            assert is_valid_identifier(policy.mask("ABCDE1234F", True, set()))

    def test_invalid_returns_sentinel(self) -> None:
        policy = SyntheticIdentifierPolicy(random.Random(1))
        assert policy.mask("bad", False, set()) == INVALID_IDENTIFIER

    def test_same_seed_same_sequence(self) -> None:
        a = SyntheticIdentifierPolicy(random.Random(42))
        b = SyntheticIdentifierPolicy(random.Random(42))
        assert [a.mask("X", True, set()) for _ in range(5)] == [
            b.mask("X", True, set()) for _ in range(5)
        ]

    def test_retries_on_collision(self) -> None:
        probe = SyntheticIdentifierPolicy(random.Random(7))
        first = probe.mask("ABCDE1234F", True, set())

        policy = SyntheticIdentifierPolicy(random.Random(7))
        masked = policy.mask("ABCDE1234F", True, {first})

        assert masked != first
        assert is_valid_identifier(masked)

    def test_raises_when_every_draw_collides(self) -> None:
        rng = MagicMock(spec=random.Random)
        rng.choices.side_effect = lambda population, k: [population[0]] * k
        policy = SyntheticIdentifierPolicy(rng, max_attempts=3)

        with pytest.raises(GenerationExhaustedError, match="3 attempts"):
            policy.mask("ABCDE1234F", True, {"AAAAA0000A"})


class TestAccountNumberPolicy:
    def test_category(self) -> None:
        assert AccountNumberPolicy.category is FieldCategory.ACCOUNT_NUMBER

    def test_accepts_any_value(self) -> None:
        policy = AccountNumberPolicy(random.Random(0))
        assert policy.validate("not a number at all")

    def test_produces_eight_digits_without_leading_zero(self) -> None:
        policy = AccountNumberPolicy(random.Random(3))
        for _ in range(200):
            masked = policy.mask("12345678", True, set())
            assert len(masked) == 8
            assert masked.isdigit()
            assert masked[0] != "0"

    def test_retries_on_collision(self) -> None:
        first = AccountNumberPolicy(random.Random(9)).mask("1", True, set())
        masked = AccountNumberPolicy(random.Random(9)).mask("1", True, {first})
        assert masked != first

    def test_raises_when_space_exhausted(self) -> None:
        rng = MagicMock(spec=random.Random)
        rng.choice.return_value = "1"
        rng.choices.return_value = ["0"] * 7
        policy = AccountNumberPolicy(rng, max_attempts=5)

        with pytest.raises(GenerationExhaustedError):
            policy.mask("42", True, {"10000000"})


class TestPersonalNamePolicy:
    def test_draws_from_reference_list(self) -> None:
        policy = PersonalNamePolicy(random.Random(5), NAMES)
        for i in range(100):
            assert policy.mask(f"Original {i}", True, set()) in NAMES

    def test_may_repeat_placeholders(self) -> None:
        policy = PersonalNamePolicy(random.Random(5), NAMES)
        drawn = [policy.mask(f"Original {i}", True, set()) for i in range(50)]
        assert len(set(drawn)) < len(drawn)

    def test_ignores_taken_values(self) -> None:
        policy = PersonalNamePolicy(random.Random(0), NAMES[:1] * 10)
        assert policy.mask("Amit", True, {NAMES[0]}) == NAMES[0]
