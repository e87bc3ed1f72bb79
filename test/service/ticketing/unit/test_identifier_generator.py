from datetime import datetime
import random
import re

import pytest

from src.service.ticketing.driven_adapter.identifier.identifier_generator_impl import (
    IdentifierGeneratorImpl,
)


@pytest.mark.unit
class TestIdentifierGenerator:
    def test_ticket_number_format(
        self, identifier_generator: IdentifierGeneratorImpl, ticket_number_pattern: re.Pattern
    ):
        for _ in range(200):
            assert ticket_number_pattern.match(identifier_generator.ticket_number())

    def test_transaction_number_ends_with_clock_time(
        self,
        identifier_generator: IdentifierGeneratorImpl,
        transaction_number_pattern: re.Pattern,
    ):
        transaction_number = identifier_generator.transaction_number()

        assert transaction_number_pattern.match(transaction_number)
        assert transaction_number[3:] == '142305'

    def test_transaction_time_is_zero_padded(self, clock):
        clock.moment = datetime(2024, 8, 1, 3, 4, 5)
        generator = IdentifierGeneratorImpl(clock=clock, rng=random.Random(0))

        assert generator.transaction_number()[3:] == '030405'

    def test_same_seed_same_sequence(self, clock):
        first = IdentifierGeneratorImpl(clock=clock, rng=random.Random(7))
        second = IdentifierGeneratorImpl(clock=clock, rng=random.Random(7))

        assert [first.ticket_number() for _ in range(3)] == [
            second.ticket_number() for _ in range(3)
        ]
