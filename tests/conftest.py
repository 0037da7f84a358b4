"""Pytest configuration and fixtures."""

import random

import pytest

from ticketsmith.services.generator import TicketSynthesizer, generate_batch


class FirstPickRandom:
    """RNG stand-in that always picks the first option."""

    def choice(self, seq):
        return seq[0]

    def randrange(self, stop):
        return 0


@pytest.fixture
def first_pick_rng():
    """RNG that always selects the first category, template, name and domain."""
    return FirstPickRandom()


@pytest.fixture
def seeded_rng():
    """Deterministic RNG for reproducible batches."""
    return random.Random(1234)


@pytest.fixture
def sample_batch(seeded_rng):
    """A small generated batch."""
    return generate_batch(12, synthesizer=TicketSynthesizer(rng=seeded_rng))


@pytest.fixture
def sample_templates():
    """Minimal template catalog input."""
    return {
        "billing": [
            {
                "subject": "Charged twice",
                "body": "My card was charged twice this month.",
                "sub_category": "refund_request",
                "sentiment": "frustrated",
                "intensity": 7,
            },
        ],
        "general": [
            {
                "subject": "How do I invite team members?",
                "body": "Where do I find the option to invite users?",
                "sub_category": "general_question",
                "sentiment": "neutral",
                "intensity": 2,
            },
        ],
    }
