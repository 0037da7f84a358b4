"""
Identity Synthesizer

Draws plausible sender identities from fixed, uncorrelated name and domain pools.
"""

import random
from collections.abc import Sequence
from typing import NamedTuple

from ticketsmith.services.catalog import EMAIL_DOMAINS, FIRST_NAMES, LAST_NAMES


class Identity(NamedTuple):
    """A synthetic ticket sender."""

    first_name: str
    last_name: str
    email: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class IdentitySynthesizer:
    """
    Produce sender identities by three independent uniform draws.

    Repeated identities within a run are expected and harmless.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        first_names: Sequence[str] = FIRST_NAMES,
        last_names: Sequence[str] = LAST_NAMES,
        domains: Sequence[str] = EMAIL_DOMAINS,
    ):
        self._rng = rng or random.Random()
        self._first_names = first_names
        self._last_names = last_names
        self._domains = domains

    def synthesize(self) -> Identity:
        first_name = self._rng.choice(self._first_names)
        last_name = self._rng.choice(self._last_names)
        domain = self._rng.choice(self._domains)

        email = f"{first_name.lower()}.{last_name.lower()}@{domain.lower()}"
        return Identity(first_name=first_name, last_name=last_name, email=email)
