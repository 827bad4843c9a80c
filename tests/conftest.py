"""Shared pytest fixtures for the full polydiv test suite."""

from __future__ import annotations

import random

import pytest

from polydiv.generator import RandomPolynomialGenerator


@pytest.fixture
def seeded_rng() -> random.Random:
    """Provide a deterministic random source for property-style tests."""

    return random.Random(20240611)


@pytest.fixture
def polynomial_generator(seeded_rng: random.Random) -> RandomPolynomialGenerator:
    """Provide a random polynomial generator bound to the seeded source."""

    return RandomPolynomialGenerator(seeded_rng)
