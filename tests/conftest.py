"""
Pytest configuration and shared fixtures for idsynth tests.
"""

from datetime import date

import pytest

from idsynth.providers import Providers
from idsynth.swedish import SwedenIdNumber


@pytest.fixture
def today() -> date:
    """Fixed reference day for birthday generation."""
    return date(2024, 6, 15)


@pytest.fixture
def providers(today: date) -> Providers:
    """Seeded default collaborators."""
    return Providers.create(seed=1234, today=today)


@pytest.fixture
def generator(providers: Providers) -> SwedenIdNumber:
    """Seeded Swedish personnummer generator."""
    return SwedenIdNumber(providers=providers)
