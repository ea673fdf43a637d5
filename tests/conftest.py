"""Pytest configuration for all tests."""

import random

import pytest

from passrule.core.config import Settings
from passrule.core.logging import configure_logging
from passrule.domain.entities.word_dictionary import WordDictionary


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging():
    """Only log warnings and above while testing."""
    configure_logging(Settings(environment="testing", log_level="WARNING", log_format="console"))


@pytest.fixture
def dictionary() -> WordDictionary:
    """Small case-insensitive dictionary."""
    return WordDictionary(("apple", "banana", "password"), case_sensitive=False)


@pytest.fixture
def seeded_random() -> random.Random:
    """Deterministic random source for reproducible generation."""
    return random.Random(1234)
