"""Shared fixtures for tematika tests."""

import pytest

import tematika
from tematika import DictionaryStore, Topic, TopicDictionary


@pytest.fixture(scope="session")
def analyzer():
    """Load the analyzer with bundled dictionaries once for all tests."""
    return tematika.load()


@pytest.fixture
def medicine_store():
    """Store with a small Medicine dictionary and nothing else."""
    return DictionaryStore({
        Topic.MEDICINE: TopicDictionary(
            roots=frozenset({"врач", "болезн", "лечен"}),
        ),
    })
