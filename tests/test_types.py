"""Tests for Topic and AnalysisResult."""

import dataclasses

import pytest

from tematika import AnalysisResult, Topic


def test_topic_order_and_names():
    assert list(Topic) == [
        Topic.MEDICINE, Topic.HISTORY, Topic.PROGRAMMING,
        Topic.NETWORKS, Topic.CRYPTOGRAPHY, Topic.FINANCE,
    ]
    assert Topic.NETWORKS.value == "networks"
    assert Topic.MEDICINE.display_name == "Медицина"
    assert Topic.CRYPTOGRAPHY.display_name == "Криптография"


def test_build_fills_every_topic():
    result = AnalysisResult.build({Topic.FINANCE: 3}, {Topic.FINANCE: {"банк": 3}}, 10)
    assert set(result.scores) == set(Topic)
    assert set(result.match_details) == set(Topic)
    assert result.score(Topic.HISTORY) == 0
    assert dict(result.matched_terms(Topic.HISTORY)) == {}


def test_all_zero_top_topic_is_first():
    result = AnalysisResult.build({}, {}, 5)
    assert result.top_topic() is Topic.MEDICINE
    assert result.top_topic() is Topic.MEDICINE


def test_top_topic_strict_max():
    result = AnalysisResult.build(
        {Topic.HISTORY: 2, Topic.FINANCE: 5, Topic.NETWORKS: 5}, {}, 10,
    )
    assert result.top_topic() is Topic.NETWORKS


def test_percentage():
    result = AnalysisResult.build({Topic.FINANCE: 3}, {}, 12)
    assert result.percentage(Topic.FINANCE) == 25.0
    assert result.percentage(Topic.MEDICINE) == 0.0


def test_percentage_zero_words():
    result = AnalysisResult.build({Topic.FINANCE: 3}, {}, 0)
    for topic in Topic:
        assert result.percentage(topic) == 0


def test_result_is_immutable():
    result = AnalysisResult.build({Topic.FINANCE: 1}, {Topic.FINANCE: {"банк": 1}}, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.total_words = 2
    with pytest.raises(TypeError):
        result.scores[Topic.FINANCE] = 10
    with pytest.raises(TypeError):
        result.match_details[Topic.FINANCE]["банк"] = 10


def test_build_copies_input():
    details = {Topic.FINANCE: {"банк": 1}}
    result = AnalysisResult.build({Topic.FINANCE: 1}, details, 1)
    details[Topic.FINANCE]["банк"] = 99
    assert result.matched_terms(Topic.FINANCE)["банк"] == 1


def test_result_is_unhashable():
    result = AnalysisResult.build({}, {}, 0)
    with pytest.raises(TypeError):
        hash(result)


def test_direct_construction_freezes_maps():
    scores = {Topic.FINANCE: 2}
    details = {Topic.FINANCE: {"банк": 2}}
    result = AnalysisResult(scores=scores, match_details=details, total_words=4)
    scores[Topic.FINANCE] = 50
    details[Topic.FINANCE]["банк"] = 50
    assert result.score(Topic.FINANCE) == 2
    assert set(result.scores) == set(Topic)
    with pytest.raises(TypeError):
        result.scores[Topic.FINANCE] = 10
    assert result == AnalysisResult.build({Topic.FINANCE: 2}, {Topic.FINANCE: {"банк": 2}}, 4)
