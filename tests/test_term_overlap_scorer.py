# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Description: test_term_overlap_scorer.py
# -----------------------------------------------------------------------------
import pytest

import settings
from loader.GeoDatasetLoader import GeoDatasetLoader
from search.GeoScorer import ScoringMode, TermOverlapScorer, count_occurrences, query_terms, score
from search.errors import InvalidQuery


def test_bridge_river_scenario(two_record_dataset):
    results = score("bridge river", two_record_dataset)

    assert len(results) == 1
    assert results[0].index == 0
    assert results[0].relevance == 2


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_blank_query_is_invalid(two_record_dataset, query):
    with pytest.raises(InvalidQuery) as exc:
        score(query, two_record_dataset)

    assert str(exc.value) == settings.BLANK_QUERY_PROMPT


def test_query_is_lowercased_and_split_on_any_whitespace():
    assert query_terms("  Blue   ROOF\tRiver ") == ["blue", "roof", "river"]


def test_substring_counting_matches_inside_longer_words():
    # "river" inside "riverbank" and "riverside" counts too
    assert count_occurrences("river, riverbank, riverside", "river") == 3
    assert count_occurrences("aaaa", "aa") == len("aaaa".split("aa")) - 1


def test_description_is_lowercased(two_record_dataset):
    dataset = GeoDatasetLoader.from_objects([
        {"description_from_model": "A BLUE Bridge", "bbox": "(0,0,1,1)"},
    ])
    assert score("blue bridge", dataset)[0].relevance == 2


def test_repeated_terms_count_again(two_record_dataset):
    assert score("bridge bridge", two_record_dataset)[0].relevance == 2


def test_ranking_is_descending_and_stable(river_dataset):
    results = TermOverlapScorer().score("river", river_dataset)

    # a: "river" x3 (river, river, riverside); b and d: one each, kept in dataset order
    assert [r.index for r in results] == [0, 1, 3]
    assert [r.relevance for r in results] == [3, 1, 1]


def test_missing_description_is_skipped(river_dataset):
    results = score("river farm", river_dataset)
    assert 4 not in [r.index for r in results]


def test_bbox_does_not_affect_scoring(river_dataset):
    # record d has an invalid bbox but still matches
    assert 3 in [r.index for r in score("crossing", river_dataset)]


def test_no_match_returns_empty(two_record_dataset):
    assert score("swimming pool", two_record_dataset, mode=ScoringMode.TERM) == []


@pytest.mark.parametrize("query", ["river", "blue roof", "road trees", "bridge", "a", "swimming pool"])
def test_results_positive_and_non_increasing(query):
    dataset = GeoDatasetLoader(settings.DATASET_PATH).load()
    results = score(query, dataset)

    assert all(r.relevance > 0 for r in results)
    assert all(a.relevance >= b.relevance for a, b in zip(results, results[1:]))
