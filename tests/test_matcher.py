import pytest

from clearspeak.intents import INTENT_TABLE, FuzzyMatcher, IntentCatalog, normalize


@pytest.fixture(scope="module")
def matcher() -> FuzzyMatcher:
    return FuzzyMatcher(IntentCatalog())


@pytest.mark.parametrize("entry", INTENT_TABLE, ids=lambda e: e.id)
def test_exact_phrase_ranks_its_entry_first(matcher: FuzzyMatcher, entry):
    results = matcher.search(entry.phrase)
    assert results
    assert results[0].entry.id == entry.id
    assert results[0].score == pytest.approx(1.0)


def test_empty_and_blank_queries_yield_nothing(matcher: FuzzyMatcher):
    assert matcher.search("") == []
    assert matcher.search("   ") == []
    assert matcher.search(None) == []
    assert matcher.search("?!") == []


def test_fragments_below_min_length_are_ignored(matcher: FuzzyMatcher):
    assert matcher.search("a") == []


def test_matching_is_case_insensitive(matcher: FuzzyMatcher):
    top = matcher.search("I NEED WATER")[0]
    assert top.entry.id == "water-1"
    assert top.score == pytest.approx(1.0)


def test_typo_still_surfaces_entry_with_reduced_score(matcher: FuzzyMatcher):
    results = matcher.search("ned help")
    assert results[0].entry.id == "help-1"
    assert 0.0 < results[0].score < 1.0


def test_word_order_variation_tolerated(matcher: FuzzyMatcher):
    top = matcher.search("help i need")[0]
    assert top.entry.id == "help-1"
    assert 0.9 <= top.score < 1.0


def test_enhanced_phrase_is_searched(matcher: FuzzyMatcher):
    results = matcher.search("nearest restroom")
    assert results[0].entry.id == "restroom-1"


def test_unrelated_text_is_excluded(matcher: FuzzyMatcher):
    assert matcher.search("zzzzqqqq xxyy") == []


def test_results_sorted_and_within_unit_interval(matcher: FuzzyMatcher):
    results = matcher.search("need")
    scores = [m.score for m in results]
    assert scores == sorted(scores, reverse=True)
    assert all(0.0 <= s <= 1.0 for s in scores)
    assert all(s >= matcher.threshold for s in scores)


def test_search_is_repeatable(matcher: FuzzyMatcher):
    assert matcher.search("bathrom") == matcher.search("bathrom")


def test_match_unpacks_as_pair(matcher: FuzzyMatcher):
    entry, score = matcher.search("Thanks")[0]
    assert entry.id == "thanks-2"
    assert score == pytest.approx(1.0)


def test_zero_tolerance_keeps_only_exact_matches():
    strict = FuzzyMatcher(IntentCatalog(), distance_tolerance=0.0)
    results = strict.search("Thanks")
    assert [m.entry.id for m in results] == ["thanks-2"]
    assert strict.search("Thanx") == []


def test_invalid_tolerance_rejected():
    with pytest.raises(ValueError):
        FuzzyMatcher(IntentCatalog(), distance_tolerance=1.5)


def test_normalize_strips_punctuation_but_keeps_apostrophes():
    assert normalize("  Where's   the Bathroom?! ") == "where's the bathroom"
    assert normalize(None) == ""
