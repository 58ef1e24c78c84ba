import pytest

from clearspeak.engine import IntentEngine
from clearspeak.intents import POPULAR_IDS


def test_empty_input_falls_back_to_popular(engine):
    suggestions = engine.suggest("")
    assert [s.id for s in suggestions] == list(POPULAR_IDS[:5])


def test_unmatched_input_falls_back_to_popular(engine):
    assert [s.id for s in engine.suggest("zzzzqqqq xxyy", limit=3)] == list(POPULAR_IDS[:3])


def test_matching_input_is_ranked(engine):
    suggestions = engine.suggest("water")
    assert suggestions[0].id == "water-1"
    assert 0.0 < suggestions[0].confidence <= 0.7


def test_selection_lifts_a_suggestion(engine):
    assert engine.suggest("i need")[0].id == "help-1"
    engine.select("water-1")
    assert engine.suggest("i need")[0].id == "water-1"


def test_select_unknown_id_raises(engine):
    with pytest.raises(KeyError):
        engine.select("nope-1")


def test_select_records_usage(engine):
    entry = engine.select("hello-1")
    history, counts = engine.state.snapshot()
    assert history == ["Hello"]
    assert counts == {"social": 1, "Hello": 1}
    assert entry.id == "hello-1"


def test_engines_do_not_share_state():
    first, second = IntentEngine(), IntentEngine()
    first.select("hello-1")
    assert second.state.snapshot() == ([], {})
    assert first.cache is not second.cache


def test_category_helpers(engine):
    assert [s.id for s in engine.emergency()] == ["help-1", "help-2", "emergency-1", "emergency-2"]
    assert [s.id for s in engine.by_category("navigation", 2)] == ["restroom-1", "restroom-2"]
    assert len(engine.popular()) == 5
