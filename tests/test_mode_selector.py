import pytest

from selfie_relay.core.selfie_types import Mode
from selfie_relay.nlp.mode_selector import (
    DIRECT_KEYWORDS,
    MIRROR_KEYWORDS,
    matched_keywords,
    resolve_mode,
)


@pytest.mark.parametrize("keyword", DIRECT_KEYWORDS)
def test_direct_keyword_resolves_direct(keyword):
    assert resolve_mode(f"somewhere with a {keyword} nearby") is Mode.DIRECT


@pytest.mark.parametrize("keyword", MIRROR_KEYWORDS)
def test_mirror_keyword_resolves_mirror(keyword):
    assert resolve_mode(f"showing off a {keyword} today") is Mode.MIRROR


def test_direct_keywords_take_precedence_over_mirror():
    assert resolve_mode("wearing a new outfit at the beach") is Mode.DIRECT


def test_no_keywords_defaults_to_mirror():
    assert resolve_mode("holding a cup of tea") is Mode.MIRROR
    assert resolve_mode("") is Mode.MIRROR


def test_matching_is_case_insensitive():
    assert resolve_mode("A Cozy CAFE") is Mode.DIRECT
    assert resolve_mode("Wearing SUNGLASSES") is Mode.MIRROR


def test_matching_is_substring_based():
    assert resolve_mode("big smiles all around") is Mode.DIRECT


@pytest.mark.parametrize("override", ["mirror", Mode.MIRROR])
def test_explicit_mirror_wins_over_direct_keywords(override):
    assert resolve_mode("close-up portrait at a cafe", override) is Mode.MIRROR


def test_explicit_direct_wins_over_mirror_keywords():
    assert resolve_mode("wearing a suit", "direct") is Mode.DIRECT


def test_auto_and_none_use_keywords():
    assert resolve_mode("at the park", "auto") is Mode.DIRECT
    assert resolve_mode("at the park", None) is Mode.DIRECT


def test_unknown_explicit_mode_raises():
    with pytest.raises(ValueError):
        resolve_mode("anything", "sideways")


def test_matched_keywords_reports_both_sets():
    hits = matched_keywords("Wearing a dress in the city")
    assert hits == {"direct": ["city"], "mirror": ["wearing", "dress"]}
