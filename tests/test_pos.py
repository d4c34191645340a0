"""Tests for mapping dictionary part-of-speech tags onto word classes."""

import pytest

from deinflector import Candidate, WordClass, is_compatible, word_class_for_pos


@pytest.mark.parametrize("tags, expected", [
    (["v1"], WordClass.ICHIDAN_VERB),
    (["v1-s", "vt"], WordClass.ICHIDAN_VERB),
    (["v5r"], WordClass.GODAN_VERB),
    (["v5k-s"], WordClass.GODAN_VERB),
    (["adj-i"], WordClass.I_ADJ),
    (["vk"], WordClass.KURU_VERB),
    (["vs-i"], WordClass.SURU_VERB),
    (["vz"], WordClass.SURU_VERB),
    (["n", "vs"], WordClass(0)),
    ([], WordClass(0)),
])
def test_word_class_for_pos(tags, expected):
    assert word_class_for_pos(tags) == expected | WordClass.INITIAL


def test_several_classes():
    classes = word_class_for_pos(["v1", "v5r"])
    assert classes & WordClass.ICHIDAN_VERB
    assert classes & WordClass.GODAN_VERB


def test_deinflected_candidate_needs_matching_class():
    candidate = Candidate(word="走る", type=WordClass.GODAN_VERB, reasons=((),))
    assert is_compatible(candidate, ["v5r", "vi"])
    assert not is_compatible(candidate, ["v1"])
    assert not is_compatible(candidate, ["n"])


def test_unreduced_word_matches_any_entry(engine):
    identity = engine.deinflect("猫")[0]
    assert is_compatible(identity, ["n"])
    assert is_compatible(identity, [])


def _lookup(engine, word, entries):
    return [
        c.word for c in engine.deinflect(word)
        if c.word in entries and is_compatible(c, entries[c.word])
    ]


def test_lookup_filtering(engine):
    """走ります reaches 走る only as a godan verb."""
    assert _lookup(engine, "走ります", {"走る": ["v5r", "vi"]}) == ["走る"]
    assert _lookup(engine, "走ります", {"走る": ["v1"]}) == []
