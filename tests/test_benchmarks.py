"""Benchmark suite for the deinflection engine.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import deinflector
from deinflector import RuleTable, WordClass
from deinflector._rules import RULES

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample words, from plain to deeply conjugated
# ---------------------------------------------------------------------------

SAMPLE_WORDS = {
    "dictionary": "見る",
    "polite": "走ります",
    "chain_3": "踊りたくなかった",
    "chain_5": "食べさせられたくなかった",
    "long_polite": "読まされませんでした",
}

CORPUS = list(SAMPLE_WORDS.values()) * 20


# ---------------------------------------------------------------------------
# 1. Startup
# ---------------------------------------------------------------------------


def test_bench_table_build(benchmark):
    """Index the built-in rules into a fresh RuleTable."""
    table = benchmark(RuleTable, RULES)
    benchmark.extra_info["n_rules"] = len(table)


# ---------------------------------------------------------------------------
# 2. Suffix lookup
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("word_key", list(SAMPLE_WORDS.keys()))
def test_bench_match(benchmark, engine, word_key):
    word = SAMPLE_WORDS[word_key]
    benchmark.extra_info["word_key"] = word_key
    benchmark(engine.table.match, word, WordClass.WILDCARD)


# ---------------------------------------------------------------------------
# 3. End-to-end deinflection
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("word_key", list(SAMPLE_WORDS.keys()))
def test_bench_deinflect(benchmark, engine, word_key):
    word = SAMPLE_WORDS[word_key]
    benchmark.extra_info["word_key"] = word_key
    result = benchmark(engine.deinflect, word)
    benchmark.extra_info["n_candidates"] = len(result)
    assert result[0].word == word


def test_bench_deinflect_batch(benchmark, engine):
    benchmark.extra_info["n_words"] = len(CORPUS)
    results = benchmark(engine.deinflect_batch, CORPUS)
    assert len(results) == len(CORPUS)


def test_bench_module_level(benchmark):
    benchmark(deinflector.deinflect, SAMPLE_WORDS["chain_3"])
