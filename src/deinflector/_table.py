"""RuleTable: validated, suffix-indexed deinflection rules."""

from __future__ import annotations

import logging
from collections import defaultdict
from functools import lru_cache
from typing import TYPE_CHECKING

import ahocorasick

from ._errors import RuleTableError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from ._types import Rule

logger = logging.getLogger(__name__)


def _validate(rule: Rule) -> None:
    if not rule.from_suffix:
        raise RuleTableError(f"Rule has an empty from_suffix: {rule!r}")
    if len(rule.to_suffix) > len(rule.from_suffix):
        raise RuleTableError(
            f"Rule {rule.from_suffix!r} -> {rule.to_suffix!r} "
            f"lengthens the word"
        )


class RuleTable:
    """Immutable rule collection indexed by suffix.

    Rules sharing a from_suffix are grouped and stored in a trie keyed on
    the reversed suffix, so every suffix of a word is found by walking the
    reversed word once.
    """

    __slots__ = ("_rules", "_trie")

    def __init__(self, rules: Iterable[Rule]) -> None:
        self._rules: tuple[Rule, ...] = tuple(rules)

        grouped: dict[str, list[Rule]] = defaultdict(list)
        for rule in self._rules:
            _validate(rule)
            grouped[rule.from_suffix].append(rule)

        self._trie = ahocorasick.Automaton()
        for suffix, group in grouped.items():
            self._trie.add_word(suffix[::-1], (suffix, tuple(group)))

        logger.debug(
            "Indexed %d rules under %d suffixes", len(self._rules), len(grouped)
        )

    @classmethod
    def default(cls) -> RuleTable:
        """Return the built-in rule table, constructed on first use."""
        return _default_table()

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def match(self, word: str, classes: int) -> list[tuple[Rule, str]]:
        """Return (rule, reduced word) for every rule applicable to word.

        Longer suffixes come first. A word no rule applies to yields an
        empty list.
        """
        tail = word[::-1]
        groups: list[tuple[str, tuple[Rule, ...]]] = []
        for end in range(1, len(tail) + 1):
            key = tail[:end]
            if not self._trie.match(key):
                break
            entry = self._trie.get(key, None)
            if entry is not None:
                groups.append(entry)

        matches: list[tuple[Rule, str]] = []
        for suffix, group in reversed(groups):
            stem = word[: len(word) - len(suffix)]
            for rule in group:
                if rule.from_classes & classes:
                    matches.append((rule, stem + rule.to_suffix))
        return matches


@lru_cache(maxsize=1)
def _default_table() -> RuleTable:
    from ._rules import RULES

    return RuleTable(RULES)
