"""Deinflector: breadth-first reduction of surface forms to dictionary forms."""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from ._aggregator import CandidateAggregator
from ._table import RuleTable
from ._types import WordClass

if TYPE_CHECKING:
    from ._types import Candidate, DerivationPath

logger = logging.getLogger(__name__)

# Conjugation chains in real text stay well under these; they only stop a
# faulty rule table from running away.
MAX_PATH_LENGTH = 16
MAX_CANDIDATES = 4096


class Deinflector:
    """Reduction engine over an immutable RuleTable.

    Holds no per-call state, so one instance can serve any number of
    threads.
    """

    __slots__ = ("_table", "_max_path_length", "_max_candidates")

    def __init__(
        self,
        table: RuleTable | None = None,
        *,
        max_path_length: int = MAX_PATH_LENGTH,
        max_candidates: int = MAX_CANDIDATES,
    ) -> None:
        if max_path_length < 0:
            raise ValueError("max_path_length must be >= 0")
        if max_candidates < 1:
            raise ValueError("max_candidates must be >= 1")
        self._table = table if table is not None else RuleTable.default()
        self._max_path_length = max_path_length
        self._max_candidates = max_candidates

    @property
    def table(self) -> RuleTable:
        return self._table

    def deinflect(self, word: str) -> list[Candidate]:
        """Return every dictionary-form candidate reachable from word.

        The unreduced word comes first with type WILDCARD and an empty
        path, followed by candidates in breadth-first discovery order.
        Each path lists reasons in the order the conjugations were applied
        to the dictionary form, so the last reason is the one nearest the
        surface.
        """
        if not word:
            return []

        found = CandidateAggregator()
        found.add(word, WordClass.WILDCARD, ())
        queue: deque[tuple[str, int, DerivationPath]] = deque(
            [(word, WordClass.WILDCARD, ())]
        )

        while queue:
            current, classes, path = queue.popleft()
            if len(path) >= self._max_path_length:
                logger.warning(
                    "Path length limit %d reached while deinflecting %r",
                    self._max_path_length, word,
                )
                continue

            for rule, reduced in self._table.match(current, classes):
                if not rule.to_classes or not reduced:
                    continue
                key = (reduced, rule.to_classes)
                if key not in found and len(found) >= self._max_candidates:
                    logger.warning(
                        "Candidate limit %d reached while deinflecting %r",
                        self._max_candidates, word,
                    )
                    return found.candidates()
                new_path = (rule.reason, *path)
                if found.add(reduced, rule.to_classes, new_path):
                    queue.append((reduced, rule.to_classes, new_path))

        return found.candidates()

    def deinflect_batch(self, words: list[str]) -> list[list[Candidate]]:
        """Deinflect multiple words."""
        return [self.deinflect(w) for w in words]
