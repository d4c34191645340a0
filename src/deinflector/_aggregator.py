"""Merge search results that share a (word, type) pair."""

from __future__ import annotations

from ._types import Candidate, DerivationPath, WordClass


class CandidateAggregator:
    __slots__ = ("_found",)

    def __init__(self) -> None:
        # (word, type) -> distinct paths; dict order is discovery order
        self._found: dict[tuple[str, int], list[DerivationPath]] = {}

    def __len__(self) -> int:
        return len(self._found)

    def __contains__(self, key: tuple[str, int]) -> bool:
        return key in self._found

    def add(self, word: str, type_: int, path: DerivationPath) -> bool:
        """Record a path to (word, type_). Return True if the pair is new."""
        key = (word, type_)
        paths = self._found.get(key)
        if paths is None:
            self._found[key] = [path]
            return True
        if path not in paths:
            paths.append(path)
        return False

    def candidates(self) -> list[Candidate]:
        return [
            Candidate(word=word, type=WordClass(type_), reasons=tuple(paths))
            for (word, type_), paths in self._found.items()
        ]
