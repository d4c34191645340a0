"""Deinflector: recover Japanese dictionary forms from conjugated words."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from ._engine import MAX_CANDIDATES, MAX_PATH_LENGTH, Deinflector
from ._errors import (
    DeinflectorChecksumError,
    DeinflectorError,
    DeinflectorVersionError,
    RuleTableError,
)
from ._labels import REASON_LABELS, describe, format_reasons
from ._loader import load_rules, save_rules
from ._pos import is_compatible, word_class_for_pos
from ._table import RuleTable
from ._types import Candidate, DerivationPath, Reason, Rule, WordClass

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "deinflect",
    "load",
    "Candidate",
    "Deinflector",
    "DeinflectorChecksumError",
    "DeinflectorError",
    "DeinflectorVersionError",
    "DerivationPath",
    "MAX_CANDIDATES",
    "MAX_PATH_LENGTH",
    "REASON_LABELS",
    "Reason",
    "Rule",
    "RuleTable",
    "RuleTableError",
    "WordClass",
    "describe",
    "format_reasons",
    "is_compatible",
    "load_rules",
    "save_rules",
    "word_class_for_pos",
]


def load(
    data_dir: Path | str | None = None,
    *,
    max_path_length: int = MAX_PATH_LENGTH,
    max_candidates: int = MAX_CANDIDATES,
) -> Deinflector:
    """Load a rule table and return a ready-to-use Deinflector.

    Args:
        data_dir: Directory of a compiled rule table. If None, uses the
            built-in rules.
        max_path_length: Longest derivation path that is expanded further.
        max_candidates: Upper bound on distinct candidates per word.
    """
    return Deinflector(
        load_rules(data_dir),
        max_path_length=max_path_length,
        max_candidates=max_candidates,
    )


@lru_cache(maxsize=1)
def _default_deinflector() -> Deinflector:
    return load()


def deinflect(word: str) -> list[Candidate]:
    """Deinflect word with the built-in rules."""
    return _default_deinflector().deinflect(word)
