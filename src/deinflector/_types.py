"""Data structures for deinflector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag


class Reason(IntEnum):
    """Grammatical operation undone by a rule.

    Values are written into compiled rule tables, so existing members must
    keep their numbers.
    """
    POLITE_PAST_NEGATIVE = 0
    POLITE_NEGATIVE = 1
    POLITE_VOLITIONAL = 2
    CHAU = 3
    SUGIRU = 4
    NASAI = 5
    POLITE_PAST = 6
    TARA = 7
    TARI = 8
    CAUSATIVE = 9
    POTENTIAL_OR_PASSIVE = 10
    SOU = 11
    TAI = 12
    POLITE = 13
    PAST = 14
    NEGATIVE = 15
    PASSIVE = 16
    BA = 17
    VOLITIONAL = 18
    POTENTIAL = 19
    CAUSATIVE_PASSIVE = 20
    TE = 21
    ZU = 22
    IMPERATIVE = 23
    ADV = 24
    NOUN = 25
    IMPERATIVE_NEGATIVE = 26
    CONTINUOUS = 27
    TOKU = 28


class WordClass(IntFlag):
    """Conjugation classes a word form may belong to."""
    ICHIDAN_VERB = 1 << 0
    GODAN_VERB = 1 << 1
    I_ADJ = 1 << 2
    KURU_VERB = 1 << 3
    SURU_VERB = 1 << 4
    INITIAL = 1 << 5   # unreduced surface form, any class
    WILDCARD = (
        ICHIDAN_VERB | GODAN_VERB | I_ADJ | KURU_VERB | SURU_VERB | INITIAL
    )


DerivationPath = tuple[Reason, ...]


@dataclass(slots=True, frozen=True)
class Rule:
    from_suffix: str
    to_suffix: str
    from_classes: WordClass   # classes the rule may be applied to
    to_classes: WordClass     # classes of the reduced form
    reason: Reason

    def applies_to(self, word: str, classes: int) -> bool:
        return bool(classes & self.from_classes) and word.endswith(
            self.from_suffix
        )

    def apply(self, word: str) -> str:
        """Rewrite the suffix of a word this rule applies to."""
        return word[: len(word) - len(self.from_suffix)] + self.to_suffix


@dataclass(slots=True, frozen=True)
class Candidate:
    word: str
    type: WordClass
    reasons: tuple[DerivationPath, ...]   # distinct paths, discovery order
