"""Map dictionary part-of-speech tags onto WordClass bits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import WordClass

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import Candidate

# Exact JMdict/EDICT tags; v1* and v5* are matched by prefix below.
_EXACT_TAGS: dict[str, WordClass] = {
    "adj-i": WordClass.I_ADJ,
    "vk": WordClass.KURU_VERB,
    "vs-i": WordClass.SURU_VERB,
    "vs-s": WordClass.SURU_VERB,
    "vz": WordClass.SURU_VERB,
}


def word_class_for_pos(tags: Iterable[str]) -> WordClass:
    """Return the classes a dictionary entry with these tags belongs to.

    INITIAL is always set: any entry may match an unreduced word.
    """
    classes = WordClass.INITIAL
    for tag in tags:
        if tag.startswith("v1"):
            classes |= WordClass.ICHIDAN_VERB
        elif tag.startswith("v5"):
            classes |= WordClass.GODAN_VERB
        else:
            classes |= _EXACT_TAGS.get(tag, WordClass(0))
    return classes


def is_compatible(candidate: Candidate, tags: Iterable[str]) -> bool:
    """True if an entry with these tags may be the candidate's word."""
    return bool(candidate.type & word_class_for_pos(tags))
