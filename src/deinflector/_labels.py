"""Human-readable labels for derivation paths."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import Reason

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._types import DerivationPath

REASON_LABELS: dict[Reason, str] = {
    Reason.POLITE_PAST_NEGATIVE: "polite past negative",
    Reason.POLITE_NEGATIVE: "polite negative",
    Reason.POLITE_VOLITIONAL: "polite volitional",
    Reason.CHAU: "-chau",
    Reason.SUGIRU: "-sugiru",
    Reason.NASAI: "-nasai",
    Reason.POLITE_PAST: "polite past",
    Reason.TARA: "-tara",
    Reason.TARI: "-tari",
    Reason.CAUSATIVE: "causative",
    Reason.POTENTIAL_OR_PASSIVE: "potential or passive",
    Reason.SOU: "-sou",
    Reason.TAI: "-tai",
    Reason.POLITE: "polite",
    Reason.PAST: "past",
    Reason.NEGATIVE: "negative",
    Reason.PASSIVE: "passive",
    Reason.BA: "-ba",
    Reason.VOLITIONAL: "volitional",
    Reason.POTENTIAL: "potential",
    Reason.CAUSATIVE_PASSIVE: "causative passive",
    Reason.TE: "-te",
    Reason.ZU: "-zu",
    Reason.IMPERATIVE: "imperative",
    Reason.ADV: "adv",
    Reason.NOUN: "noun",
    Reason.IMPERATIVE_NEGATIVE: "imperative negative",
    Reason.CONTINUOUS: "continuous",
    Reason.TOKU: "-toku",
}


def describe(path: DerivationPath) -> str:
    """Format one path as "< -tai < negative < past"."""
    return " ".join(f"< {REASON_LABELS[reason]}" for reason in path)


def format_reasons(reasons: Iterable[DerivationPath]) -> str:
    """Format all paths of a candidate, joined with "or".

    The empty path of the unreduced word contributes nothing.
    """
    return " or ".join(describe(path) for path in reasons if path)
