"""Compiled rule tables: manifest validation, SHA-256 checks, msgpack I/O."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import msgpack

from ._errors import (
    DeinflectorChecksumError,
    DeinflectorError,
    DeinflectorVersionError,
    RuleTableError,
)
from ._table import RuleTable
from ._types import Reason, Rule, WordClass

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"

_RULES_FILE = "rules.bin"


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise DeinflectorError(f"manifest.json not found in {data_dir}")
    with open(manifest_path) as f:
        return json.load(f)


def _validate_manifest(manifest: dict[str, Any], data_dir: Path) -> None:
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise DeinflectorVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    filepath = data_dir / _RULES_FILE
    if not filepath.exists():
        raise DeinflectorError(f"Missing data file: {filepath}")
    expected = manifest.get("files", {}).get(_RULES_FILE)
    if expected is None:
        raise DeinflectorError(f"No checksum in manifest for {_RULES_FILE}")
    actual = _sha256(filepath)
    if actual != expected:
        raise DeinflectorChecksumError(
            f"Checksum mismatch for {_RULES_FILE}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )


def _word_class(value: Any) -> WordClass:
    if not isinstance(value, int) or value & ~int(WordClass.WILDCARD):
        raise ValueError(f"unknown word class bits in {value!r}")
    return WordClass(value)


def _suffix(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"suffix must be a string, got {value!r}")
    return value


def _decode_rule(index: int, record: Any) -> Rule:
    # record: [from_suffix, to_suffix, from_classes, to_classes, reason]
    try:
        from_suffix, to_suffix, from_classes, to_classes, reason = record
        return Rule(
            from_suffix=_suffix(from_suffix),
            to_suffix=_suffix(to_suffix),
            from_classes=_word_class(from_classes),
            to_classes=_word_class(to_classes),
            reason=Reason(reason),
        )
    except (TypeError, ValueError) as exc:
        raise RuleTableError(f"Invalid rule record #{index}: {exc}") from exc


def load_rules(data_dir: Path | str | None = None) -> RuleTable:
    """Load and validate a compiled rule table.

    Args:
        data_dir: Directory holding manifest.json and rules.bin. If None,
            returns the built-in table.
    """
    if data_dir is None:
        return RuleTable.default()
    data_dir = Path(data_dir)

    manifest = _read_manifest(data_dir)
    _validate_manifest(manifest, data_dir)

    with open(data_dir / _RULES_FILE, "rb") as f:
        raw = msgpack.unpackb(f.read(), raw=False)
    if not isinstance(raw, list):
        raise RuleTableError(f"{_RULES_FILE} does not hold a list of rules")

    table = RuleTable(_decode_rule(i, record) for i, record in enumerate(raw))
    logger.debug("Loaded %d rules from %s", len(table), data_dir)
    return table


def save_rules(rules: Iterable[Rule], data_dir: Path | str) -> Path:
    """Write rules as a compiled table (rules.bin + manifest.json).

    Returns the data directory.
    """
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)

    payload = [
        [
            rule.from_suffix, rule.to_suffix,
            int(rule.from_classes), int(rule.to_classes), int(rule.reason),
        ]
        for rule in rules
    ]
    rules_path = data_dir / _RULES_FILE
    with open(rules_path, "wb") as f:
        f.write(msgpack.packb(payload, use_bin_type=True))

    manifest = {
        "version": _EXPECTED_VERSION,
        "files": {_RULES_FILE: _sha256(rules_path)},
    }
    with open(data_dir / "manifest.json", "w") as f:
        json.dump(manifest, f, indent=2)

    logger.debug("Saved %d rules to %s", len(payload), data_dir)
    return data_dir
