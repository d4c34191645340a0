"""Deinflector error types."""


class DeinflectorError(Exception):
    """Base error for all deinflector failures."""


class DeinflectorVersionError(DeinflectorError):
    """Manifest version mismatch."""


class DeinflectorChecksumError(DeinflectorError):
    """File checksum verification failed."""


class RuleTableError(DeinflectorError):
    """A rule is malformed or would let a word grow."""
