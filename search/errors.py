# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: errors.py
# -----------------------------------------------------------------------------


class InvalidQuery(ValueError):
    """Blank or whitespace-only query. Surfaced to the user as a prompt."""


class BoundingBoxParseError(ValueError):
    """A bbox value did not parse to exactly four finite numbers."""

    def __init__(self, raw: object, reason: str) -> None:
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid bbox {raw!r}: {reason}")


class EmbeddingProviderError(RuntimeError):
    """The embedding provider failed or returned an unusable vector."""


class DatasetLoadError(RuntimeError):
    """The dataset file is missing or not a JSON array of objects."""
