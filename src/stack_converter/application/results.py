"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome.

    Exactly one field is meaningful: ``error`` when the input could not be
    parsed at all, otherwise ``stack`` (possibly empty).
    """

    error: str | None = None
    stack: str | None = None

    @property
    def ok(self) -> bool:
        """Whether the conversion produced a stack."""
        return self.error is None
