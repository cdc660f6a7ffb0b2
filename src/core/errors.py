"""Exception hierarchy of the catalogue.

The Prototype and Bridge contracts are total and never raise: copy refusal is
a value (`CopyUnsupported`) and out-of-range volume is clamped. Only the
peripheral construction helpers (builder, factory method) reject input.
"""

from __future__ import annotations


class PatternError(Exception):
    """Base class for every error raised by this package."""


class IncompleteBuildError(PatternError, ValueError):
    """A builder was asked to build before all required fields were set."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"cannot build, unset fields: {', '.join(self.missing)}")


class UnknownDeliveryTypeError(PatternError, ValueError):
    """The factory method received something that is not a delivery type."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"unknown delivery type: {value!r}")
