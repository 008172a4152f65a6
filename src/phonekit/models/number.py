"""Phone number value types."""

from __future__ import annotations

from dataclasses import dataclass

from phonekit.errors import InvalidNumberError


@dataclass(frozen=True)
class DigitSequence:
    """Raw text reduced to ASCII digits.

    Produced by :func:`phonekit.core.normalizer.normalize` and consumed once
    by a parser. An empty sequence is falsy.
    """

    digits: str = ""
    """The digits ``0-9`` in input order."""

    has_plus: bool = False
    """Whether the text started with an explicit international ``+``."""

    def __bool__(self) -> bool:
        return bool(self.digits)

    def __len__(self) -> int:
        return len(self.digits)

    def as_e164_text(self) -> str:
        """Render as ``+digits`` for the canonical parser."""
        return f"+{self.digits}"


@dataclass(frozen=True, eq=False)
class CanonicalNumber:
    """An E.164 phone number that passed the numbering plan's validity check.

    Instances come out of the parsers; the constructor only checks shape.
    Equality and hashing use the canonical ``+<calling code><national>``
    string.
    """

    calling_code: int
    national_number: str

    def __post_init__(self) -> None:
        if isinstance(self.calling_code, bool) or self.calling_code <= 0:
            raise InvalidNumberError(f"Calling code must be positive, got {self.calling_code!r}")
        if not self.national_number.isascii() or not self.national_number.isdigit():
            raise InvalidNumberError("National number must be a non-empty string of digits")

    @property
    def e164(self) -> str:
        return f"+{self.calling_code}{self.national_number}"

    def __str__(self) -> str:
        return self.e164

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CanonicalNumber):
            return NotImplemented
        return self.e164 == other.e164

    def __hash__(self) -> int:
        return hash(self.e164)
