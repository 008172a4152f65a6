"""Local numbering context derived from the owning user's number."""

from __future__ import annotations

from dataclasses import dataclass

from phonekit.models.number import CanonicalNumber


@dataclass(frozen=True)
class LocalContext:
    """Default region for plus-less input.

    Attributes:
        number: The owning user's own canonical number.
        region: Region of ``number`` as reported by the oracle, if known.
    """

    number: CanonicalNumber
    region: str | None = None

    @property
    def calling_code(self) -> int:
        return self.number.calling_code
