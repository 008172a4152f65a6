"""Abstract base class for numbering-plan data sources."""

from __future__ import annotations

from abc import ABC, abstractmethod


class NumberingPlanOracle(ABC):
    """Read-only numbering-plan queries used by the parsers.

    The engine never inspects numbering-plan metadata directly; every
    calling-code lookup, validity decision and structural constant goes
    through this interface. Implementations must be pure: the same question
    always gets the same answer and no call blocks on I/O.

    Unknown regions and calling codes are answered with ``None`` (or
    ``False`` for validity), never with an exception.
    """

    @property
    def name(self) -> str:
        """Human-readable oracle name."""
        return type(self).__name__

    @abstractmethod
    def calling_code_for(self, region: str) -> int | None:
        """Default calling code for *region*, e.g. ``1`` for ``"US"``."""
        ...

    @abstractmethod
    def region_for_calling_code(self, calling_code: int) -> str | None:
        """Main region that uses *calling_code*."""
        ...

    def region_for_number(self, calling_code: int, national_number: str) -> str | None:
        """Region a specific number belongs to.

        Shared calling codes (``1`` covers the US, Canada and the Caribbean)
        need the national number to pick the right region. The default
        implementation ignores it.
        """
        return self.region_for_calling_code(calling_code)

    @abstractmethod
    def match_calling_code_prefix(self, digits: str) -> tuple[int, str] | None:
        """Split *digits* into a registered calling code and the remainder.

        Returns:
            ``(calling_code, remainder)`` for the longest registered calling
            code that leaves a non-empty remainder, or ``None``.
        """
        ...

    @abstractmethod
    def is_fully_valid(self, calling_code: int, national_number: str) -> bool:
        """Whether the number is assignable, not merely the right length."""
        ...

    @abstractmethod
    def national_subscriber_length(self, region: str) -> int | None:
        """Length of a local subscriber number with the area code removed."""
        ...

    @abstractmethod
    def area_code_length(self, region: str) -> int | None:
        """Number of leading national-number digits that form the area code."""
        ...

    def mobile_prefix_digit(self, region: str) -> str | None:
        """Digit that prefixes mobile subscriber numbers (Brazil's ``9``)."""
        return None

    def strip_national_prefix(self, calling_code: int, digits: str) -> str | None:
        """National number of domestically dialled *digits*, trunk prefix removed.

        ``"0170393800"`` under ``33`` gives ``"170393800"``. Returns ``None``
        when the plan has no trunk prefix or *digits* do not carry it. The
        result is not validated; callers still check it with
        :meth:`is_fully_valid`.
        """
        return None
