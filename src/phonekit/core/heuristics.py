"""Regional numbering-plan heuristics.

Each rule is a small frozen value tagged with a :class:`HeuristicKind`. The
candidate generator applies every missing-area-code rule to the raw digits,
then every prefix-toggle rule to the candidates found so far. Supporting a
new region means adding a rule to the table, not a branch to the generator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import ClassVar

from phonekit.models.context import LocalContext
from phonekit.models.enums import HeuristicKind
from phonekit.models.number import CanonicalNumber, DigitSequence
from phonekit.oracle.base import NumberingPlanOracle


class HeuristicRule(ABC):
    """A regional rule that derives extra candidates."""

    kind: ClassVar[HeuristicKind]

    @abstractmethod
    def expand(
        self,
        seq: DigitSequence,
        candidates: Sequence[CanonicalNumber],
        local: LocalContext | None,
        oracle: NumberingPlanOracle,
    ) -> list[CanonicalNumber]:
        """Return new, fully valid candidates.

        Args:
            seq: The normalized raw input.
            candidates: Candidates emitted so far, best first.
            local: The owning user's numbering context, if known.
            oracle: Numbering-plan data source for validity checks.
        """
        ...


@dataclass(frozen=True)
class MissingAreaCodeRule(HeuristicRule):
    """Borrow the local area code for subscriber-only input.

    Fires when the user's own number has ``calling_code`` and the input is
    exactly a subscriber number for the user's region (``555-1234`` in the
    North-American plan). When the region has a mobile prefix digit, a
    subscriber number one digit longer that starts with it also qualifies;
    the area code then goes in front of the prefix digit. A trunk prefix
    typed in front of the subscriber number is removed first.
    """

    kind: ClassVar[HeuristicKind] = HeuristicKind.MISSING_AREA_CODE

    calling_code: int

    def expand(
        self,
        seq: DigitSequence,
        candidates: Sequence[CanonicalNumber],
        local: LocalContext | None,
        oracle: NumberingPlanOracle,
    ) -> list[CanonicalNumber]:
        if seq.has_plus or local is None or local.region is None:
            return []
        if local.calling_code != self.calling_code:
            return []

        subscriber_length = oracle.national_subscriber_length(local.region)
        area_code_length = oracle.area_code_length(local.region)
        if not subscriber_length or not area_code_length:
            return []
        mobile_prefix = oracle.mobile_prefix_digit(local.region)
        subscriber = seq.digits
        if not _is_subscriber_number(subscriber, subscriber_length, mobile_prefix):
            stripped = oracle.strip_national_prefix(self.calling_code, subscriber)
            if stripped is None or not _is_subscriber_number(
                stripped, subscriber_length, mobile_prefix
            ):
                return []
            subscriber = stripped

        local_national = local.number.national_number
        if len(local_national) <= area_code_length:
            return []
        national_number = local_national[:area_code_length] + subscriber
        if not oracle.is_fully_valid(self.calling_code, national_number):
            return []
        return [CanonicalNumber(calling_code=self.calling_code, national_number=national_number)]


@dataclass(frozen=True)
class PrefixToggleRule(HeuristicRule):
    """Pair each number with its sibling with or without a prefix digit.

    Models numbering-plan transitions where a digit right after the calling
    code was dropped but old registrations kept it (Mexico removed the
    mobile ``1`` after ``+52``). Only the resolved number's calling code
    matters, not the user's region.
    """

    kind: ClassVar[HeuristicKind] = HeuristicKind.PREFIX_TOGGLE

    calling_code: int
    digit: str

    def __post_init__(self) -> None:
        if not self.digit.isascii() or not self.digit.isdigit():
            raise ValueError(f"Prefix must be digits, got {self.digit!r}")

    def expand(
        self,
        seq: DigitSequence,
        candidates: Sequence[CanonicalNumber],
        local: LocalContext | None,
        oracle: NumberingPlanOracle,
    ) -> list[CanonicalNumber]:
        siblings: list[CanonicalNumber] = []
        for number in candidates:
            if number.calling_code != self.calling_code:
                continue
            national = number.national_number
            if national.startswith(self.digit):
                toggled = national[len(self.digit) :]
            else:
                toggled = self.digit + national
            if toggled and oracle.is_fully_valid(self.calling_code, toggled):
                siblings.append(
                    CanonicalNumber(calling_code=self.calling_code, national_number=toggled)
                )
        return siblings


DEFAULT_RULES: tuple[HeuristicRule, ...] = (
    MissingAreaCodeRule(calling_code=1),
    MissingAreaCodeRule(calling_code=55),
    PrefixToggleRule(calling_code=52, digit="1"),
)
"""North-American and Brazilian local dialing plus the Mexican mobile-``1`` transition."""


def _is_subscriber_number(digits: str, subscriber_length: int, mobile_prefix: str | None) -> bool:
    if len(digits) == subscriber_length:
        return True
    return (
        mobile_prefix is not None
        and len(digits) == subscriber_length + len(mobile_prefix)
        and digits.startswith(mobile_prefix)
    )
