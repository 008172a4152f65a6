"""Contact-side models."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from phonekit.models.candidate import ContactMatchSet
from phonekit.models.number import CanonicalNumber

if TYPE_CHECKING:
    from phonekit.core.heuristics import HeuristicRule
    from phonekit.oracle.base import NumberingPlanOracle


class PhoneNumberEntry(BaseModel):
    """One free-form phone field of a contact, e.g. ``("555-1234", "Home")``."""

    raw_text: str
    label: str | None = None


class Contact(BaseModel):
    """An address-book contact reduced to what discovery needs."""

    display_name: str | None = None
    phone_entries: list[PhoneNumberEntry] = Field(default_factory=list)

    def match_set(
        self,
        local_number: CanonicalNumber | str | None,
        *,
        oracle: NumberingPlanOracle | None = None,
        rules: Sequence[HeuristicRule] | None = None,
    ) -> ContactMatchSet:
        """Canonical numbers this contact may be registered under.

        Args:
            local_number: The owning user's own number; it sets the default
                region for plus-less entries.
            oracle: Numbering-plan data source. Defaults to the shared
                ``phonenumbers``-backed oracle.
            rules: Regional heuristic table. Defaults to
                :data:`phonekit.core.heuristics.DEFAULT_RULES`.
        """
        from phonekit.core.aggregator import aggregate

        return aggregate(self.phone_entries, local_number, oracle=oracle, rules=rules)
