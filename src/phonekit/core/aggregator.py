"""Aggregate candidates across all phone fields of one contact."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from phonekit.core.candidates import candidates_for_context, resolve_local_context
from phonekit.core.heuristics import HeuristicRule
from phonekit.models.candidate import ContactMatchSet
from phonekit.models.contact import PhoneNumberEntry
from phonekit.models.number import CanonicalNumber
from phonekit.oracle import NumberingPlanOracle, get_default_oracle

logger = logging.getLogger("phonekit.aggregator")

EntryLike = PhoneNumberEntry | tuple[str, str | None]


def aggregate(
    entries: Iterable[EntryLike],
    local_number: CanonicalNumber | str | None,
    *,
    oracle: NumberingPlanOracle | None = None,
    rules: Sequence[HeuristicRule] | None = None,
) -> ContactMatchSet:
    """Union the candidates of every ``(raw_text, label)`` entry.

    Labels are only used for logging. An entry without candidates adds
    nothing and never affects the others.

    Example::

        aggregate([("555-1234", "Home"), ("+33 1 70 39 38 00", "Work")], "+13233214321")
        # ContactMatchSet(['+13235551234', '+33170393800'])
    """
    oracle = oracle or get_default_oracle()
    local = resolve_local_context(local_number, oracle)

    e164s: set[str] = set()
    for entry in entries:
        raw_text, label = _unpack(entry)
        candidates = candidates_for_context(raw_text, local, oracle=oracle, rules=rules)
        if not candidates:
            logger.debug("Entry labelled %r has no valid candidates", label)
            continue
        e164s.update(candidates.e164s())
    return ContactMatchSet(e164s)


def _unpack(entry: EntryLike) -> tuple[str, str | None]:
    if isinstance(entry, PhoneNumberEntry):
        return entry.raw_text, entry.label
    raw_text, label = entry
    return raw_text, label
