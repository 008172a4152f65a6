"""Candidate generation for ambiguous phone number text.

Address books are full of numbers saved the way people dial them locally:
no calling code, no area code, or a prefix the numbering plan has since
dropped. Discovery matches canonical strings exactly, so for each raw
field we enumerate every canonical form a contact might have registered
under, most direct interpretation first.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from phonekit.core.heuristics import DEFAULT_RULES, HeuristicRule
from phonekit.core.normalizer import normalize
from phonekit.core.parser import parse_digit_sequence, parse_e164
from phonekit.models.candidate import CandidateSet, CandidateSetBuilder
from phonekit.models.context import LocalContext
from phonekit.models.enums import CandidateSource, HeuristicKind
from phonekit.models.number import CanonicalNumber
from phonekit.oracle import NumberingPlanOracle, get_default_oracle

logger = logging.getLogger("phonekit.candidates")

# Heuristic phases run in this order; later phases see earlier candidates.
_PHASES = (HeuristicKind.MISSING_AREA_CODE, HeuristicKind.PREFIX_TOGGLE)


def resolve_local_context(
    local_number: CanonicalNumber | str | None,
    oracle: NumberingPlanOracle | None = None,
) -> LocalContext | None:
    """Build the numbering context implied by the user's own number.

    Returns ``None`` (and logs a warning) when *local_number* is not a valid
    canonical number; plus-less input then cannot be resolved at all.
    """
    if local_number is None:
        return None
    oracle = oracle or get_default_oracle()

    if isinstance(local_number, CanonicalNumber):
        number: CanonicalNumber | None = local_number
    else:
        seq = normalize(local_number)
        number = parse_e164(seq.as_e164_text(), oracle=oracle) if seq.has_plus else None
    if number is None:
        logger.warning("Local number is not a valid E.164 number; no default region")
        return None

    region = oracle.region_for_number(number.calling_code, number.national_number)
    return LocalContext(number=number, region=region)


def generate_candidates(
    raw: str | None,
    local_number: CanonicalNumber | str | None,
    *,
    oracle: NumberingPlanOracle | None = None,
    rules: Sequence[HeuristicRule] | None = None,
) -> CandidateSet:
    """Enumerate the canonical numbers *raw* may refer to.

    Args:
        raw: Free-form phone text from an address book.
        local_number: The owning user's own number (``CanonicalNumber`` or
            E.164 string); its calling code is the default for plus-less
            input and its area code fills in subscriber-only input.
        oracle: Numbering-plan data source. Defaults to the shared
            ``phonenumbers``-backed oracle.
        rules: Regional heuristic table. Defaults to :data:`DEFAULT_RULES`.

    Returns:
        Deduplicated candidates in this order: the direct parse, the
        plus-less digits read as international, then heuristic variants.
        Only fully valid numbers are included, so an impossible number
        yields an empty set even when it was typed with a ``+``.
    """
    oracle = oracle or get_default_oracle()
    local = resolve_local_context(local_number, oracle)
    return candidates_for_context(raw, local, oracle=oracle, rules=rules)


def candidates_for_context(
    raw: str | None,
    local: LocalContext | None,
    *,
    oracle: NumberingPlanOracle | None = None,
    rules: Sequence[HeuristicRule] | None = None,
) -> CandidateSet:
    """Same as :func:`generate_candidates` with an already resolved context."""
    oracle = oracle or get_default_oracle()
    rules = DEFAULT_RULES if rules is None else rules

    seq = normalize(raw)
    builder = CandidateSetBuilder()
    if not seq:
        return builder.build()

    default_calling_code = local.calling_code if local else None
    builder.add(
        parse_digit_sequence(seq, default_calling_code=default_calling_code, oracle=oracle),
        CandidateSource.DIRECT,
    )
    if not seq.has_plus:
        # Foreign contacts are often saved as "52 834..." without the plus
        builder.add(parse_e164(seq.as_e164_text(), oracle=oracle), CandidateSource.IMPLIED_PLUS)

    for phase in _PHASES:
        for rule in rules:
            if rule.kind is not phase:
                continue
            for number in rule.expand(seq, list(builder), local, oracle):
                if builder.add(number, CandidateSource(phase.value)):
                    logger.debug("Rule %s added a candidate", rule)

    result = builder.build()
    logger.debug("Generated %d candidate(s) from %d digit(s)", len(result), len(seq))
    return result
