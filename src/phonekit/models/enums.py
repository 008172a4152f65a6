"""String enums for phonekit."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class HeuristicKind(StrEnum):
    MISSING_AREA_CODE = "missing_area_code"
    PREFIX_TOGGLE = "prefix_toggle"


@unique
class CandidateSource(StrEnum):
    """How a candidate was derived from the raw text."""

    DIRECT = "direct"
    IMPLIED_PLUS = "implied_plus"
    MISSING_AREA_CODE = "missing_area_code"
    PREFIX_TOGGLE = "prefix_toggle"
