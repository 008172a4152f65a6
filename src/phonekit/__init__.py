"""phonekit - Phone number canonicalization and candidate generation for contact discovery."""

from phonekit._version import __version__
from phonekit.core.aggregator import aggregate
from phonekit.core.candidates import (
    candidates_for_context,
    generate_candidates,
    resolve_local_context,
)
from phonekit.core.heuristics import (
    DEFAULT_RULES,
    HeuristicRule,
    MissingAreaCodeRule,
    PrefixToggleRule,
)
from phonekit.core.normalizer import normalize
from phonekit.core.parser import parse_digit_sequence, parse_e164, parse_phone_number
from phonekit.errors import InvalidNumberError, PhoneKitError
from phonekit.models.candidate import CandidateSet, ContactMatchSet
from phonekit.models.contact import Contact, PhoneNumberEntry
from phonekit.models.context import LocalContext
from phonekit.models.enums import CandidateSource, HeuristicKind
from phonekit.models.number import CanonicalNumber, DigitSequence
from phonekit.oracle import (
    MockNumberingPlanOracle,
    NumberingPlanOracle,
    PhoneNumbersOracle,
    PhoneNumbersOracleConfig,
    RegionConstants,
    get_default_oracle,
)

__all__ = [
    "DEFAULT_RULES",
    "CandidateSet",
    "CandidateSource",
    "CanonicalNumber",
    "Contact",
    "ContactMatchSet",
    "DigitSequence",
    "HeuristicKind",
    "HeuristicRule",
    "InvalidNumberError",
    "LocalContext",
    "MissingAreaCodeRule",
    "MockNumberingPlanOracle",
    "NumberingPlanOracle",
    "PhoneKitError",
    "PhoneNumberEntry",
    "PhoneNumbersOracle",
    "PhoneNumbersOracleConfig",
    "PrefixToggleRule",
    "RegionConstants",
    "__version__",
    "aggregate",
    "candidates_for_context",
    "generate_candidates",
    "get_default_oracle",
    "normalize",
    "parse_digit_sequence",
    "parse_e164",
    "parse_phone_number",
    "resolve_local_context",
]
