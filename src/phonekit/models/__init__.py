"""Data models for phonekit."""

from phonekit.models.candidate import CandidateSet, CandidateSetBuilder, ContactMatchSet
from phonekit.models.contact import Contact, PhoneNumberEntry
from phonekit.models.context import LocalContext
from phonekit.models.enums import CandidateSource, HeuristicKind
from phonekit.models.number import CanonicalNumber, DigitSequence

__all__ = [
    "CandidateSet",
    "CandidateSetBuilder",
    "CandidateSource",
    "CanonicalNumber",
    "Contact",
    "ContactMatchSet",
    "DigitSequence",
    "HeuristicKind",
    "LocalContext",
    "PhoneNumberEntry",
]
