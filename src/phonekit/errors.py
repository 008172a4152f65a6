"""Exception hierarchy for phonekit.

Malformed or ambiguous phone-number input is never an error: parsers return
``None`` and the candidate generator returns an empty set. The exceptions
here signal programmer or configuration mistakes only.
"""

from __future__ import annotations


class PhoneKitError(Exception):
    """Base exception for all phonekit errors."""


class InvalidNumberError(PhoneKitError, ValueError):
    """A canonical number was built from malformed parts."""
