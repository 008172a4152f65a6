"""Canonical and contextual phone number parsers.

Both parsers report failure as ``None``. Bad or ambiguous input is the
common case for address-book text, so nothing here raises on user data.
"""

from __future__ import annotations

import logging

from phonekit.core.normalizer import normalize
from phonekit.models.number import CanonicalNumber, DigitSequence
from phonekit.oracle import NumberingPlanOracle, get_default_oracle

logger = logging.getLogger("phonekit.parser")


def parse_e164(
    text: str | None, *, oracle: NumberingPlanOracle | None = None
) -> CanonicalNumber | None:
    """Parse an already canonical ``+<digits>`` string.

    No separators are tolerated. The digits must start with a registered
    calling code and the rest must be a fully valid national number.

    Example::

        parse_e164("+33170393800")   # CanonicalNumber(33, "170393800")
        parse_e164("+190255501238")  # None, too long for +1
    """
    if not text or not text.startswith("+"):
        return None
    digits = text[1:]
    if not digits.isascii() or not digits.isdigit():
        return None

    oracle = oracle or get_default_oracle()
    match = oracle.match_calling_code_prefix(digits)
    if match is None:
        logger.debug("No calling code matches %d-digit input", len(digits))
        return None
    calling_code, national_number = match
    return _validated(calling_code, national_number, oracle)


def parse_phone_number(
    text: str | None,
    *,
    calling_code: int | str | None = None,
    default_region: str | None = None,
    oracle: NumberingPlanOracle | None = None,
) -> CanonicalNumber | None:
    """Resolve user-entered text to one canonical number.

    Args:
        text: Free-form phone text, e.g. ``"1 (902) 555-0123"``.
        calling_code: Calling code the digits are known to belong to. It
            takes precedence over *default_region*.
        default_region: Region assumed for plus-less input, e.g. ``"US"``.
        oracle: Numbering-plan data source. Defaults to the shared
            ``phonenumbers``-backed oracle.

    Returns:
        The canonical number, or ``None`` when no interpretation is valid.
        Plus-less text is only ever resolved against ``default_region``;
        ``"33 1 70 39 38 00"`` under ``"US"`` is ``None`` even though
        ``+33170393800`` exists.
    """
    oracle = oracle or get_default_oracle()
    default_calling_code = None
    if default_region is not None:
        default_calling_code = oracle.calling_code_for(default_region)
        if default_calling_code is None:
            logger.debug("Unknown default region %s", default_region)

    explicit_calling_code = None
    if calling_code is not None:
        explicit_calling_code = _coerce_calling_code(calling_code)
        if explicit_calling_code is None:
            return None

    return parse_digit_sequence(
        normalize(text),
        calling_code=explicit_calling_code,
        default_calling_code=default_calling_code,
        oracle=oracle,
    )


def parse_digit_sequence(
    seq: DigitSequence,
    *,
    oracle: NumberingPlanOracle,
    calling_code: int | None = None,
    default_calling_code: int | None = None,
) -> CanonicalNumber | None:
    """Contextual parse of already normalized digits.

    Precedence: explicit ``+``, then *calling_code*, then the default
    calling code. A calling code is tried first as typed in without the
    plus (``"19025550123"`` under ``1``), then with the whole digit string
    as the national number, and last with the domestic trunk prefix removed
    (``"0170393800"`` under ``33``).
    """
    if not seq:
        return None
    if seq.has_plus:
        return parse_e164(seq.as_e164_text(), oracle=oracle)
    resolved_calling_code = calling_code if calling_code is not None else default_calling_code
    if resolved_calling_code is None:
        return None

    prefix = str(resolved_calling_code)
    if seq.digits.startswith(prefix):
        number = _validated(resolved_calling_code, seq.digits[len(prefix) :], oracle)
        if number is not None:
            return number
    number = _validated(resolved_calling_code, seq.digits, oracle)
    if number is not None:
        return number

    stripped = oracle.strip_national_prefix(resolved_calling_code, seq.digits)
    if stripped is None:
        return None
    return _validated(resolved_calling_code, stripped, oracle)


def _validated(
    calling_code: int, national_number: str, oracle: NumberingPlanOracle
) -> CanonicalNumber | None:
    if not national_number or not oracle.is_fully_valid(calling_code, national_number):
        return None
    return CanonicalNumber(calling_code=calling_code, national_number=national_number)


def _coerce_calling_code(calling_code: int | str) -> int | None:
    if isinstance(calling_code, int):
        return calling_code if calling_code > 0 else None
    digits = normalize(calling_code).digits
    if not digits or digits.startswith("0"):
        return None
    return int(digits)
