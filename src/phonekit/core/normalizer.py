"""Reduce free-form phone text to digits."""

from __future__ import annotations

import unicodedata

from phonekit.models.number import DigitSequence

# ASCII plus and the fullwidth plus some East Asian keyboards produce.
_PLUS_SIGNS = frozenset("+＋")


def normalize(raw: str | None) -> DigitSequence:
    """Strip presentation characters from *raw*.

    Only decimal digits survive (non-ASCII digits are mapped to ``0-9``). A
    ``+`` marks an explicit international prefix only when it leads the
    text; anywhere else it is dropped like any other punctuation.

    Example::

        normalize("+1 (902) 555-0123")  # DigitSequence("19025550123", has_plus=True)
        normalize("555+1234")           # DigitSequence("5551234", has_plus=False)

    Never raises. Input without digits yields an empty sequence.
    """
    if not raw:
        return DigitSequence()

    text = raw.strip()
    digits = "".join(str(unicodedata.decimal(ch)) for ch in text if ch.isdecimal())
    if not digits:
        return DigitSequence()
    return DigitSequence(digits=digits, has_plus=text[0] in _PLUS_SIGNS)
