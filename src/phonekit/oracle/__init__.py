"""Numbering-plan oracles."""

from __future__ import annotations

import threading

from phonekit.oracle.base import NumberingPlanOracle
from phonekit.oracle.config import PhoneNumbersOracleConfig, RegionConstants
from phonekit.oracle.libphonenumber import PhoneNumbersOracle
from phonekit.oracle.mock import MockNumberingPlanOracle

__all__ = [
    "MockNumberingPlanOracle",
    "NumberingPlanOracle",
    "PhoneNumbersOracle",
    "PhoneNumbersOracleConfig",
    "RegionConstants",
    "get_default_oracle",
]

_default_oracle: NumberingPlanOracle | None = None
_default_lock = threading.Lock()


def get_default_oracle() -> NumberingPlanOracle:
    """Return the process-wide :class:`PhoneNumbersOracle`, creating it once."""
    global _default_oracle  # noqa: PLW0603
    if _default_oracle is None:
        with _default_lock:
            if _default_oracle is None:
                _default_oracle = PhoneNumbersOracle()
    return _default_oracle
