"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from phonekit.oracle.config import RegionConstants
from phonekit.oracle.mock import MockNumberingPlanOracle

# Numbers the mock numbering plan treats as real subscriber numbers.
VALID_NUMBERS = (
    # North America
    "+19025550123",
    "+18085550101",
    "+13213214321",
    "+13233214321",
    "+13235551234",
    "+15705551234",
    # Europe / Oceania
    "+33170393800",
    "+33639981234",
    "+447700900123",
    "+442079460018",
    "+493083050",
    "+61255504321",
    # Mexico, before and after the mobile "1" was dropped
    "+528341639157",
    "+5218341639157",
    "+528341635555",
    "+5218341634444",
    # Brazil
    "+5521912345678",
    "+5521987654321",
    "+552187654321",
    "+552287654321",
    "+5522987654321",
)

REGIONS = {
    "US": 1,
    "CA": 1,
    "FR": 33,
    "GB": 44,
    "DE": 49,
    "AU": 61,
    "MX": 52,
    "BR": 55,
}

NANP = RegionConstants(subscriber_length=7, area_code_length=3)

REGION_CONSTANTS = {
    "US": NANP,
    "CA": NANP,
    "BR": RegionConstants(subscriber_length=8, area_code_length=2, mobile_prefix_digit="9"),
}

# Domestic trunk prefixes; the North-American "1" doubles as the calling code.
NATIONAL_PREFIXES = {"FR": "0", "GB": "0", "DE": "0", "AU": "0", "BR": "0"}


def make_oracle(valid_numbers: tuple[str, ...] = VALID_NUMBERS) -> MockNumberingPlanOracle:
    return MockNumberingPlanOracle(
        regions=REGIONS,
        valid_numbers=valid_numbers,
        region_constants=REGION_CONSTANTS,
        national_prefixes=NATIONAL_PREFIXES,
    )


@pytest.fixture
def oracle() -> MockNumberingPlanOracle:
    return make_oracle()
