"""Configuration for the phonenumbers-backed oracle."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RegionConstants(BaseModel):
    """Structural constants for one region.

    Any field left as ``None`` falls back to what the metadata implies.
    """

    subscriber_length: int | None = Field(default=None, gt=0)
    area_code_length: int | None = Field(default=None, gt=0)
    mobile_prefix_digit: str | None = Field(default=None, pattern=r"^[0-9]$")


class PhoneNumbersOracleConfig(BaseModel):
    """Numbering-plan overrides layered on top of libphonenumber metadata.

    Attributes:
        legacy_prefixes: Digits a calling code used to require at the start
            of its national numbers. Numbers carrying the old prefix stay
            valid when the rest of the number is valid; Mexico dropped the
            mobile ``1`` in 2019 but accounts registered as ``+521...``
            still exist.
        region_constants: Per-region structural constants, keyed by ISO
            3166-1 alpha-2 region code.
    """

    legacy_prefixes: dict[int, str] = Field(default_factory=lambda: {52: "1"})
    region_constants: dict[str, RegionConstants] = Field(
        default_factory=lambda: {"BR": RegionConstants(mobile_prefix_digit="9")}
    )
