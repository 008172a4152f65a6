"""Numbering-plan oracle backed by the ``phonenumbers`` library."""

from __future__ import annotations

import logging

import phonenumbers
from phonenumbers import PhoneMetadata, PhoneNumberDesc

from phonekit.oracle.base import NumberingPlanOracle
from phonekit.oracle.config import PhoneNumbersOracleConfig, RegionConstants

logger = logging.getLogger("phonekit.oracle")

_MAX_CALLING_CODE_LENGTH = 3


class PhoneNumbersOracle(NumberingPlanOracle):
    """Answers numbering-plan questions from libphonenumber metadata.

    Validity is strict: the number must be valid per the metadata *and*
    ``phonenumbers`` must format it back to exactly the same E.164 string,
    so inputs it would silently rewrite are rejected. Legacy prefixes from
    the config are the one relaxation. Trunk prefixes such as the French
    ``0`` are removed up front by :meth:`strip_national_prefix`, never by
    the validity check.

    Example::

        oracle = PhoneNumbersOracle()
        oracle.match_calling_code_prefix("33170393800")  # (33, "170393800")
        oracle.is_fully_valid(33, "170393800")  # True
    """

    def __init__(self, config: PhoneNumbersOracleConfig | None = None) -> None:
        self._config = config or PhoneNumbersOracleConfig()

    @property
    def name(self) -> str:
        return "phonenumbers"

    @property
    def config(self) -> PhoneNumbersOracleConfig:
        return self._config

    def calling_code_for(self, region: str) -> int | None:
        return phonenumbers.country_code_for_region(region.upper()) or None

    def region_for_calling_code(self, calling_code: int) -> str | None:
        region = phonenumbers.region_code_for_country_code(calling_code)
        if region == phonenumbers.UNKNOWN_REGION:
            return None
        return region

    def region_for_number(self, calling_code: int, national_number: str) -> str | None:
        parsed = self._parse(calling_code, national_number)
        if parsed is not None:
            region = phonenumbers.region_code_for_number(parsed)
            if region is not None:
                return region
        return self.region_for_calling_code(calling_code)

    def match_calling_code_prefix(self, digits: str) -> tuple[int, str] | None:
        if not digits.isdigit() or digits.startswith("0"):
            return None
        longest = min(_MAX_CALLING_CODE_LENGTH, len(digits) - 1)
        for length in range(longest, 0, -1):
            calling_code = int(digits[:length])
            if calling_code in phonenumbers.COUNTRY_CODE_TO_REGION_CODE:
                return calling_code, digits[length:]
        return None

    def is_fully_valid(self, calling_code: int, national_number: str) -> bool:
        if self._is_valid(calling_code, national_number):
            return True
        legacy = self._config.legacy_prefixes.get(calling_code)
        if legacy and len(national_number) > len(legacy) and national_number.startswith(legacy):
            if self._is_valid(calling_code, national_number[len(legacy) :]):
                logger.debug("Accepted legacy prefix for calling code %d", calling_code)
                return True
        return False

    def national_subscriber_length(self, region: str) -> int | None:
        constants = self._constants(region)
        if constants and constants.subscriber_length:
            return constants.subscriber_length
        desc = self._fixed_line(region)
        if desc is None:
            return None
        lengths = [n for n in desc.possible_length_local_only if n > 0]
        return min(lengths) if lengths else None

    def area_code_length(self, region: str) -> int | None:
        constants = self._constants(region)
        if constants and constants.area_code_length:
            return constants.area_code_length
        subscriber_length = self.national_subscriber_length(region)
        desc = self._fixed_line(region)
        if subscriber_length is None or desc is None:
            return None
        lengths = [n for n in desc.possible_length if n > 0]
        if not lengths:
            return None
        area_code_length = min(lengths) - subscriber_length
        return area_code_length if area_code_length > 0 else None

    def mobile_prefix_digit(self, region: str) -> str | None:
        constants = self._constants(region)
        return constants.mobile_prefix_digit if constants else None

    def strip_national_prefix(self, calling_code: int, digits: str) -> str | None:
        region = self.region_for_calling_code(calling_code)
        if region is None or not digits.isdigit():
            return None
        try:
            parsed = phonenumbers.parse(digits, region)
        except phonenumbers.NumberParseException:
            return None
        if parsed.country_code != calling_code:
            return None
        # Keeps leading zeros that belong to the national number (Italy).
        national_number = phonenumbers.national_significant_number(parsed)
        if national_number == digits or not digits.endswith(national_number):
            return None
        return national_number

    # -- Internal helpers --

    def _constants(self, region: str) -> RegionConstants | None:
        return self._config.region_constants.get(region.upper())

    @staticmethod
    def _fixed_line(region: str) -> PhoneNumberDesc | None:
        metadata = PhoneMetadata.metadata_for_region(region.upper(), None)
        if metadata is None:
            return None
        return metadata.fixed_line

    @staticmethod
    def _parse(calling_code: int, national_number: str) -> phonenumbers.PhoneNumber | None:
        if not national_number.isdigit():
            return None
        try:
            return phonenumbers.parse(f"+{calling_code}{national_number}", None)
        except phonenumbers.NumberParseException:
            return None

    def _is_valid(self, calling_code: int, national_number: str) -> bool:
        parsed = self._parse(calling_code, national_number)
        if parsed is None or not phonenumbers.is_valid_number(parsed):
            return False
        formatted = phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)
        return formatted == f"+{calling_code}{national_number}"
