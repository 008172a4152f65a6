"""Mock numbering-plan oracle for testing."""

from __future__ import annotations

from collections.abc import Iterable

from phonekit.oracle.base import NumberingPlanOracle
from phonekit.oracle.config import RegionConstants


class MockNumberingPlanOracle(NumberingPlanOracle):
    """Table-driven oracle: only the listed numbers are valid.

    Example::

        oracle = MockNumberingPlanOracle(
            regions={"US": 1, "FR": 33},
            valid_numbers=["+19025550123", "+33170393800"],
            region_constants={"US": RegionConstants(subscriber_length=7, area_code_length=3)},
            national_prefixes={"FR": "0"},
        )
        oracle.is_fully_valid(1, "9025550123")  # True
        oracle.strip_national_prefix(33, "0170393800")  # "170393800"

    The first region listed for a calling code is its main region. Trunk
    prefixes in *national_prefixes* are looked up by that main region.
    """

    def __init__(
        self,
        regions: dict[str, int] | None = None,
        valid_numbers: Iterable[str] = (),
        region_constants: dict[str, RegionConstants] | None = None,
        national_prefixes: dict[str, str] | None = None,
    ) -> None:
        self._regions = {region.upper(): code for region, code in (regions or {}).items()}
        self._valid = frozenset(valid_numbers)
        self._constants = {
            region.upper(): constants for region, constants in (region_constants or {}).items()
        }
        self._national_prefixes = {
            region.upper(): prefix for region, prefix in (national_prefixes or {}).items()
        }
        self._main_regions: dict[int, str] = {}
        for region, code in self._regions.items():
            self._main_regions.setdefault(code, region)

    @property
    def name(self) -> str:
        return "MockNumberingPlanOracle"

    def calling_code_for(self, region: str) -> int | None:
        return self._regions.get(region.upper())

    def region_for_calling_code(self, calling_code: int) -> str | None:
        return self._main_regions.get(calling_code)

    def match_calling_code_prefix(self, digits: str) -> tuple[int, str] | None:
        if not digits.isdigit() or digits.startswith("0"):
            return None
        for length in range(min(3, len(digits) - 1), 0, -1):
            calling_code = int(digits[:length])
            if calling_code in self._main_regions:
                return calling_code, digits[length:]
        return None

    def is_fully_valid(self, calling_code: int, national_number: str) -> bool:
        return f"+{calling_code}{national_number}" in self._valid

    def national_subscriber_length(self, region: str) -> int | None:
        constants = self._constants.get(region.upper())
        return constants.subscriber_length if constants else None

    def area_code_length(self, region: str) -> int | None:
        constants = self._constants.get(region.upper())
        return constants.area_code_length if constants else None

    def mobile_prefix_digit(self, region: str) -> str | None:
        constants = self._constants.get(region.upper())
        return constants.mobile_prefix_digit if constants else None

    def strip_national_prefix(self, calling_code: int, digits: str) -> str | None:
        region = self._main_regions.get(calling_code)
        prefix = self._national_prefixes.get(region) if region else None
        if not prefix or not digits.startswith(prefix) or len(digits) <= len(prefix):
            return None
        return digits[len(prefix) :]
