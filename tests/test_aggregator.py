"""Tests for contact-level aggregation."""

from __future__ import annotations

import logging

import pytest

from phonekit.core.aggregator import aggregate
from phonekit.models.candidate import ContactMatchSet
from phonekit.models.contact import Contact, PhoneNumberEntry
from phonekit.oracle.mock import MockNumberingPlanOracle

LOCAL = "+13233214321"


class TestAggregate:
    def test_unions_entries(self, oracle: MockNumberingPlanOracle) -> None:
        result = aggregate(
            [("555-1234", "Home"), ("+33 1 70 39 38 00", "Work")], LOCAL, oracle=oracle
        )
        assert result == {"+13235551234", "+33170393800"}

    def test_idempotent(self, oracle: MockNumberingPlanOracle) -> None:
        entry = ("528341639157", "Main")
        once = aggregate([entry], LOCAL, oracle=oracle)
        twice = aggregate([entry, entry], LOCAL, oracle=oracle)
        assert once == twice
        assert once == {"+528341639157", "+5218341639157"}

    def test_failed_entry_contributes_nothing(self, oracle: MockNumberingPlanOracle) -> None:
        result = aggregate(
            [("+5551234", "Bad"), ("", None), ("570 555 1234", "Mobile")], LOCAL, oracle=oracle
        )
        assert result == {"+15705551234"}

    def test_empty(self, oracle: MockNumberingPlanOracle) -> None:
        result = aggregate([], LOCAL, oracle=oracle)
        assert result == ContactMatchSet()
        assert not result

    def test_accepts_entry_models(self, oracle: MockNumberingPlanOracle) -> None:
        entries = [PhoneNumberEntry(raw_text="902-555-0123", label="Home")]
        assert aggregate(entries, LOCAL, oracle=oracle) == {"+19025550123"}

    def test_label_does_not_matter(self, oracle: MockNumberingPlanOracle) -> None:
        a = aggregate([("555-1234", "Home")], LOCAL, oracle=oracle)
        b = aggregate([("555-1234", None)], LOCAL, oracle=oracle)
        assert a == b

    def test_accepts_generators(self, oracle: MockNumberingPlanOracle) -> None:
        entries = ((raw, "Main") for raw in ("555-1234", "570 555 1234"))
        assert len(aggregate(entries, LOCAL, oracle=oracle)) == 2

    def test_does_not_log_numbers(
        self, oracle: MockNumberingPlanOracle, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="phonekit"):
            aggregate([("555-1234", "Home"), ("12", "Junk")], LOCAL, oracle=oracle)
        assert "555" not in caplog.text
        assert "Junk" in caplog.text


class TestContact:
    def test_match_set(self, oracle: MockNumberingPlanOracle) -> None:
        contact = Contact(
            display_name="Ana",
            phone_entries=[
                PhoneNumberEntry(raw_text="87654321", label="Casa"),
                PhoneNumberEntry(raw_text="9 8765 4321", label="Celular"),
            ],
        )
        assert contact.match_set("+5521912345678", oracle=oracle) == {
            "+552187654321",
            "+5521987654321",
        }

    def test_no_entries(self, oracle: MockNumberingPlanOracle) -> None:
        assert len(Contact().match_set(LOCAL, oracle=oracle)) == 0
