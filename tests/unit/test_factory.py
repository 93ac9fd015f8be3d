"""Tests for the deterministic case generator."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta

import pytest

from courtlens.config import Settings
from courtlens.mock.factory import CaseGenerator, GeneratorConfig, derive_seed
from courtlens.mock.fixtures import (
    ADVOCATES,
    DEALING_ASSISTANTS,
    DEFAULT_POOLS,
    JUDGES,
    ORDER_TEMPLATES,
    PETITIONERS,
    RESPONDENTS,
    SUBJECTS,
    OrderTemplate,
    ReferencePools,
)
from courtlens.models.schemas import CaseQuery

TODAY = date(2025, 6, 15)


def _generator(**config) -> CaseGenerator:
    return CaseGenerator(config=GeneratorConfig(**config), today=lambda: TODAY)


def _query(number: str = "5", year: str = "2022", case_type: str = "W.P.(C)") -> CaseQuery:
    return CaseQuery(case_type=case_type, case_number=number, filing_year=year)


# ─── Seeding ──────────────────────────────────────────────────────────────────


def test_seed_sums_number_and_year() -> None:
    assert derive_seed(_query("5", "2022")) == 2027


def test_seed_number_only_strategy() -> None:
    assert derive_seed(_query("5", "2022"), "number_only") == 5


def test_config_from_settings() -> None:
    settings = Settings(
        _env_file=None,
        case_schema_variant="basic",
        seed_strategy="number_only",
        hearing_date_anchor="filing_date",
        order_date_anchor="call_time",
        court_name="High Court of Bombay",
    )

    assert GeneratorConfig.from_settings(settings) == GeneratorConfig(
        variant="basic",
        seed_strategy="number_only",
        hearing_date_anchor="filing_date",
        order_date_anchor="call_time",
        court_name="High Court of Bombay",
    )


# ─── Basic Records ────────────────────────────────────────────────────────────


def test_known_case_parties() -> None:
    record = _generator().generate(_query())

    assert record.parties.petitioner == "Ram Kumar Sharma"
    assert record.parties.respondent == "Central Bureau of Investigation"


def test_record_echoes_query() -> None:
    record = _generator().generate(_query())

    assert record.case_type == "W.P.(C)"
    assert record.case_number == "5"
    assert record.filing_year == "2022"


def test_generation_is_deterministic() -> None:
    generator = _generator(variant="extended")
    assert generator.generate(_query()) == generator.generate(_query())


def test_separate_generators_agree() -> None:
    assert _generator().generate(_query()) == _generator().generate(_query())


def test_basic_record_has_no_extended_fields() -> None:
    record = _generator().generate(_query())

    assert record.case_id is None
    assert record.judge is None
    assert all(order.title is None and order.type is None for order in record.orders)


@pytest.mark.parametrize("number", ["1", "5", "42", "123", "4567", "9999999"])
@pytest.mark.parametrize("year", ["1995", "2010", "2024"])
def test_orders_are_strictly_descending(number: str, year: str) -> None:
    record = _generator().generate(_query(number, year))

    dates = [order.date for order in record.orders]
    assert 2 <= len(dates) <= 5
    assert all(newer > older for newer, older in zip(dates, dates[1:]))


@pytest.mark.parametrize("number", ["1", "17", "250", "31337"])
def test_fields_come_from_pools(number: str) -> None:
    record = _generator().generate(_query(number, "2019"))

    assert record.parties.petitioner in PETITIONERS
    assert record.parties.respondent in RESPONDENTS
    descriptions = {template.description for template in ORDER_TEMPLATES}
    assert all(order.description in descriptions for order in record.orders)
    assert all(order.pdf_url == "#" for order in record.orders)


def test_filing_date_is_inside_filing_year() -> None:
    record = _generator().generate(_query("88", "2016"))

    assert record.filing_date.year == 2016
    assert record.filing_date.day <= 28


def test_orders_precede_filing_date_by_default() -> None:
    record = _generator().generate(_query("88", "2016"))

    assert all(order.date < record.filing_date for order in record.orders)
    assert record.orders[0].date >= record.filing_date - timedelta(days=51)


def test_order_anchor_call_time() -> None:
    record = _generator(order_date_anchor="call_time").generate(_query("88", "2016"))

    assert all(order.date < TODAY for order in record.orders)


# ─── Hearing Date Anchoring ──────────────────────────────────────────────────


def test_hearing_anchored_to_call_time() -> None:
    record = _generator(hearing_date_anchor="call_time").generate(_query())

    assert TODAY + timedelta(days=30) <= record.next_hearing_date < TODAY + timedelta(days=120)


def test_hearing_anchored_to_filing_date() -> None:
    record = _generator(hearing_date_anchor="filing_date").generate(_query())

    offset = (record.next_hearing_date - record.filing_date).days
    assert 30 <= offset < 120


def test_call_time_hearing_moves_with_the_clock() -> None:
    query = _query()
    early = CaseGenerator(today=lambda: TODAY).generate(query)
    late = CaseGenerator(today=lambda: TODAY + timedelta(days=10)).generate(query)

    assert late.next_hearing_date - early.next_hearing_date == timedelta(days=10)
    assert late.parties == early.parties
    assert late.orders == early.orders


# ─── Extended Records ────────────────────────────────────────────────────────


def test_extended_keeps_basic_fields() -> None:
    query = _query("314", "2018")
    basic = _generator(variant="basic").generate(query)
    extended = _generator(variant="extended").generate(query)

    assert extended.parties == basic.parties
    assert extended.filing_date == basic.filing_date
    assert extended.next_hearing_date == basic.next_hearing_date
    assert [o.date for o in extended.orders] == [o.date for o in basic.orders]
    assert [o.description for o in extended.orders] == [o.description for o in basic.orders]


def test_extended_fields() -> None:
    record = _generator(variant="extended").generate(_query())

    assert record.case_id == "WP(C)/5/2022"
    assert record.cnr_number == "DLHC010000052022"
    assert record.status == "Disposed"
    assert record.court == "Delhi High Court"
    assert record.judge in JUDGES
    assert record.subject in SUBJECTS
    assert record.filing_advocate in ADVOCATES
    assert record.dealing_assistant in DEALING_ASSISTANTS
    assert record.last_updated == TODAY
    assert 1 <= (record.registration_date - record.filing_date).days <= 14
    assert all(order.title and order.type in ("order", "notice") for order in record.orders)


def test_extended_status_pending_for_current_year() -> None:
    record = _generator(variant="extended").generate(_query("5", str(TODAY.year)))
    assert record.status == "Pending"


def test_court_name_is_configurable() -> None:
    record = _generator(variant="extended", court_name="High Court of Bombay").generate(_query())
    assert record.court == "High Court of Bombay"


# ─── Edge Cases ──────────────────────────────────────────────────────────────


def test_unbuildable_filing_year_falls_back_to_today() -> None:
    record = _generator().generate(_query("5", "0000"))

    assert record.filing_date == TODAY
    assert record.filing_year == "0000"
    dates = [order.date for order in record.orders]
    assert all(newer > older for newer, older in zip(dates, dates[1:]))


def test_year_one_never_produces_dates_before_the_calendar() -> None:
    record = _generator().generate(_query("5", "0001"))

    assert record.filing_date == TODAY or record.filing_date.year == 1
    dates = [order.date for order in record.orders]
    assert all(newer > older for newer, older in zip(dates, dates[1:]))


def test_number_only_strategy_ignores_year() -> None:
    generator = _generator(seed_strategy="number_only")
    first = generator.generate(_query("5", "2019"))
    second = generator.generate(_query("5", "2021"))

    assert first.parties == second.parties
    assert first.filing_date.replace(year=2000) == second.filing_date.replace(year=2000)


# ─── Injected Pools ──────────────────────────────────────────────────────────


def test_injected_pools_are_used() -> None:
    pools = replace(
        DEFAULT_POOLS,
        petitioners=("Only Petitioner",),
        respondents=("Only Respondent",),
        order_templates=(OrderTemplate(title="T", type="order", description="Only order."),),
    )
    record = CaseGenerator(pools=pools, today=lambda: TODAY).generate(_query())

    assert record.parties.petitioner == "Only Petitioner"
    assert record.parties.respondent == "Only Respondent"
    assert {order.description for order in record.orders} == {"Only order."}


def test_overlapping_party_pools_are_rejected() -> None:
    with pytest.raises(ValueError, match="disjoint"):
        replace(DEFAULT_POOLS, respondents=("Ram Kumar Sharma",))


def test_empty_pool_is_rejected() -> None:
    with pytest.raises(ValueError, match="judges"):
        ReferencePools(
            petitioners=("A",),
            respondents=("B",),
            order_templates=ORDER_TEMPLATES,
            judges=(),
            subjects=SUBJECTS,
            advocates=ADVOCATES,
            dealing_assistants=DEALING_ASSISTANTS,
        )


def test_default_pools_are_disjoint() -> None:
    assert not set(PETITIONERS) & set(RESPONDENTS)
