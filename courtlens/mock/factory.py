"""factory.py — Deterministic case record generator for CourtLens.

Turns a validated CaseQuery into a complete CaseRecord. Every field that
does not depend on the calendar is derived from a SeededRandom built from
the query, so the same query always produces the same parties, filing date
and order history.

Draw order is part of the contract. Reordering draws changes every
generated case:

    1. petitioner            5. order count (2..5)
    2. respondent            6. per order: template, age step
    3. filing month, day     7. extended only: judge, subject, advocate,
    4. next hearing offset      dealing assistant, registration offset

Extended fields are drawn last so the basic fields of a case are identical
under both variants.

Called by: core/case_lookup.py, scripts/lookup_case.py
Depends on: fixtures.py (pools), prng.py (SeededRandom), models/schemas.py
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Literal

from courtlens.config import Settings
from courtlens.mock.fixtures import DEFAULT_POOLS, ORDER_PDF_PLACEHOLDER, ReferencePools
from courtlens.mock.prng import SeededRandom
from courtlens.models.schemas import CaseOrder, CaseQuery, CaseRecord, Parties

logger = logging.getLogger(__name__)

Variant = Literal["basic", "extended"]
SeedStrategy = Literal["number_and_year", "number_only"]
DateAnchor = Literal["call_time", "filing_date"]

# ─── Date Bounds ──────────────────────────────────────────────────────────────
# Filing days stop at 28 so every month is valid without a calendar lookup.

_FILING_DAY_CAP = 28
_HEARING_MIN_DAYS = 30
_HEARING_SPREAD_DAYS = 90
_ORDER_MIN_STEP_DAYS = 7
_ORDER_STEP_SPREAD_DAYS = 45
_MIN_ORDERS = 2
_ORDER_COUNT_SPREAD = 4
_REGISTRATION_SPREAD_DAYS = 14

# A filing date needs room behind it for the full order history and in
# front of it for the latest possible hearing.
_MAX_ORDER_HISTORY_DAYS = (_MIN_ORDERS + _ORDER_COUNT_SPREAD - 1) * (
    _ORDER_MIN_STEP_DAYS + _ORDER_STEP_SPREAD_DAYS
)
_MAX_FORWARD_DAYS = _HEARING_MIN_DAYS + _HEARING_SPREAD_DAYS + _REGISTRATION_SPREAD_DAYS


@dataclass(frozen=True)
class GeneratorConfig:
    """Selects which field set to produce and how dates are anchored."""

    variant: Variant = "basic"
    seed_strategy: SeedStrategy = "number_and_year"
    hearing_date_anchor: DateAnchor = "call_time"
    order_date_anchor: DateAnchor = "filing_date"
    court_name: str = "Delhi High Court"

    @classmethod
    def from_settings(cls, settings: Settings) -> GeneratorConfig:
        """Build a config from the app Settings."""
        return cls(
            variant=settings.case_schema_variant,
            seed_strategy=settings.seed_strategy,
            hearing_date_anchor=settings.hearing_date_anchor,
            order_date_anchor=settings.order_date_anchor,
            court_name=settings.court_name,
        )


def derive_seed(query: CaseQuery, strategy: SeedStrategy = "number_and_year") -> int:
    """Derive the PRNG seed for a query.

    Args:
        query: A query whose numeric fields already passed validation.
        strategy: ``number_and_year`` sums case number and filing year;
            ``number_only`` uses the case number alone.

    Raises:
        ValueError: If the numeric fields are not integers.
    """
    number = int(query.case_number)
    if strategy == "number_only":
        return number
    return number + int(query.filing_year)


class CaseGenerator:
    """Builds CaseRecords from queries. Holds no per-call state.

    Usage:
        generator = CaseGenerator(config=GeneratorConfig(variant="extended"))
        record = generator.generate(CaseQuery(case_type="W.P.(C)",
                                              case_number="5", filing_year="2022"))
    """

    def __init__(
        self,
        pools: ReferencePools = DEFAULT_POOLS,
        config: GeneratorConfig | None = None,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._pools = pools
        self._config = config or GeneratorConfig()
        self._today = today

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def pools(self) -> ReferencePools:
        return self._pools

    def generate(self, query: CaseQuery) -> CaseRecord:
        """Generate the record for a validated query.

        The only inputs besides the query are the injected ``today`` clock
        (used for call-time anchored dates and extended status fields) and
        the configuration chosen at construction.
        """
        seed = derive_seed(query, self._config.seed_strategy)
        rng = SeededRandom(seed)
        today = self._today()

        petitioner = rng.choice(self._pools.petitioners)
        respondent = rng.choice(self._pools.respondents)
        filing_date = self._derive_filing_date(rng, query.filing_year, today)

        hearing_offset = rng.below(_HEARING_SPREAD_DAYS) + _HEARING_MIN_DAYS
        hearing_anchor = filing_date if self._config.hearing_date_anchor == "filing_date" else today
        next_hearing_date = hearing_anchor + timedelta(days=hearing_offset)

        order_anchor = filing_date if self._config.order_date_anchor == "filing_date" else today
        orders = self._derive_orders(rng, order_anchor)

        record = {
            "case_type": query.case_type,
            "case_number": query.case_number,
            "filing_year": query.filing_year,
            "parties": Parties(petitioner=petitioner, respondent=respondent),
            "filing_date": filing_date,
            "next_hearing_date": next_hearing_date,
            "orders": orders,
        }
        if self._config.variant == "extended":
            record.update(self._derive_extended(rng, query, filing_date, today))

        logger.debug(
            "Generated case %s/%s/%s (seed=%d, orders=%d, variant=%s)",
            query.case_type,
            query.case_number,
            query.filing_year,
            seed,
            len(orders),
            self._config.variant,
        )
        return CaseRecord(**record)

    # ─── Derivation Steps ─────────────────────────────────────────────────────

    @staticmethod
    def _derive_filing_date(rng: SeededRandom, filing_year: str, today: date) -> date:
        """Filing date inside the query's year, or today if that year cannot hold one.

        Both draws are consumed either way so later fields do not shift.
        """
        month = rng.below(12) + 1
        day = rng.below(_FILING_DAY_CAP) + 1
        try:
            candidate = date(int(filing_year), month, day)
        except ValueError:
            logger.warning("Filing year %r cannot form a date; using today", filing_year)
            return today

        if (
            candidate.toordinal() - date.min.toordinal() <= _MAX_ORDER_HISTORY_DAYS
            or date.max.toordinal() - candidate.toordinal() <= _MAX_FORWARD_DAYS
        ):
            logger.warning("Filing year %r leaves no room for dated events; using today", filing_year)
            return today
        return candidate

    def _derive_orders(self, rng: SeededRandom, anchor: date) -> tuple[CaseOrder, ...]:
        """Walk backward from ``anchor``; each order is strictly older than the last."""
        count = rng.below(_ORDER_COUNT_SPREAD) + _MIN_ORDERS
        extended = self._config.variant == "extended"

        orders: list[CaseOrder] = []
        age_days = 0
        for _ in range(count):
            template = rng.choice(self._pools.order_templates)
            age_days += rng.below(_ORDER_STEP_SPREAD_DAYS) + _ORDER_MIN_STEP_DAYS
            orders.append(
                CaseOrder(
                    date=anchor - timedelta(days=age_days),
                    description=template.description,
                    pdf_url=ORDER_PDF_PLACEHOLDER,
                    title=template.title if extended else None,
                    type=template.type if extended else None,
                )
            )

        orders.sort(key=lambda order: order.date, reverse=True)
        return tuple(orders)

    def _derive_extended(
        self,
        rng: SeededRandom,
        query: CaseQuery,
        filing_date: date,
        today: date,
    ) -> dict:
        judge = rng.choice(self._pools.judges)
        subject = rng.choice(self._pools.subjects)
        advocate = rng.choice(self._pools.advocates)
        dealing_assistant = rng.choice(self._pools.dealing_assistants)
        registration_offset = rng.below(_REGISTRATION_SPREAD_DAYS) + 1

        return {
            "case_id": f"{query.case_type.replace('.', '')}/{query.case_number}/{query.filing_year}",
            "cnr_number": f"DLHC01{query.case_number.zfill(6)}{query.filing_year}",
            "status": "Disposed" if int(query.filing_year) < today.year else "Pending",
            "court": self._config.court_name,
            "judge": judge,
            "subject": subject,
            "filing_advocate": advocate,
            "dealing_assistant": dealing_assistant,
            "registration_date": filing_date + timedelta(days=registration_offset),
            "last_updated": today,
        }
