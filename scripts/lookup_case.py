"""CLI case lookup against the simulation, without starting the API.

Usage:
    python scripts/lookup_case.py "W.P.(C)" 5 2022
    python scripts/lookup_case.py "CS(OS)" 999 2021 --variant basic
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from courtlens.config import get_settings
from courtlens.core.case_lookup import CaseLookupService
from courtlens.core.errors import LookupFailure, LookupSuccess
from courtlens.core.validation import QueryValidator
from courtlens.mock.factory import CaseGenerator, GeneratorConfig
from courtlens.models.schemas import CaseQuery


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve a simulated court case and print it as JSON.",
    )
    parser.add_argument("case_type", help='Case type code, e.g. "W.P.(C)".')
    parser.add_argument("case_number", help="Case number (digits only).")
    parser.add_argument("filing_year", help="Four-digit filing year.")
    parser.add_argument(
        "--variant",
        choices=("basic", "extended"),
        default=None,
        help="Record schema to produce (defaults to CASE_SCHEMA_VARIANT).",
    )
    parser.add_argument(
        "--seed-strategy",
        choices=("number_and_year", "number_only"),
        default=None,
        help="How the PRNG seed is derived (defaults to SEED_STRATEGY).",
    )
    return parser


def _build_service(args: argparse.Namespace) -> CaseLookupService:
    settings = get_settings()
    base = GeneratorConfig.from_settings(settings)
    config = GeneratorConfig(
        variant=args.variant or base.variant,
        seed_strategy=args.seed_strategy or base.seed_strategy,
        hearing_date_anchor=base.hearing_date_anchor,
        order_date_anchor=base.order_date_anchor,
        court_name=base.court_name,
    )
    return CaseLookupService(
        generator=CaseGenerator(config=config),
        validator=QueryValidator(
            max_case_number_digits=settings.max_case_number_digits,
            retry_after_seconds=settings.service_retry_after_seconds,
        ),
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    query = CaseQuery(
        case_type=args.case_type,
        case_number=args.case_number,
        filing_year=args.filing_year,
    )
    result = _build_service(args).resolve_case(query)

    match result:
        case LookupSuccess(record=record):
            print(json.dumps(record.model_dump(mode="json", exclude_none=True), indent=2))
            return 0
        case LookupFailure() as failure:
            payload = {
                "error": {
                    "code": str(failure.kind),
                    "message": failure.message,
                    "retry_after_seconds": failure.retry_after_seconds,
                }
            }
            print(json.dumps(payload, indent=2), file=sys.stderr)
            return 1


if __name__ == "__main__":
    raise SystemExit(main())
