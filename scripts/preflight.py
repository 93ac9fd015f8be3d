"""Readiness checks for a CourtLens deployment.

Usage:
    python scripts/preflight.py --expected-mode production
    python scripts/preflight.py --probe-llm --json

Exit code is 0 when every check passed and 1 otherwise, so CI can gate a
promotion on it.
"""

from __future__ import annotations

import argparse
import asyncio
import json
from collections.abc import Sequence

from courtlens.core.environment import VALID_MODES
from courtlens.core.preflight import PreflightReport, run_preflight


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check that configuration, the case simulation and the LLM provider are ready.",
    )
    parser.add_argument(
        "--expected-mode",
        choices=sorted(VALID_MODES),
        help="Fail unless APP_MODE has this value.",
    )
    parser.add_argument(
        "--probe-llm",
        action="store_true",
        help="Send one short completion to the configured provider (billed for hosted models).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the report as JSON.",
    )
    return parser


def _render_text_report(report: PreflightReport) -> str:
    width = max((len(check.name) for check in report.checks), default=0)
    passed = sum(check.ok for check in report.checks)

    lines = [f"CourtLens preflight  mode={report.mode}  at {report.timestamp_utc}"]
    for check in report.checks:
        marker = "ok  " if check.ok else "FAIL"
        lines.append(f"  {marker} {check.name.ljust(width)}  {check.detail}")
    verdict = "ready" if report.ok else "NOT ready"
    lines.append(f"{passed}/{len(report.checks)} checks passed: {verdict}")
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    report = asyncio.run(
        run_preflight(expected_mode=args.expected_mode, probe_llm=args.probe_llm)
    )

    if args.json:
        print(json.dumps(report.as_dict(), indent=2))
    else:
        print(_render_text_report(report))
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
