"""Tests for the command-line scripts."""

from __future__ import annotations

import json
import shlex
from unittest.mock import AsyncMock, patch

import pytest

from courtlens.core.preflight import CheckResult, PreflightReport
from scripts import lookup_case, preflight


def test_lookup_case_prints_record(capsys) -> None:
    exit_code = lookup_case.main(["W.P.(C)", "5", "2022", "--variant", "extended"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["case_id"] == "WP(C)/5/2022"
    assert payload["parties"]["petitioner"] == "Ram Kumar Sharma"


def test_lookup_case_basic_variant_omits_extended_fields(capsys) -> None:
    exit_code = lookup_case.main(["FAO", "12", "2019", "--variant", "basic"])

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert "judge" not in payload
    assert "title" not in payload["orders"][0]


def test_lookup_case_failure_exit_code(capsys) -> None:
    exit_code = lookup_case.main(["W.P.(C)", "999", "2022"])

    assert exit_code == 1
    payload = json.loads(capsys.readouterr().err)
    assert payload["error"]["code"] == "CASE_NOT_FOUND"


def test_preflight_exit_code_follows_report(capsys) -> None:
    report = PreflightReport(
        ok=False,
        mode="sandbox",
        timestamp_utc="2025-06-15T00:00:00+00:00",
        checks=[CheckResult(name="environment", ok=False, detail="bad env")],
    )
    with patch("scripts.preflight.run_preflight", new=AsyncMock(return_value=report)):
        exit_code = preflight.main([])

    assert exit_code == 1
    out = capsys.readouterr().out
    assert "  FAIL environment  bad env" in out
    assert out.rstrip().endswith("0/1 checks passed: NOT ready")


def test_preflight_json_output(capsys) -> None:
    report = PreflightReport(
        ok=True,
        mode="mock",
        timestamp_utc="2025-06-15T00:00:00+00:00",
        checks=[CheckResult(name="simulation", ok=True, detail="probe ok")],
    )
    with patch("scripts.preflight.run_preflight", new=AsyncMock(return_value=report)) as mock_run:
        exit_code = preflight.main(["--json", "--expected-mode", "mock"])

    assert exit_code == 0
    assert json.loads(capsys.readouterr().out) == report.as_dict()
    mock_run.assert_awaited_once_with(expected_mode="mock", probe_llm=False)


@pytest.mark.parametrize("module", [lookup_case, preflight])
def test_usage_examples_are_valid_shell(module) -> None:
    examples = [
        line.strip() for line in module.__doc__.splitlines() if line.strip().startswith("python ")
    ]
    assert examples
    for example in examples:
        lexer = shlex.shlex(example, posix=True, punctuation_chars=True)
        lexer.whitespace_split = True
        tokens = list(lexer)
        assert not set(tokens) & {"(", ")", ";", "&", "|"}, example
        module._build_parser().parse_args(tokens[2:])
