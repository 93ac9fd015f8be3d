"""Case simulation package for CourtLens.

Generates complete, reproducible case records from a case query without
contacting any court website.

Contents:
    prng.py      — Seeded Park–Miller random stream
    fixtures.py  — Reference pools (parties, orders, bench, case types)
    factory.py   — CaseGenerator: derives and assembles CaseRecords
    insights.py  — Canned AI insights used by the mock LLM provider

Called by: core/case_lookup.py, core/providers/mock_llm.py
Depends on: models/schemas.py only
"""
