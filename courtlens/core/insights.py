"""Case insights engine — plain-language summaries and order explanations.

Two LLM-backed operations sit beside the lookup service:

    summarize_case(record)     → CaseSummary      (2–3 sentence overview)
    explain_order(order_text)  → OrderExplanation (one-line summary + key points)

Neither feeds back into case lookup. A provider failure raises
``InsightsUnavailableError``; a reply that is not usable JSON degrades to a
fallback explanation instead.

All external dependencies injected via protocols.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any

from courtlens.core.protocols import LLMProvider, Message
from courtlens.models.schemas import CaseRecord, format_display_date

logger = logging.getLogger(__name__)

# ─── Prompt Templates ────────────────────────────────────────────────────────

SUMMARIZE_CASE_PROMPT = """You are a legal analyst AI. Your task is to provide a clear,
concise summary of a court case based on the CASE_DATA provided.

The summary should be easy for a layperson to understand.
- Start with a sentence stating the case name (Petitioner vs. Respondent) and its current status.
- Briefly explain what the case is about based on its subject, if one is given.
- Mention the most recent significant event (the latest order or the next hearing date).
- Keep the summary to 2-3 sentences. Return plain text only.
"""

EXPLAIN_ORDER_PROMPT = """You are an expert legal assistant who specializes in translating
complex legal jargon into plain, easy-to-understand English for the general public.

Analyze the ORDER_TEXT from a court order and explain its meaning clearly and concisely.
Do not use legal jargon in your explanation. Focus on clarity and simplicity.

Return ONLY valid JSON with this exact shape:
{
  "summary": "one sentence describing the main outcome or decision",
  "key_points": ["2-3 short points on what the order means in practice"]
}
"""

_FALLBACK_EXPLANATION_SUMMARY = "We could not produce a reliable plain-English explanation of this order."


# ─── Data Structures ────────────────────────────────────────────────────────


@dataclass
class CaseSummary:
    """A generated case summary."""

    summary: str
    model: str = "unknown"


@dataclass
class OrderExplanation:
    """A generated order explanation."""

    summary: str
    key_points: list[str] = field(default_factory=list)
    model: str = "unknown"


class InsightsUnavailableError(Exception):
    """The LLM provider could not be reached or returned nothing usable."""


# ─── Engine ─────────────────────────────────────────────────────────────────


class CaseInsightsEngine:
    """Produces AI insights for case records and order texts."""

    _MAX_KEY_POINTS = 5
    _MAX_ORDERS_IN_CONTEXT = 5
    _MAX_ORDER_TEXT_CHARS = 4000

    def __init__(self, llm: LLMProvider) -> None:
        self._llm = llm

    async def summarize_case(self, record: CaseRecord) -> CaseSummary:
        """Summarize a case record for a layperson.

        Raises:
            InsightsUnavailableError: If the provider fails or returns no text.
        """
        try:
            response = await self._llm.complete(
                messages=[
                    Message(role="system", content=SUMMARIZE_CASE_PROMPT),
                    Message(role="user", content=self._build_case_context(record)),
                ],
                temperature=0.2,
                max_tokens=300,
                fast=True,
            )
        except Exception as exc:
            logger.exception("Case summary generation failed")
            raise InsightsUnavailableError("Case summary is unavailable right now.") from exc

        summary = response.content.strip()
        if not summary:
            raise InsightsUnavailableError("The model returned an empty summary.")
        return CaseSummary(summary=summary, model=response.model)

    async def explain_order(self, order_text: str) -> OrderExplanation:
        """Explain an order's text in plain English.

        Raises:
            InsightsUnavailableError: If the provider fails.
        """
        clipped = order_text.strip()[: self._MAX_ORDER_TEXT_CHARS]
        try:
            response = await self._llm.complete(
                messages=[
                    Message(role="system", content=EXPLAIN_ORDER_PROMPT),
                    Message(role="user", content=f'ORDER_TEXT:\n"{clipped}"'),
                ],
                temperature=0.0,
                max_tokens=500,
                response_format={"type": "json_object"},
                fast=True,
            )
        except Exception as exc:
            logger.exception("Order explanation failed")
            raise InsightsUnavailableError("Order explanation is unavailable right now.") from exc

        parsed = self._safe_json_loads(response.content)
        if not isinstance(parsed, dict):
            logger.warning("Failed to parse explanation JSON, returning fallback")
            return OrderExplanation(summary=_FALLBACK_EXPLANATION_SUMMARY, model="unknown")

        return self._normalize_explanation(parsed, model=response.model)

    # ─── Helpers ────────────────────────────────────────────────────────────

    def _build_case_context(self, record: CaseRecord) -> str:
        """Render the record as the CASE_DATA block of the summary prompt."""
        parties = f"{record.parties.petitioner} vs. {record.parties.respondent}"
        case_id = record.case_id or f"{record.case_type}/{record.case_number}/{record.filing_year}"
        lines = ["CASE_DATA:"]
        lines.append(f"- Case ID: {case_id}")
        lines.append(f"- Parties: {parties}")
        if record.status:
            lines.append(f"- Status: {record.status}")
        if record.subject:
            lines.append(f"- Subject: {record.subject}")
        lines.append(f"- Filing Date: {format_display_date(record.filing_date)}")
        lines.append(f"- Next Hearing Date: {format_display_date(record.next_hearing_date)}")
        lines.append("- Orders:")
        for order in record.orders[: self._MAX_ORDERS_IN_CONTEXT]:
            heading = f"{order.title} - " if order.title else ""
            lines.append(f"  - {format_display_date(order.date)}: {heading}{order.description}")
        return "\n".join(lines)

    def _normalize_explanation(self, payload: dict[str, Any], *, model: str) -> OrderExplanation:
        """Normalize explanation payload into a stable, API-safe shape."""
        summary = str(payload.get("summary") or "").strip() or _FALLBACK_EXPLANATION_SUMMARY

        # Models sometimes answer with camelCase keys.
        raw_points = payload.get("key_points", payload.get("keyPoints"))
        key_points: list[str] = []
        if isinstance(raw_points, list):
            for item in raw_points:
                if not isinstance(item, str):
                    continue
                point = item.strip().lstrip("-•* ").strip()
                if point and point not in key_points:
                    key_points.append(point)

        return OrderExplanation(
            summary=summary,
            key_points=key_points[: self._MAX_KEY_POINTS],
            model=model,
        )

    @staticmethod
    def _safe_json_loads(raw_text: str) -> dict[str, Any] | None:
        """Parse a JSON object robustly, including fenced markdown payloads."""
        text = raw_text.strip()
        if not text:
            return None

        try:
            parsed = json.loads(text)
            return parsed if isinstance(parsed, dict) else None
        except json.JSONDecodeError:
            pass

        fenced = re.search(r"```(?:json)?\s*(\{.*?\})\s*```", text, flags=re.DOTALL)
        candidate = fenced.group(1).strip() if fenced else ""
        if not candidate:
            first_curly = text.find("{")
            last_curly = text.rfind("}")
            if 0 <= first_curly < last_curly:
                candidate = text[first_curly : last_curly + 1]

        if candidate:
            try:
                parsed = json.loads(candidate)
                if isinstance(parsed, dict):
                    return parsed
            except json.JSONDecodeError:
                pass

        return None
