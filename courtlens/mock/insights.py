"""insights.py — Canned AI insights for mock mode.

When the mock LLM receives a case summary or order explanation request,
it answers from here instead of calling a model. Explanations are matched
by keyword against the order text; summaries are assembled from the case
lines in the prompt so they mention the right parties and dates.

Called by: core/providers/mock_llm.py
Depends on: Nothing
"""

from __future__ import annotations

import re
from typing import Any

# ─── Canned Explanations ─────────────────────────────────────────────────────
# Keyword → explanation. The first keyword found in the order text wins;
# "default" covers everything else.

_CANNED_EXPLANATIONS: dict[str, dict[str, Any]] = {
    "default": {
        "summary": "The court recorded a procedural step in the case and set out what happens next.",
        "key_points": [
            "This is a routine step; the case has not been decided yet.",
            "Both sides should follow any deadline mentioned in the order.",
        ],
    },
    "interim relief": {
        "summary": "The court gave the petitioner temporary protection while the case continues.",
        "key_points": [
            "The temporary relief asked for has been granted for now.",
            "The petitioner must give the promise (undertaking) the order describes.",
            "This is not the final decision; the full case will still be heard.",
        ],
    },
    "notice": {
        "summary": "The court has formally informed the other side and asked them to respond.",
        "key_points": [
            "The respondents have been told about the case.",
            "They must file their reply within the time the order gives.",
            "The case will be heard again on the next listed date.",
        ],
    },
    "adjourned": {
        "summary": "The hearing was postponed to a later date.",
        "key_points": [
            "Nothing was decided on this date.",
            "The court has warned that it will not postpone the matter again.",
        ],
    },
    "counter affidavit": {
        "summary": "The respondents must file their written answer to the petition.",
        "key_points": [
            "The respondents have a fixed number of weeks to file their reply.",
            "The petitioner may then answer that reply within the time allowed.",
        ],
    },
    "status report": {
        "summary": "The court asked the authorities to report what they have done so far.",
        "key_points": [
            "The government body must explain the action it has taken.",
            "The report has to be filed before the next hearing.",
        ],
    },
    "mediation": {
        "summary": "Both sides agreed to try to settle the dispute through a mediator.",
        "key_points": [
            "The case moves to the court's mediation centre for now.",
            "The parties must meet the mediator on the date fixed.",
            "If mediation fails, the case returns to court.",
        ],
    },
}

_CASE_LINE = re.compile(r"^\s*-\s*(?P<label>[A-Za-z ]+):\s*(?P<value>.+?)\s*$", re.MULTILINE)


def create_mock_order_explanation(order_text: str) -> dict[str, Any]:
    """Return a canned plain-English explanation for an order text.

    Args:
        order_text: The order description (or the whole prompt containing it).

    Returns:
        Dict with ``summary`` and ``key_points``, matching OrderExplanation.
    """
    text_lower = order_text.lower()

    matched = _CANNED_EXPLANATIONS["default"]
    for keyword, explanation in _CANNED_EXPLANATIONS.items():
        if keyword != "default" and keyword in text_lower:
            matched = explanation
            break

    return {"summary": matched["summary"], "key_points": list(matched["key_points"])}


def create_mock_case_summary(case_context: str) -> str:
    """Build a 2–3 sentence summary from the case lines of a summary prompt.

    Args:
        case_context: Prompt text containing ``- Label: value`` lines.

    Returns:
        A layperson summary naming the parties, status and next hearing.
    """
    fields = {
        match.group("label").strip().lower(): match.group("value")
        for match in _CASE_LINE.finditer(case_context)
    }

    parties = fields.get("parties", "The case")
    status = fields.get("status", "pending").lower()
    if status == "disposed":
        sentences = [f"{parties} has been disposed of by the court."]
    else:
        sentences = [f"{parties} is pending before the court."]

    subject = fields.get("subject")
    if subject:
        sentences.append(f"The case concerns {subject.lower()}.")

    hearing = fields.get("next hearing date")
    if hearing:
        sentences.append(f"The next hearing is scheduled for {hearing}.")
    else:
        sentences.append("No next hearing date has been listed yet.")

    return " ".join(sentences)
