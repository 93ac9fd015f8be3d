"""fixtures.py — Reference data pools for the case simulation engine.

Everything the generator draws from lives here: party names, order
templates, bench and registry staff, and the recognized case types.
Pools are immutable tuples wrapped in a frozen ``ReferencePools`` so a
generator can be handed a different set (tests do this) without touching
module state.

Design principles:
    - Petitioner and respondent pools are disjoint, so the two parties of a
      generated case can never render as the same string
    - Order templates pair a title, a document type and a description so the
      basic and extended record variants draw from one pool
    - Sentinel case numbers are fixed fixtures for UI failure states

Called by: factory.py, core/validation.py, api/routes/cases.py
Depends on: Nothing
"""

from __future__ import annotations

from dataclasses import dataclass

# ─── Sentinel Case Numbers ───────────────────────────────────────────────────
# These short-circuit before any validation or generation runs.

SENTINEL_NOT_FOUND = "999"
SENTINEL_SERVICE_DOWN = "000"

# Placeholder for order PDFs; the simulation never links real documents.
ORDER_PDF_PLACEHOLDER = "#"


# ─── Types ───────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class OrderTemplate:
    """One docket entry the generator can place on a case."""

    title: str
    type: str  # "order" | "notice"
    description: str


@dataclass(frozen=True)
class CaseTypeInfo:
    """A case type the court recognizes, with its long-form label."""

    code: str
    label: str


@dataclass(frozen=True)
class ReferencePools:
    """Immutable reference data injected into ``CaseGenerator``.

    Raises:
        ValueError: If any pool is empty, or if the petitioner and
            respondent pools share an entry.
    """

    petitioners: tuple[str, ...]
    respondents: tuple[str, ...]
    order_templates: tuple[OrderTemplate, ...]
    judges: tuple[str, ...]
    subjects: tuple[str, ...]
    advocates: tuple[str, ...]
    dealing_assistants: tuple[str, ...]

    def __post_init__(self) -> None:
        for name in (
            "petitioners",
            "respondents",
            "order_templates",
            "judges",
            "subjects",
            "advocates",
            "dealing_assistants",
        ):
            if not getattr(self, name):
                raise ValueError(f"Reference pool '{name}' must not be empty")

        overlap = set(self.petitioners) & set(self.respondents)
        if overlap:
            raise ValueError(
                f"Petitioner and respondent pools must be disjoint; shared: {sorted(overlap)}"
            )


# ─── Case Types ──────────────────────────────────────────────────────────────
# The first four are the options the lookup form has always offered.

CASE_TYPES: tuple[CaseTypeInfo, ...] = (
    CaseTypeInfo("W.P.(C)", "Writ Petition (Civil)"),
    CaseTypeInfo("CS(OS)", "Civil Suit (Original Side)"),
    CaseTypeInfo("FAO", "First Appeal from Order"),
    CaseTypeInfo("CRL.A", "Criminal Appeal"),
    CaseTypeInfo("W.P.(CRL)", "Writ Petition (Criminal)"),
    CaseTypeInfo("LPA", "Letters Patent Appeal"),
    CaseTypeInfo("RFA", "Regular First Appeal"),
    CaseTypeInfo("BAIL APPLN.", "Bail Application"),
    CaseTypeInfo("CS(COMM)", "Civil Suit (Commercial)"),
    CaseTypeInfo("ARB.P.", "Arbitration Petition"),
)


# ─── Parties ─────────────────────────────────────────────────────────────────

PETITIONERS: tuple[str, ...] = (
    "Ram Kumar Sharma",
    "Sunita Devi",
    "Anil Kapoor Enterprises Pvt. Ltd.",
    "Meera Nair",
    "Rajesh Gupta",
    "Harpreet Singh Bedi",
    "Kavita Joshi",
    "Residents Welfare Association, Dwarka Sector 6",
    "Mohammed Irfan Qureshi",
    "Priya Malhotra",
    "Vikram Aditya Rao",
    "Green Valley Builders LLP",
)

RESPONDENTS: tuple[str, ...] = (
    "State of Delhi & Ors.",
    "Union of India & Anr.",
    "Delhi Development Authority",
    "Municipal Corporation of Delhi",
    "Govt. of NCT of Delhi",
    "Delhi Transport Corporation",
    "Central Bureau of Investigation",
    "Employees' Provident Fund Organisation",
    "New Delhi Municipal Council",
    "State Bank of India & Ors.",
)


# ─── Orders ──────────────────────────────────────────────────────────────────

ORDER_TEMPLATES: tuple[OrderTemplate, ...] = (
    OrderTemplate(
        title="Order on Application for Interim Relief",
        type="order",
        description=(
            "The court has considered the application for interim relief filed by the "
            "petitioner. After hearing both parties, the court grants interim relief as "
            "prayed for, subject to the petitioner furnishing an undertaking as per the "
            "terms specified in the order."
        ),
    ),
    OrderTemplate(
        title="Notice issued to Respondents",
        type="notice",
        description=(
            "Notice issued to all respondents to file their response within 4 weeks. "
            "The matter is listed for hearing on the next date."
        ),
    ),
    OrderTemplate(
        title="Case Filed and Initial Orders",
        type="order",
        description=(
            "Petition filed and admitted. Issue notice to respondents. Registry to serve "
            "notice through all permissible modes including email and registered post."
        ),
    ),
    OrderTemplate(
        title="Adjournment",
        type="order",
        description=(
            "At the request of counsel for the respondents, the matter is adjourned. "
            "No further adjournment shall be granted. Renotify on the next date."
        ),
    ),
    OrderTemplate(
        title="Direction to File Counter Affidavit",
        type="order",
        description=(
            "Respondents are directed to file a counter affidavit within six weeks. "
            "Rejoinder, if any, be filed within four weeks thereafter."
        ),
    ),
    OrderTemplate(
        title="Status Report Called For",
        type="order",
        description=(
            "The respondent authority is directed to file a status report indicating the "
            "action taken on the petitioner's representation before the next date of hearing."
        ),
    ),
    OrderTemplate(
        title="Notice of Listing",
        type="notice",
        description=(
            "The matter is listed before the Hon'ble Bench in the category of regular "
            "matters. Parties are advised to remain present through counsel."
        ),
    ),
    OrderTemplate(
        title="Referral to Mediation",
        type="order",
        description=(
            "With the consent of the parties, the matter is referred to the Delhi High "
            "Court Mediation and Conciliation Centre. Parties to appear before the "
            "mediator on the date fixed."
        ),
    ),
)


# ─── Bench & Registry ────────────────────────────────────────────────────────

JUDGES: tuple[str, ...] = (
    "Hon'ble Justice Rajesh Kumar",
    "Hon'ble Justice Anjali Mehra",
    "Hon'ble Justice S. Venkataraman",
    "Hon'ble Justice Farah Siddiqui",
    "Hon'ble Justice Arvind Bhalla",
)

SUBJECTS: tuple[str, ...] = (
    "Service Matter - Pay Fixation",
    "Land Acquisition - Compensation",
    "Property Dispute - Possession",
    "Contract Dispute - Recovery of Money",
    "Education - Admission",
    "Environment - Unauthorized Construction",
    "Criminal - Quashing of FIR",
)

ADVOCATES: tuple[str, ...] = (
    "Adv. Neha Bansal",
    "Adv. Rohit Khanna",
    "Adv. Sameer Ahmed",
    "Adv. Deepa Iyer",
    "Adv. Gaurav Chopra",
)

DEALING_ASSISTANTS: tuple[str, ...] = (
    "Mr. Suresh Pal",
    "Ms. Rekha Verma",
    "Mr. Dinesh Chand",
    "Ms. Pooja Rawat",
)


DEFAULT_POOLS = ReferencePools(
    petitioners=PETITIONERS,
    respondents=RESPONDENTS,
    order_templates=ORDER_TEMPLATES,
    judges=JUDGES,
    subjects=SUBJECTS,
    advocates=ADVOCATES,
    dealing_assistants=DEALING_ASSISTANTS,
)
