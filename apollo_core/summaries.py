# =============================================================================
# apollo_core/summaries.py  -  Projecting Apollo payloads into summaries
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns raw Apollo JSON into the small summary records from models.py, and
#   renders the final text a tool returns:
#
#       <status line>
#
#       <label>:
#       <summary JSON>
#
#       Full data:
#       <entire Apollo payload as JSON>
#
# CONTEXT BUDGET:
#   Search summaries keep the first 5 hits; organization technologies keep
#   the first 10.  The full payload always follows, so nothing is lost.
#
# LENIENCY:
#   A missing pagination block counts as 0 results and a missing list counts
#   as empty.  Apollo omitting a field is not treated as an error.
# =============================================================================

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Optional

from apollo_core.models import (
    ActivityEntry,
    EmailAccountSummary,
    MessageActivityReport,
    OrganizationProfile,
    OrganizationResult,
    PersonProfile,
    PersonResult,
    SequenceStats,
    SequenceSummary,
)

TOP_RESULTS = 5
MAX_TECHNOLOGIES = 10

PERSON_NOT_FOUND = "No person found with the provided information."
ORGANIZATION_NOT_FOUND = "No organization found with the provided domain."


# =============================================================================
# Shared helpers
# =============================================================================
def format_location(record: dict[str, Any]) -> Optional[str]:
    """'City, State' when both are set, else the bare country."""
    city = record.get("city")
    state = record.get("state")
    if city and state:
        return f"{city}, {state}"
    return record.get("country")


def total_entries(payload: dict[str, Any]) -> int:
    return (payload.get("pagination") or {}).get("total_entries") or 0


def _organization_name(record: dict[str, Any]) -> Optional[str]:
    return (record.get("organization") or {}).get("name")


def _to_json(value: Any) -> str:
    if is_dataclass(value):
        value = asdict(value)
    elif isinstance(value, list):
        value = [asdict(item) if is_dataclass(item) else item for item in value]
    return json.dumps(value, indent=2, ensure_ascii=False)


def render_report(
    status_line: str,
    summary: Any,
    payload: Any,
    label: Optional[str] = None,
) -> str:
    """Render the standard three-part tool response.

    Args:
        status_line: First line, e.g. "Found 12 people".
        summary: Summary record(s); dataclasses are converted with asdict().
        payload: The untouched Apollo response.
        label: Header placed above the summary JSON.  When omitted the
            summary follows the status line directly.
    """
    summary_block = _to_json(summary)
    if label:
        summary_block = f"{label}:\n{summary_block}"
    return f"{status_line}\n\n{summary_block}\n\nFull data:\n{_to_json(payload)}"


# =============================================================================
# People
# =============================================================================
def summarize_people(payload: dict[str, Any]) -> list[PersonResult]:
    people = payload.get("people") or []
    return [
        PersonResult(
            name=person.get("name"),
            title=person.get("title"),
            company=_organization_name(person),
            location=format_location(person),
            email=person.get("email"),
            linkedin=person.get("linkedin_url"),
        )
        for person in people[:TOP_RESULTS]
    ]


def summarize_person(person: dict[str, Any]) -> PersonProfile:
    phones = person.get("phone_numbers") or []
    return PersonProfile(
        name=person.get("name"),
        title=person.get("title"),
        company=_organization_name(person),
        email=person.get("email"),
        phone=(phones[0] or {}).get("sanitized_number") if phones else None,
        linkedin=person.get("linkedin_url"),
        location=format_location(person),
    )


# =============================================================================
# Organizations
# =============================================================================
def summarize_organizations(payload: dict[str, Any]) -> list[OrganizationResult]:
    organizations = payload.get("organizations") or []
    return [
        OrganizationResult(
            name=org.get("name"),
            domain=org.get("primary_domain"),
            industry=org.get("industry"),
            employees=org.get("estimated_num_employees"),
            location=format_location(org),
        )
        for org in organizations[:TOP_RESULTS]
    ]


def summarize_organization(org: dict[str, Any]) -> OrganizationProfile:
    technologies = org.get("current_technologies")
    return OrganizationProfile(
        name=org.get("name"),
        domain=org.get("primary_domain"),
        industry=org.get("industry"),
        employees=org.get("estimated_num_employees"),
        location=format_location(org),
        description=org.get("short_description"),
        founded=org.get("founded_year"),
        linkedin=org.get("linkedin_url"),
        technologies=technologies[:MAX_TECHNOLOGIES] if technologies is not None else None,
    )


# =============================================================================
# Sequences, mailboxes, message activity
# =============================================================================
def summarize_sequences(payload: dict[str, Any]) -> list[SequenceSummary]:
    return [
        SequenceSummary(
            id=sequence.get("id"),
            name=sequence.get("name"),
            active=sequence.get("active"),
            num_steps=sequence.get("num_steps"),
            stats=SequenceStats(
                sent=sequence.get("num_contacted_people"),
                bounced=sequence.get("num_bounced_people"),
                replied=sequence.get("num_replied_people"),
                interested=sequence.get("num_interested_people"),
                opt_out=sequence.get("num_opt_out_people"),
            ),
        )
        for sequence in payload.get("emailer_campaigns") or []
    ]


def summarize_email_accounts(payload: dict[str, Any]) -> list[EmailAccountSummary]:
    return [
        EmailAccountSummary(
            id=account.get("id"),
            email=account.get("email"),
            active=account.get("active"),
            type=account.get("type"),
        )
        for account in payload.get("email_accounts") or []
    ]


def summarize_message_activities(message_id: str, payload: dict[str, Any]) -> MessageActivityReport:
    touches = payload.get("emailer_touches") or []

    def count(touch_type: str) -> int:
        return sum(1 for touch in touches if touch.get("touch_type") == touch_type)

    return MessageActivityReport(
        message_id=message_id,
        total_activities=len(touches),
        opens=count("opened"),
        clicks=count("clicked"),
        replies=count("replied"),
        activities=[
            ActivityEntry(
                type=touch.get("touch_type"),
                created_at=touch.get("created_at"),
                user_agent=touch.get("user_agent"),
            )
            for touch in touches
        ],
    )
