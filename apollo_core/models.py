# =============================================================================
# apollo_core/models.py  -  Data Models (tool inputs and summary records)
# =============================================================================
#
# Two families of models live here:
#
#   1. *Params (pydantic)  - what a tool caller may send.  Each model applies
#      the documented defaults, ignores unknown keys, and knows how to turn
#      itself into the request body Apollo expects (to_request()).
#
#   2. Summary records (dataclasses) - the small fixed-shape projections that
#      head every tool response.  The full Apollo payload is always returned
#      next to them, so these only carry what a reader scans first.
#
# DESIGN PRINCIPLE - "Absent means absent":
#   An optional field the caller left out is never sent to Apollo as null,
#   "" or 0.  to_request() only copies fields that carry a value.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _present(**fields: Any) -> dict[str, Any]:
    """Keep only the fields that carry a value."""
    return {key: value for key, value in fields.items() if value is not None and value != ""}


class ToolParams(BaseModel):
    """Base for every tool's input model: open schema, extra keys dropped."""

    model_config = ConfigDict(extra="ignore")

    def to_request(self) -> dict[str, Any]:
        return _present(**self.model_dump())


# -----------------------------------------------------------------------------
# Prospecting inputs
# -----------------------------------------------------------------------------
class SearchPeopleParams(ToolParams):
    keywords: Optional[str] = Field(
        default=None, description="Keywords to search for (job title, company, etc)"
    )
    titles: Optional[list[str]] = Field(
        default=None, description="Array of job titles to filter by"
    )
    locations: Optional[list[str]] = Field(
        default=None, description="Array of locations to filter by"
    )
    organization_ids: Optional[list[str]] = Field(
        default=None, description="Array of organization IDs to filter by"
    )
    page: int = Field(default=1, description="Page number for pagination")
    per_page: int = Field(default=10, description="Results per page (max 100)")

    def to_request(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            **_present(
                q_keywords=self.keywords,
                person_titles=self.titles,
                person_locations=self.locations,
                organization_ids=self.organization_ids,
            ),
        }


class EnrichPersonParams(ToolParams):
    first_name: Optional[str] = Field(default=None, description="Person's first name")
    last_name: Optional[str] = Field(default=None, description="Person's last name")
    email: Optional[str] = Field(default=None, description="Person's email address")
    domain: Optional[str] = Field(
        default=None, description="Company domain (e.g., apollo.io)"
    )
    organization_name: Optional[str] = Field(default=None, description="Company name")


class EnrichOrganizationParams(ToolParams):
    # No syntax check: Apollo decides what a usable domain is.
    domain: str = Field(description="Company domain (e.g., apollo.io)")


class SearchOrganizationsParams(ToolParams):
    keywords: Optional[str] = Field(default=None, description="Keywords to search for")
    locations: Optional[list[str]] = Field(
        default=None, description="Array of locations to filter by"
    )
    employee_ranges: Optional[list[str]] = Field(
        default=None, description="Employee count ranges (e.g., ['1-10', '11-50'])"
    )
    page: int = Field(default=1, description="Page number for pagination")
    per_page: int = Field(default=10, description="Results per page (max 100)")

    def to_request(self) -> dict[str, Any]:
        return {
            "page": self.page,
            "per_page": self.per_page,
            **_present(
                q_keywords=self.keywords,
                organization_locations=self.locations,
                organization_num_employees_ranges=self.employee_ranges,
            ),
        }


# -----------------------------------------------------------------------------
# Sequence / mailbox inputs
# -----------------------------------------------------------------------------
class SearchSequencesParams(ToolParams):
    name: Optional[str] = Field(default=None, description="Sequence name to filter by")
    page: int = Field(default=1, description="Page number for pagination")
    per_page: int = Field(default=25, description="Results per page")

    def to_request(self) -> dict[str, Any]:
        return {"page": self.page, "per_page": self.per_page, **_present(name=self.name)}


class EmailAccountsParams(ToolParams):
    """The email accounts listing takes no arguments."""


class EmailMessageActivitiesParams(ToolParams):
    message_id: str = Field(description="The emailer message ID to get activities for")


# -----------------------------------------------------------------------------
# Summary records
# -----------------------------------------------------------------------------
# Field order here is the key order in the rendered JSON.  A field Apollo did
# not send renders as null, so every record keeps the same shape.
# -----------------------------------------------------------------------------
@dataclass
class PersonResult:
    """One row of a people search."""

    name: Optional[str]
    title: Optional[str]
    company: Optional[str]
    location: Optional[str]
    email: Optional[str]
    linkedin: Optional[str]


@dataclass
class PersonProfile:
    """Headline fields of an enriched person."""

    name: Optional[str]
    title: Optional[str]
    company: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    linkedin: Optional[str]
    location: Optional[str]


@dataclass
class OrganizationResult:
    """One row of an organization search."""

    name: Optional[str]
    domain: Optional[str]
    industry: Optional[str]
    employees: Optional[int]
    location: Optional[str]


@dataclass
class OrganizationProfile:
    """Headline fields of an enriched organization."""

    name: Optional[str]
    domain: Optional[str]
    industry: Optional[str]
    employees: Optional[int]
    location: Optional[str]
    description: Optional[str]
    founded: Optional[int]
    linkedin: Optional[str]
    technologies: Optional[list[Any]]   # first 10 only


@dataclass
class SequenceStats:
    sent: Optional[int]
    bounced: Optional[int]
    replied: Optional[int]
    interested: Optional[int]
    opt_out: Optional[int]


@dataclass
class SequenceSummary:
    id: Optional[str]
    name: Optional[str]
    active: Optional[bool]
    num_steps: Optional[int]
    stats: SequenceStats


@dataclass
class EmailAccountSummary:
    id: Optional[str]
    email: Optional[str]
    active: Optional[bool]
    type: Optional[str]


@dataclass
class ActivityEntry:
    """One touch (open, click, reply) on a sequence message."""

    type: Optional[str]
    created_at: Optional[str]
    user_agent: Optional[str]


@dataclass
class MessageActivityReport:
    """Aggregate engagement counts for one sequence message."""

    message_id: str
    total_activities: int
    opens: int
    clicks: int
    replies: int
    activities: list[ActivityEntry] = field(default_factory=list)
