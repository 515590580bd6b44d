# =============================================================================
# apollo_tools/adapter.py  -  Tool catalog and invocation pipeline
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Bridges MCP tool calls to ApolloClient.  For every call it runs the same
#   five steps:
#
#     1. Dispatch   - find the handler for the tool name
#     2. Validate   - parse the arguments with the tool's pydantic model
#     3. Map        - build Apollo's request body (renames, absent → omitted)
#     4. Invoke     - exactly one Apollo call, no retry
#     5. Summarize  - status line + summary JSON + full payload JSON
#
#   Any exception on the way is converted by errors.map_exception(), so a
#   caller only ever sees an ApolloToolError.
#
# THE CATALOG:
#   TOOL_CATALOG is built once at import and never changes.  Its order is
#   the order tools are listed to the client.  Input schemas come straight
#   from the pydantic models, so the catalog and the validator cannot drift.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from apollo_core.client import ApolloClient
from apollo_core.models import (
    EmailAccountsParams,
    EmailMessageActivitiesParams,
    EnrichOrganizationParams,
    EnrichPersonParams,
    SearchOrganizationsParams,
    SearchPeopleParams,
    SearchSequencesParams,
    ToolParams,
)
from apollo_core.summaries import (
    ORGANIZATION_NOT_FOUND,
    PERSON_NOT_FOUND,
    render_report,
    summarize_email_accounts,
    summarize_message_activities,
    summarize_organization,
    summarize_organizations,
    summarize_people,
    summarize_person,
    summarize_sequences,
    total_entries,
)
from apollo_tools.errors import UnknownToolError, map_exception

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolDefinition:
    """One entry of the tool catalog."""

    name: str
    description: str
    params_model: type[ToolParams]
    handler: str    # ApolloToolAdapter method that serves the tool

    @property
    def input_schema(self) -> dict[str, Any]:
        schema = self.params_model.model_json_schema()
        schema.setdefault("properties", {})
        return schema


TOOL_CATALOG: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="apollo_search_people",
        description=(
            "Search for people/prospects in Apollo's B2B database. "
            "Filter by job titles, locations, companies, etc."
        ),
        params_model=SearchPeopleParams,
        handler="_search_people",
    ),
    ToolDefinition(
        name="apollo_enrich_person",
        description=(
            "Enrich a person's data with Apollo's B2B intelligence. "
            "Provide email, name, or company info."
        ),
        params_model=EnrichPersonParams,
        handler="_enrich_person",
    ),
    ToolDefinition(
        name="apollo_enrich_organization",
        description="Enrich a company's data with Apollo's B2B intelligence using their domain.",
        params_model=EnrichOrganizationParams,
        handler="_enrich_organization",
    ),
    ToolDefinition(
        name="apollo_search_organizations",
        description=(
            "Search for companies/organizations in Apollo's B2B database. "
            "Filter by location, size, keywords, etc."
        ),
        params_model=SearchOrganizationsParams,
        handler="_search_organizations",
    ),
    ToolDefinition(
        name="apollo_search_sequences",
        description=(
            "Search for email sequences in your Apollo account. Returns sequence stats "
            "including sent, bounced, replied counts. Requires master API key."
        ),
        params_model=SearchSequencesParams,
        handler="_search_sequences",
    ),
    ToolDefinition(
        name="apollo_get_email_accounts",
        description=(
            "Get list of email accounts connected to your Apollo account. "
            "Requires master API key."
        ),
        params_model=EmailAccountsParams,
        handler="_get_email_accounts",
    ),
    ToolDefinition(
        name="apollo_get_email_message_activities",
        description=(
            "Get activities (opens, clicks, replies) for a specific email message "
            "sent via sequence. Requires master API key."
        ),
        params_model=EmailMessageActivitiesParams,
        handler="_get_email_message_activities",
    ),
)


class ApolloToolAdapter:
    """Validates, dispatches and formats Apollo tool calls.

    Stateless apart from the client it wraps; one instance serves every
    call for the life of the process.
    """

    def __init__(self, client: ApolloClient) -> None:
        self._client = client
        self._definitions = {definition.name: definition for definition in TOOL_CATALOG}
        # A catalog entry naming a missing method fails here, not on first call
        self._handlers: dict[str, Callable[[Any], str]] = {
            definition.name: getattr(self, definition.handler) for definition in TOOL_CATALOG
        }

    def list_tools(self) -> list[ToolDefinition]:
        return list(TOOL_CATALOG)

    def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """Run one tool call end to end and return its text response.

        Args:
            name: Catalog tool name, matched exactly.
            arguments: Raw caller arguments; None is treated as {}.

        Raises:
            ApolloToolError: Any failure, already mapped to its category.
        """
        try:
            definition = self._definitions.get(name)
            if definition is None:
                raise UnknownToolError(name)
            params = definition.params_model.model_validate(
                arguments if arguments is not None else {}
            )
            return self._handlers[name](params)
        except Exception as exc:
            error = map_exception(exc)
            logger.warning(f"{name} failed: {type(error).__name__}: {error.message}")
            if error is exc:
                raise
            raise error from exc

    # =========================================================================
    # Handlers - one per tool, each receives already validated params
    # =========================================================================
    def _search_people(self, params: SearchPeopleParams) -> str:
        result = self._client.search_people(params.to_request())
        summary = summarize_people(result)
        logger.info(f"  → /mixed_people/search returned {len(result.get('people') or [])} people")
        return render_report(
            f"Found {total_entries(result)} people", summary, result, label="Top Results"
        )

    def _enrich_person(self, params: EnrichPersonParams) -> str:
        result = self._client.enrich_person(params.to_request())
        person = result.get("person")
        if person is None:
            logger.info("  → /people/match found no person")
            return PERSON_NOT_FOUND
        return render_report("Person Enrichment:", summarize_person(person), result)

    def _enrich_organization(self, params: EnrichOrganizationParams) -> str:
        result = self._client.enrich_organization(params.domain)
        organization = result.get("organization")
        if organization is None:
            logger.info(f"  → /organizations/enrich found nothing for {params.domain}")
            return ORGANIZATION_NOT_FOUND
        return render_report(
            "Organization Enrichment:", summarize_organization(organization), result
        )

    def _search_organizations(self, params: SearchOrganizationsParams) -> str:
        result = self._client.search_organizations(params.to_request())
        summary = summarize_organizations(result)
        return render_report(
            f"Found {total_entries(result)} organizations", summary, result, label="Top Results"
        )

    def _search_sequences(self, params: SearchSequencesParams) -> str:
        result = self._client.search_sequences(params.to_request())
        summary = summarize_sequences(result)
        return render_report(f"Found {len(summary)} sequences", summary, result, label="Summary")

    def _get_email_accounts(self, params: EmailAccountsParams) -> str:
        result = self._client.get_email_accounts()
        summary = summarize_email_accounts(result)
        return render_report(
            f"Found {len(summary)} email accounts", summary, result, label="Accounts"
        )

    def _get_email_message_activities(self, params: EmailMessageActivitiesParams) -> str:
        result = self._client.get_email_message_activities(params.message_id)
        report = summarize_message_activities(params.message_id, result)
        return render_report("Email Message Activities:", report, result)
