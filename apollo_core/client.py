# =============================================================================
# apollo_core/client.py  -  Apollo.io REST client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One method per Apollo endpoint the tool server uses.  Every method fires
#   a single HTTP request and returns the decoded JSON body untouched.
#
# WHAT IT DOES NOT DO:
#   - No validation (the adapter validates before calling us)
#   - No retries, caching or pagination beyond page/per_page passthrough
#   - No status-code interpretation: raise_for_status() turns any non-2xx
#     into httpx.HTTPStatusError and the adapter decides what it means
#
# ENDPOINTS:
#   POST /mixed_people/search                 search_people
#   POST /people/match                        enrich_person
#   POST /organizations/enrich                enrich_organization
#   POST /mixed_companies/search              search_organizations
#   POST /emailer_campaigns/search            search_sequences
#   GET  /email_accounts                      get_email_accounts
#   GET  /emailer_messages/{id}/activities    get_email_message_activities
# =============================================================================

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from apollo_core.config import ApolloConfig

logger = logging.getLogger(__name__)


class ApolloClient:
    """Thin synchronous client for the Apollo.io v1 API.

    The API key travels in the X-Api-Key header set once here, so no method
    carries per-call auth.  One httpx.Client is reused for every call.

    Args:
        config: Process configuration (API key, base URL).
        transport: Optional httpx transport; tests pass httpx.MockTransport.
    """

    def __init__(
        self,
        config: ApolloConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._http = httpx.Client(
            base_url=config.base_url,
            headers={
                "Content-Type": "application/json",
                "Cache-Control": "no-cache",
                "X-Api-Key": config.api_key,
            },
            transport=transport,
        )

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ApolloClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Transport helpers
    # -------------------------------------------------------------------------
    def _post(self, path: str, body: dict[str, Any]) -> Any:
        logger.debug(f"POST {path}")
        response = self._http.post(path, json=body)
        response.raise_for_status()
        return response.json()

    def _get(self, path: str) -> Any:
        logger.debug(f"GET {path}")
        response = self._http.get(path)
        response.raise_for_status()
        return response.json()

    # -------------------------------------------------------------------------
    # Prospecting
    # -------------------------------------------------------------------------
    def search_people(self, params: dict[str, Any]) -> Any:
        """Search Apollo's people database.

        Body keys: q_keywords, person_titles, person_locations,
        organization_ids, page, per_page.
        """
        return self._post("/mixed_people/search", params)

    def enrich_person(self, params: dict[str, Any]) -> Any:
        """Match one person from partial details.

        Body keys: first_name, last_name, email, domain, organization_name.
        """
        return self._post("/people/match", params)

    def enrich_organization(self, domain: str) -> Any:
        return self._post("/organizations/enrich", {"domain": domain})

    def search_organizations(self, params: dict[str, Any]) -> Any:
        """Search Apollo's company database.

        Body keys: q_keywords, organization_locations,
        organization_num_employees_ranges, page, per_page.
        """
        return self._post("/mixed_companies/search", params)

    # -------------------------------------------------------------------------
    # Sequences and mailboxes (master API key required by Apollo)
    # -------------------------------------------------------------------------
    def search_sequences(self, params: Optional[dict[str, Any]] = None) -> Any:
        return self._post("/emailer_campaigns/search", params or {})

    def get_email_accounts(self) -> Any:
        return self._get("/email_accounts")

    def get_email_message_activities(self, message_id: str) -> Any:
        return self._get(f"/emailer_messages/{quote(message_id, safe='')}/activities")
