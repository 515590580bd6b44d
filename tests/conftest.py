"""Shared fixtures for the Apollo MCP tests."""

import json
from typing import Any, Callable

import httpx
import pytest

from apollo_core.client import ApolloClient
from apollo_core.config import ApolloConfig
from apollo_tools.adapter import ApolloToolAdapter


class FakeApolloClient:
    """Stands in for ApolloClient: records calls, returns canned payloads."""

    def __init__(self, payload: Any = None, error: Exception = None):
        self.payload = {} if payload is None else payload
        self.error = error
        self.calls: list[tuple[str, tuple]] = []

    def _respond(self, method: str, *args):
        self.calls.append((method, args))
        if self.error is not None:
            raise self.error
        return self.payload

    def search_people(self, params):
        return self._respond("search_people", params)

    def enrich_person(self, params):
        return self._respond("enrich_person", params)

    def enrich_organization(self, domain):
        return self._respond("enrich_organization", domain)

    def search_organizations(self, params):
        return self._respond("search_organizations", params)

    def search_sequences(self, params=None):
        return self._respond("search_sequences", params)

    def get_email_accounts(self):
        return self._respond("get_email_accounts")

    def get_email_message_activities(self, message_id):
        return self._respond("get_email_message_activities", message_id)


@pytest.fixture
def config() -> ApolloConfig:
    return ApolloConfig(api_key="test-key")


@pytest.fixture
def fake_client() -> FakeApolloClient:
    return FakeApolloClient()


@pytest.fixture
def adapter(fake_client) -> ApolloToolAdapter:
    return ApolloToolAdapter(fake_client)


@pytest.fixture
def http_client(config) -> Callable[..., tuple[ApolloClient, list[httpx.Request]]]:
    """Build a real ApolloClient over httpx.MockTransport.

    Returns (client, requests) where requests collects every request sent.
    """
    clients = []

    def build(status_code: int = 200, body: Any = None):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, content=json.dumps(body if body is not None else {}))

        client = ApolloClient(config, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client, requests

    yield build

    for client in clients:
        client.close()
