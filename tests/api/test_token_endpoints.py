# This file tests bearer token issuance.
# It exists to confirm tokens are unique UUIDs bound to the requesting email.
# The tests also verify request validation uses the shared error payload.

from __future__ import annotations

import re

from src.access.token_store import TokenStore
from tests.api.support import api_test_client

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


def test_token_endpoint_issues_uuid_bound_to_email() -> None:
    store = TokenStore()
    with api_test_client(token_store=store, seed_token=False) as harness:
        response = harness.client.post("/api/token", json={"email": "reader@example.com"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    token = response.json()["token"]
    assert UUID_RE.match(token)
    issued = store.resolve(token)
    assert issued is not None
    assert issued.email == "reader@example.com"


def test_token_endpoint_issues_unique_tokens_per_request() -> None:
    store = TokenStore()
    with api_test_client(token_store=store, seed_token=False) as harness:
        first = harness.client.post("/api/token", json={"email": "repeat@example.com"}).json()["token"]
        second = harness.client.post("/api/token", json={"email": "repeat@example.com"}).json()["token"]

    assert first != second
    assert first in store
    assert second in store


def test_token_endpoint_rejects_missing_or_malformed_email() -> None:
    with api_test_client(seed_token=False) as harness:
        missing = harness.client.post("/api/token", json={})
        blank = harness.client.post("/api/token", json={"email": "   "})
        wrong_type = harness.client.post("/api/token", json={"email": 123})

    for response in (missing, blank, wrong_type):
        assert response.status_code == 422
        payload = response.json()
        assert payload["error_code"] == "VALIDATION_ERROR"


def test_issued_token_is_accepted_by_justify() -> None:
    with api_test_client(seed_token=False) as harness:
        token = harness.client.post("/api/token", json={"email": "flow@example.com"}).json()["token"]
        response = harness.client.post(
            "/api/justify",
            content="Hello world.",
            headers=harness.auth_headers(token),
        )

    assert response.status_code == 200
    assert response.text == "Hello world."
