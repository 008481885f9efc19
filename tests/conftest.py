import json
from urllib.parse import unquote

import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.config import Settings
from gateway.main import create_app


class FakeBackend:
    """In-memory stand-in for the json-server backend. Records every call."""

    def __init__(self):
        self.calls = []
        self.next_id = 100
        self.companies = {
            "1": {"id": "1", "name": "Apple", "description": "iphone"},
            "2": {"id": "2", "name": "Google", "description": "search"},
        }
        self.users = {
            "23": {"id": "23", "firstName": "Bill", "age": 20, "companyId": "1"},
            "40": {"id": "40", "firstName": "Alex", "age": 40, "companyId": "2"},
            "41": {"id": "41", "firstName": "Nick", "age": 40, "companyId": "2"},
            "44": {"id": "44", "firstName": "Samantha", "age": 21, "companyId": "2"},
            "47": {"id": "47", "firstName": "Zoe", "age": 33},
        }
        self.fail = {}
        self.responses = {}
        self.last_body = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        # raw path, so escaped ids stay visible in the call log
        method, path = request.method, request.url.raw_path.decode("ascii").split("?")[0]
        self.calls.append((method, path))
        if path in self.fail:
            return httpx.Response(self.fail[path], json={"error": "boom"})
        if path in self.responses:
            return httpx.Response(200, json=self.responses[path])

        parts = [unquote(p) for p in path.split("/") if p]
        body = json.loads(request.content) if request.content else None
        self.last_body = body

        if parts == ["users"] and method == "POST":
            user = {"id": str(self.next_id), **body}
            self.next_id += 1
            self.users[user["id"]] = user
            return httpx.Response(201, json=user)

        if len(parts) == 2 and parts[0] == "users":
            user = self.users.get(parts[1])
            if user is None:
                return httpx.Response(404, json={})
            if method == "GET":
                return httpx.Response(200, json=user)
            if method == "PATCH":
                user.update(body)
                return httpx.Response(200, json=user)
            if method == "DELETE":
                del self.users[parts[1]]
                return httpx.Response(200, json={})

        if len(parts) == 2 and parts[0] == "companies" and method == "GET":
            company = self.companies.get(parts[1])
            if company is None:
                return httpx.Response(404, json={})
            return httpx.Response(200, json=company)

        if len(parts) == 3 and parts[0] == "companies" and parts[2] == "users" and method == "GET":
            return httpx.Response(
                200, json=[u for u in self.users.values() if u.get("companyId") == parts[1]]
            )

        return httpx.Response(404, json={})


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    settings = Settings(backend_url="http://backend.test")
    app = create_app(settings, transport=httpx.MockTransport(backend))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def gql(client):
    def run(query, variables=None):
        response = client.post("/graphql", json={"query": query, "variables": variables or {}})
        return response.json()

    return run
