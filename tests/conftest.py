from collections.abc import Callable

import httpx
import pytest

from sf_record_ops.client import SalesforceClient
from sf_record_ops.config import SalesforceConfiguration
from sf_record_ops.registry import ClientRegistry


class FakeOrg:
    """Fake Salesforce org serving the token endpoint and sObject resources"""

    def __init__(self):
        self.logins = 0
        self.requests: list[httpx.Request] = []
        self.tokens_seen: list[str] = []
        self.valid_tokens: set[str] = set()
        self.reject_all = False
        self.handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def issue_token(self) -> str:
        self.logins += 1
        token = f"token-{self.logins}"
        self.valid_tokens.add(token)
        return token

    def expire_tokens(self):
        self.valid_tokens.clear()

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/services/oauth2/token":
            return httpx.Response(
                200,
                json={
                    "access_token": self.issue_token(),
                    "instance_url": "https://test.my.salesforce.com",
                    "token_type": "Bearer",
                },
            )
        self.requests.append(request)
        token = request.headers.get("Authorization", "").removeprefix("Bearer ")
        self.tokens_seen.append(token)
        if self.reject_all or token not in self.valid_tokens:
            return httpx.Response(
                401,
                json=[
                    {
                        "message": "Session expired or invalid",
                        "errorCode": "INVALID_SESSION_ID",
                    }
                ],
            )
        return self.handler(request)


@pytest.fixture
def sf_config():
    return SalesforceConfiguration(
        instance_name="test",
        client_id="test_consumer_key",
        client_secret="test_consumer_secret",
        username="user@example.com",
        password="password123",
    )


@pytest.fixture
def fake_org():
    return FakeOrg()


@pytest.fixture
def registry(fake_org: FakeOrg):
    transport = httpx.MockTransport(fake_org)
    _registry = ClientRegistry(
        lambda configuration: SalesforceClient(configuration, transport=transport)
    )
    yield _registry
    _registry.close_all()
