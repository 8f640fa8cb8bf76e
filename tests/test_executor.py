import json

import httpx
import pytest

from sf_record_ops.exceptions import (
    AuthenticationError,
    SalesforceExpiredSession,
    SalesforceResourceNotFound,
    SalesforceServerError,
)
from sf_record_ops.executor import execute
from sf_record_ops.requests import (
    RecordCreate,
    RecordDelete,
    RecordGet,
    RecordGetWithFields,
    RecordUpdate,
)

OWNER = "test-owner"


def account_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"Id": "001xx", "Name": "Acme"})


def test_first_request_logs_in(sf_config, fake_org, registry):
    fake_org.handler = account_handler

    body = execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)

    assert json.loads(body) == {"Id": "001xx", "Name": "Acme"}
    assert fake_org.logins == 1
    assert fake_org.tokens_seen == ["token-1"]


def test_token_is_reused(sf_config, fake_org, registry):
    fake_org.handler = account_handler

    execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)
    execute(RecordGet("Account", "001yy"), sf_config, "another-owner", registry)

    assert fake_org.logins == 1
    assert fake_org.tokens_seen == ["token-1", "token-1"]
    assert registry.owners(sf_config) == 2


def test_expired_token_refreshed_once(sf_config, fake_org, registry):
    fake_org.handler = account_handler
    execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)
    fake_org.expire_tokens()

    body = execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)

    assert '"Acme"' in body
    assert fake_org.logins == 2
    assert fake_org.tokens_seen == ["token-1", "token-1", "token-2"]


def test_second_rejection_is_not_retried(sf_config, fake_org, registry):
    fake_org.handler = account_handler
    execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)
    fake_org.reject_all = True

    with pytest.raises(SalesforceExpiredSession) as excinfo:
        execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)

    assert isinstance(excinfo.value, AuthenticationError)
    assert excinfo.value.status_code == 401
    assert "INVALID_SESSION_ID" in excinfo.value.content
    assert fake_org.logins == 2
    assert fake_org.tokens_seen == ["token-1", "token-1", "token-2"]


def test_non_auth_error_is_not_retried(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(
        404,
        json=[{"errorCode": "NOT_FOUND", "message": "The requested resource does not exist"}],
    )

    with pytest.raises(SalesforceResourceNotFound) as excinfo:
        execute(RecordGet("Account", "001zz"), sf_config, OWNER, registry)

    exception = excinfo.value
    assert exception.status_code == 404
    assert exception.method == "GET"
    assert exception.resource_name == "Account"
    assert exception.url_path == "/services/data/v48.0/sobjects/Account/001zz"
    assert "NOT_FOUND" in exception.content
    assert len(fake_org.requests) == 1
    assert fake_org.logins == 1


def test_server_error(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(500, text="boom")

    with pytest.raises(SalesforceServerError):
        execute(RecordDelete("Account", "001xx"), sf_config, OWNER, registry)


def test_get_with_fields_url(sf_config, fake_org, registry):
    fake_org.handler = account_handler

    execute(
        RecordGetWithFields("Account", "001xx", ["Name", "Id"]),
        sf_config,
        OWNER,
        registry,
    )

    (request,) = fake_org.requests
    assert str(request.url) == (
        "https://test.salesforce.com/services/data/v48.0/sobjects/Account/001xx?fields=Name,Id"
    )


def test_create_returns_body(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(
        201, json={"id": "001new", "success": True, "errors": []}
    )

    body = execute(RecordCreate("Account", {"Name": "Acme"}), sf_config, OWNER, registry)

    assert '"001new"' in body
    (request,) = fake_org.requests
    assert request.method == "POST"
    assert request.url.path == "/services/data/v48.0/sobjects/Account"


def test_update_returns_none(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(204)

    assert (
        execute(RecordUpdate("Account", "001xx", {"Name": "New"}), sf_config, OWNER, registry)
        is None
    )
    (request,) = fake_org.requests
    assert request.method == "PATCH"


def test_delete_issues_delete(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(204)

    result = execute(RecordDelete("Contact", "003xx"), sf_config, OWNER, registry)

    assert result is None
    (request,) = fake_org.requests
    assert request.method == "DELETE"
    assert request.url.path == "/services/data/v48.0/sobjects/Contact/003xx"
    assert request.headers["Authorization"] == "Bearer token-1"


def test_api_usage_recorded(sf_config, fake_org, registry):
    fake_org.handler = lambda request: httpx.Response(
        200, json={}, headers={"Sforce-Limit-Info": "api-usage=18/5000"}
    )

    execute(RecordGet("Account", "001xx"), sf_config, OWNER, registry)

    client = registry.acquire(sf_config, OWNER)
    assert client.api_usage.api_usage.used == 18
    assert client.api_usage.api_usage.remaining == 4982
