from json import JSONDecodeError
from unittest.mock import Mock
from urllib.parse import parse_qs

import httpx
import pytest

from sf_record_ops.auth.login_oauth import (
    client_credentials_flow_login,
    lazy_oauth_login,
    password_login,
    token_login,
)
from sf_record_ops.auth.types import AuthMissingResponse, SalesforceToken
from sf_record_ops.exceptions import AuthenticationError, SalesforceAuthenticationFailed


def run_login(login_gen, response):
    request = next(login_gen)
    try:
        login_gen.send(response)
    except StopIteration as e:
        return request, e.value
    raise AssertionError("login flow did not finish")


def test_token_login_success():
    """Test successful token login flow."""
    mock_response = Mock(spec=httpx.Response)
    mock_response.status_code = 200
    mock_response.json.return_value = {
        "access_token": "00D...FAKE_TOKEN",
        "instance_url": "https://test.my.salesforce.com",
        "id": "https://login.salesforce.com/id/00D000000000001AAA/005000000000001AAA",
        "token_type": "Bearer",
        "issued_at": "1613412345123",
        "signature": "SIGNATURE",
    }

    token_gen = token_login(
        "test",
        {"grant_type": "password", "username": "user@example.com"},
        "test_consumer_key",
    )
    request, token = run_login(token_gen, mock_response)

    assert isinstance(request, httpx.Request)
    assert request.method == "POST"
    assert request.url == "https://test.salesforce.com/services/oauth2/token"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    assert isinstance(token, SalesforceToken)
    assert token.token == "00D...FAKE_TOKEN"
    assert token.instance.host == "test.my.salesforce.com"


def test_token_login_error():
    """Test token login with error response."""
    mock_response = Mock(spec=httpx.Response)
    mock_response.status_code = 400
    mock_response.json.return_value = {
        "error": "invalid_grant",
        "error_description": "authentication failure",
    }

    token_gen = token_login(
        "test",
        {"grant_type": "password", "username": "user@example.com"},
        "test_consumer_key",
    )
    next(token_gen)

    with pytest.raises(SalesforceAuthenticationFailed) as excinfo:
        token_gen.send(mock_response)

    exception = excinfo.value
    assert isinstance(exception, AuthenticationError)
    assert exception.code == "invalid_grant"
    assert exception.message == "authentication failure"
    assert str(exception) == "invalid_grant: authentication failure"


def test_token_login_json_decode_error():
    """Test token login with invalid JSON response."""
    mock_response = Mock(spec=httpx.Response)
    mock_response.status_code = 502
    mock_response.json.side_effect = JSONDecodeError("Invalid JSON", "", 0)
    mock_response.text = "Not valid JSON"

    token_gen = token_login("test", {"grant_type": "password"}, "test_consumer_key")
    next(token_gen)

    with pytest.raises(SalesforceAuthenticationFailed) as excinfo:
        token_gen.send(mock_response)

    assert excinfo.value.code == "502"
    assert excinfo.value.message == "Not valid JSON"


def test_token_login_no_response():
    """Test token login with no response."""
    token_gen = token_login("test", {"grant_type": "password"}, "test_consumer_key")
    next(token_gen)

    with pytest.raises(AuthMissingResponse, match="No response received"):
        token_gen.send(None)


def test_password_login_form_data():
    login = password_login(
        username="test@example.com",
        password="password123",
        consumer_key="test_consumer_key",
        consumer_secret="test_consumer_secret",
        security_token="SECTOKEN",
        domain="test",
    )
    request = next(login())

    assert request.url == "https://test.salesforce.com/services/oauth2/token"
    form = parse_qs(request.read().decode())
    assert form == {
        "grant_type": ["password"],
        "client_id": ["test_consumer_key"],
        "client_secret": ["test_consumer_secret"],
        "username": ["test@example.com"],
        "password": ["password123SECTOKEN"],
    }


def test_password_login_returns_token():
    login = password_login("u@example.com", "pw", "key", "secret")
    response = httpx.Response(
        200,
        json={"access_token": "abc", "instance_url": "https://na1.salesforce.com"},
    )
    request, token = run_login(login(), response)

    assert request.url.host == "login.salesforce.com"
    assert token == SalesforceToken(httpx.URL("https://na1.salesforce.com"), "abc")


def test_client_credentials_flow_login():
    login = client_credentials_flow_login("key", "secret", domain="test")
    request = next(login())

    form = parse_qs(request.read().decode())
    assert form == {
        "grant_type": ["client_credentials"],
        "client_id": ["key"],
        "client_secret": ["secret"],
    }


def test_lazy_oauth_login_with_username(mocker):
    mock_password_login = mocker.patch("sf_record_ops.auth.login_oauth.password_login")
    lazy_oauth_login(
        consumer_key="key",
        consumer_secret="secret",
        username="user@example.com",
        password="pw",
        security_token="tok",
        domain="test",
    )

    mock_password_login.assert_called_once_with(
        "user@example.com", "pw", "key", "secret", "tok", "test"
    )


def test_lazy_oauth_login_without_username(mocker):
    mock_cc_login = mocker.patch(
        "sf_record_ops.auth.login_oauth.client_credentials_flow_login"
    )
    lazy_oauth_login(consumer_key="key", consumer_secret="secret", username="")

    mock_cc_login.assert_called_once_with("key", "secret", "login")


def test_lazy_oauth_login_requires_consumer():
    with pytest.raises(ValueError, match="consumer_key and consumer_secret"):
        lazy_oauth_login(username="user@example.com", password="pw")
