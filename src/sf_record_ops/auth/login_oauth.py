"""OAuth 2.0 token endpoint login flows

Each login is a generator: it yields the ``httpx.Request`` to send to the
token endpoint, receives the ``httpx.Response`` and returns a
``SalesforceToken``. This keeps the flows transport agnostic so that
``SalesforceAuth`` can drive them from inside an httpx auth flow.
"""

from json import JSONDecodeError

import httpx

from ..exceptions import SalesforceAuthenticationFailed
from ..logger import getLogger
from .types import (
    AuthMissingResponse,
    SalesforceLogin,
    SalesforceToken,
    SalesforceTokenGenerator,
)

LOGGER = getLogger("auth")


def token_login(
    domain: str, token_data: dict[str, str], consumer_key: str
) -> SalesforceTokenGenerator:
    """Process OAuth 2.0 token endpoint login workflow."""
    token_url = httpx.URL(f"https://{domain}.salesforce.com/services/oauth2/token")
    response = yield httpx.Request(
        "POST",
        token_url,
        data=token_data,
        headers={"Accept": "application/json"},
    )
    if response is None:
        raise AuthMissingResponse("No response received")

    try:
        json_response = response.json()
    except JSONDecodeError as e:
        raise SalesforceAuthenticationFailed(
            str(response.status_code), response.text
        ) from e

    if response.status_code != 200:
        raise SalesforceAuthenticationFailed(
            json_response.get("error"), json_response.get("error_description")
        )

    LOGGER.info(
        "Obtained access token for %s using client %s",
        json_response["instance_url"],
        consumer_key,
    )
    return SalesforceToken(
        httpx.URL(json_response["instance_url"]), json_response["access_token"]
    )


def password_login(
    username: str,
    password: str,
    consumer_key: str,
    consumer_secret: str,
    security_token: str = "",
    domain: str = "login",
) -> SalesforceLogin:
    """OAuth 2.0 username-password flow"""

    def _password_login():
        return (
            yield from token_login(
                domain,
                {
                    "grant_type": "password",
                    "client_id": consumer_key,
                    "client_secret": consumer_secret,
                    "username": username,
                    "password": password + (security_token or ""),
                },
                consumer_key,
            )
        )

    return _password_login


def client_credentials_flow_login(
    consumer_key: str, consumer_secret: str, domain: str = "login"
) -> SalesforceLogin:
    """OAuth 2.0 client credentials flow (run-as user set on the connected app)"""

    def _client_credentials_login():
        return (
            yield from token_login(
                domain,
                {
                    "grant_type": "client_credentials",
                    "client_id": consumer_key,
                    "client_secret": consumer_secret,
                },
                consumer_key,
            )
        )

    return _client_credentials_login


def lazy_oauth_login(**kwargs) -> SalesforceLogin:
    """Pick the OAuth flow matching the provided parameters"""
    consumer_key = kwargs.get("consumer_key")
    consumer_secret = kwargs.get("consumer_secret")
    domain = kwargs.get("domain") or "login"
    if not consumer_key or not consumer_secret:
        raise ValueError("consumer_key and consumer_secret are required")

    if kwargs.get("username"):
        return password_login(
            kwargs["username"],
            kwargs.get("password") or "",
            consumer_key,
            consumer_secret,
            kwargs.get("security_token") or "",
            domain,
        )
    return client_credentials_flow_login(consumer_key, consumer_secret, domain)


__all__ = [
    "token_login",
    "password_login",
    "client_credentials_flow_login",
    "lazy_oauth_login",
]
