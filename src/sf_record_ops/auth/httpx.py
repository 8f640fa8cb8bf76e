import threading
import typing

import httpx

from ..logger import getLogger
from .types import SalesforceLogin, SalesforceToken, TokenRefreshCallback

LOGGER = getLogger("auth")


class SalesforceAuth(httpx.Auth):
    """
    Attaches the bearer token to outgoing requests.

    The token is fetched with ``login`` before the first request and is then
    reused until Salesforce answers 401. On a 401 the token is refreshed once
    and the request resent; a second 401 is handed back to the client as is.
    Logins are serialized so that concurrent 401s for the same stale token
    result in a single refresh.
    """

    requires_response_body = True

    login: SalesforceLogin | None
    callback: TokenRefreshCallback | None
    token: SalesforceToken | None

    def __init__(
        self,
        login: SalesforceLogin | None = None,
        session_token: SalesforceToken | None = None,
        callback: TokenRefreshCallback | None = None,
    ):
        self.login = login
        self.token = session_token
        self.callback = callback
        self._lock = threading.Lock()

    def _login_flow(
        self,
    ) -> typing.Generator[httpx.Request, httpx.Response, SalesforceToken]:
        assert self.login is not None, "No login method provided"
        login_flow = self.login()
        try:
            login_request = next(login_flow)
            while True:
                login_response = None
                if isinstance(login_request, httpx.Request):
                    login_response = yield login_request
                login_request = login_flow.send(login_response)
        except StopIteration as login_result:
            new_token: SalesforceToken = login_result.value
        assert new_token is not None, "Login flow did not return a token"
        return new_token

    def _refresh(
        self, stale_token: SalesforceToken | None
    ) -> typing.Generator[httpx.Request, httpx.Response, SalesforceToken]:
        with self._lock:
            # another request replaced the stale token while we waited
            if self.token is not None and self.token != stale_token:
                LOGGER.debug("Reusing token refreshed by a concurrent request")
                return self.token
            new_token = yield from self._login_flow()
            self.token = new_token
            if self.callback is not None:
                self.callback(new_token)
            return new_token

    def auth_flow(
        self, request: httpx.Request
    ) -> typing.Generator[httpx.Request, httpx.Response, None]:
        token = self.token
        if token is None:
            token = yield from self._refresh(None)

        request.headers["Authorization"] = f"Bearer {token.token}"
        response = yield request

        if response.status_code == 401 and self.login is not None:
            LOGGER.info(
                "Session rejected for %s %s, refreshing access token",
                request.method,
                request.url.path,
            )
            token = yield from self._refresh(token)
            request.headers["Authorization"] = f"Bearer {token.token}"
            yield request
