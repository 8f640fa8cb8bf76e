from typing_extensions import override

from httpx import URL, Client, Request, Response

from .auth import SalesforceAuth, SalesforceToken, TokenRefreshCallback
from .config import SalesforceConfiguration
from .exceptions import raise_for_status
from .logger import getLogger
from .metrics import ApiUsage, parse_api_usage

LOGGER = getLogger("client")


class SalesforceClient(Client):
    """
    HTTP client bound to a single Salesforce configuration.

    Requests are authenticated by a ``SalesforceAuth`` built from the
    configuration's credentials. Unsuccessful responses are raised as
    ``ExecutionError`` subclasses.
    """

    configuration: SalesforceConfiguration
    token_refresh_callback: TokenRefreshCallback | None = None
    api_usage: ApiUsage | None = None
    _auth: SalesforceAuth

    def __init__(
        self,
        configuration: SalesforceConfiguration,
        token: SalesforceToken | None = None,
        token_refresh_callback: TokenRefreshCallback | None = None,
        headers={"Accept": "application/json"},
        **kwargs,
    ):
        self.configuration = configuration
        auth = SalesforceAuth(configuration.login(), token, self.handle_token_refresh)
        super().__init__(
            auth=auth, base_url=configuration.base_url, headers=headers, **kwargs
        )
        self.token_refresh_callback = token_refresh_callback

    def __str__(self):
        return f"{type(self).__name__} ({self.configuration.instance_name})"

    @property
    def token(self) -> SalesforceToken | None:
        return self._auth.token

    def handle_token_refresh(self, token: SalesforceToken):
        LOGGER.info("Access token refreshed for %s", self.base_url.host)
        if self.token_refresh_callback:
            self.token_refresh_callback(token)

    @property
    def data_url(self) -> str:
        return self.configuration.data_url

    @property
    def sobjects_url(self) -> str:
        return self.configuration.sobjects_url

    @override
    def send(self, request: Request, **kwargs) -> Response:
        LOGGER.debug("%s %s", request.method, request.url.path)
        return super().send(request, **kwargs)

    def send_checked(self, request: Request, resource_name: str = "") -> Response:
        """Send a prebuilt request and raise for unsuccessful responses"""
        response = self.send(request)
        return self._check_response(response, resource_name)

    @override
    def request(
        self,
        method: str,
        url: URL | str,
        resource_name: str = "",
        response_status_raise: bool = True,
        **kwargs,
    ) -> Response:
        response = super().request(method, url, **kwargs)
        if not response_status_raise:
            return response
        return self._check_response(response, resource_name)

    def _check_response(self, response: Response, resource_name: str) -> Response:
        raise_for_status(response, resource_name)

        sforce_limit_info = response.headers.get("Sforce-Limit-Info")
        if sforce_limit_info and isinstance(sforce_limit_info, str):
            self.api_usage = parse_api_usage(sforce_limit_info)
        return response
