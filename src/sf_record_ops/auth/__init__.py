from .httpx import SalesforceAuth
from .types import SalesforceLogin, SalesforceToken, TokenRefreshCallback
from .login_oauth import (
    client_credentials_flow_login,
    lazy_oauth_login,
    password_login,
)


__all__ = [
    "SalesforceAuth",
    "SalesforceLogin",
    "SalesforceToken",
    "TokenRefreshCallback",
    "client_credentials_flow_login",
    "lazy_oauth_login",
    "password_login",
]
