import os
from typing import NamedTuple

from .auth.login_oauth import lazy_oauth_login
from .auth.types import SalesforceLogin
from .exceptions import ConfigurationError

DEFAULT_API_VERSION = 48.0
DEFAULT_LOGIN_DOMAIN = "login"


class SalesforceConfiguration(NamedTuple):
    """
    Connection parameters identifying one Salesforce org.

    Instances are immutable and hashable; two configurations with equal
    values share the same client handle.
    """

    instance_name: str
    client_id: str
    client_secret: str
    username: str = ""
    password: str = ""
    security_token: str = ""
    login_domain: str = DEFAULT_LOGIN_DOMAIN
    api_version: float = DEFAULT_API_VERSION

    def __repr__(self):
        # credentials are left out on purpose
        return (
            f"{type(self).__name__}(instance_name={self.instance_name!r}, "
            f"client_id={self.client_id!r}, username={self.username!r})"
        )

    @property
    def base_url(self) -> str:
        return f"https://{self.instance_name}.salesforce.com"

    @property
    def data_url(self) -> str:
        return f"/services/data/v{float(self.api_version):.01f}"

    @property
    def sobjects_url(self) -> str:
        return f"{self.data_url}/sobjects"

    def validate(self, component: type | str | None = None) -> "SalesforceConfiguration":
        missing = [
            name
            for name in ("instance_name", "client_id", "client_secret")
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ConfigurationError(
                component,
                "Salesforce configuration is missing " + ", ".join(missing),
            )
        if self.password and not self.username:
            raise ConfigurationError(
                component, "Salesforce configuration has a password but no username"
            )
        if "/" in self.instance_name or self.instance_name.endswith(".salesforce.com"):
            raise ConfigurationError(
                component,
                f"Salesforce instance name '{self.instance_name}' must not be a URL",
            )
        if (
            isinstance(self.api_version, bool)
            or not isinstance(self.api_version, (int, float))
            or self.api_version <= 0
        ):
            raise ConfigurationError(
                component, f"Invalid Salesforce API version {self.api_version!r}"
            )
        return self

    def login(self) -> SalesforceLogin:
        return lazy_oauth_login(
            consumer_key=self.client_id,
            consumer_secret=self.client_secret,
            username=self.username,
            password=self.password,
            security_token=self.security_token,
            domain=self.login_domain,
        )

    @classmethod
    def from_env(
        cls, prefix: str = "SALESFORCE_", environ: dict[str, str] | None = None
    ) -> "SalesforceConfiguration":
        env = os.environ if environ is None else environ
        values = {
            field: env[prefix + field.upper()]
            for field in cls._fields
            if prefix + field.upper() in env
        }
        if "api_version" in values:
            try:
                values["api_version"] = float(values["api_version"])
            except ValueError as e:
                raise ConfigurationError(
                    None, f"Invalid Salesforce API version '{values['api_version']}'"
                ) from e
        for required in ("instance_name", "client_id", "client_secret"):
            values.setdefault(required, "")
        return cls(**values)
