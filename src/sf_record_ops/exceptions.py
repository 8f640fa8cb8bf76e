"""Exceptions raised by sf_record_ops

Response mapping based on the status codes documented at
https://developer.salesforce.com/docs/atlas.en-us.api_rest.meta/api_rest/errorcodes.htm
"""

import httpx


class SalesforceError(Exception):
    """Base Salesforce API exception"""


class ConfigurationError(SalesforceError):
    """A configuration or component property is missing or invalid"""

    def __init__(self, component: type | str | None, message: str):
        self.component = (
            component.__name__ if isinstance(component, type) else component
        )
        self.message = message
        super().__init__(str(self))

    def __str__(self):
        if self.component:
            return f"{self.component}: {self.message}"
        return self.message


class RequestConstructionError(SalesforceError):
    """A request could not be built from the provided inputs"""


class AuthenticationError(SalesforceError):
    """The org rejected the provided credentials or session"""


class SalesforceAuthenticationFailed(AuthenticationError):
    """
    Thrown to indicate that authentication with Salesforce failed.
    """

    def __init__(self, code: str | None, message: str | None):
        """
        Arguments:
        * code: error code from the token endpoint
        * message: error description from the token endpoint
        """
        self.code = code
        self.message = message
        super().__init__(str(self))

    def __str__(self):
        return f"{self.code}: {self.message}"


class ExecutionError(SalesforceError):
    """A data request returned an unsuccessful (non 2xx) response"""

    message = "Error Code {status}. Response content: {content}"

    def __init__(self, response: httpx.Response, resource_name: str):
        """
        Arguments:
        * response: the unsuccessful response
        * resource_name: name of the sObject (or other resource) requested
        """
        self.response = response
        self.status_code = response.status_code
        self.url_path = response.url.path
        self.method = response.request.method
        self.resource_name = resource_name
        self.content = response.text
        super().__init__(str(self))

    def __str__(self):
        return self.message.format(
            status=self.status_code,
            url=self.url_path,
            name=self.resource_name,
            content=self.content,
        )

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"


class SalesforceMoreThanOneRecord(ExecutionError):
    """
    Error Code: 300
    The value returned when an external ID exists in more than one record.
    """

    message = "More than one record for {url}. Response content: {content}"


class SalesforceMalformedRequest(ExecutionError):
    """
    Error Code: 400
    The request couldn't be understood, usually because the JSON or XML body
    contains an error.
    """

    message = "Malformed request {url}. Response content: {content}"


class SalesforceExpiredSession(ExecutionError, AuthenticationError):
    """
    Error Code: 401
    The session ID or OAuth token used has expired or is invalid, and a
    fresh token was rejected as well.
    """

    message = "Expired session for {url}. Response content: {content}"


class SalesforceRefusedRequest(ExecutionError):
    """
    Error Code: 403
    The request has been refused. Verify that the logged-in user has
    appropriate permissions.
    """

    message = "Request refused for {url}. Response content: {content}"


class SalesforceResourceNotFound(ExecutionError):
    """
    Error Code: 404
    The requested resource couldn't be found. Check the URI for errors, and
    verify that there are no sharing issues.
    """

    message = "Resource {name} Not Found (Error Code {status}) at {url}. Response content: {content}"


class SalesforceMethodNotAllowedForResource(ExecutionError):
    """
    Error Code: 405
    The method specified in the Request-Line isn't allowed for the resource
    specified in the URI.
    """

    message = "HTTP Method not allowed for {url}. Response content: {content}"


class SalesforceApiVersionIncompatible(ExecutionError):
    """
    Error Code: 409
    The request couldn't be completed due to a conflict with the current
    state of the resource.
    """

    message = "Conflict for {name} at {url}. Response content: {content}"


class SalesforceResourceRemoved(ExecutionError):
    """
    Error Code: 410
    The requested resource has been retired or removed.
    """

    message = "Resource {name} has been removed. Response content: {content}"


class SalesforceUnsupportedFormat(ExecutionError):
    """
    Error Code: 415
    The entity in the request is in a format that's not supported by the
    specified method.
    """

    message = "Unsupported format for {url}. Response content: {content}"


class SalesforceServerError(ExecutionError):
    """
    Error Code: 500
    An error has occurred within Lightning Platform, so the request couldn't
    be completed.
    """

    message = "Salesforce internal server error (Error Code {status}) at {url}. Response content: {content}"


class SalesforceServerUnavailable(ExecutionError):
    """
    Error Code: 503
    The server is unavailable to handle the request. Typically this issue
    occurs if the server is down for maintenance or is overloaded.
    """

    message = "Salesforce unavailable (Error Code {status}) at {url}. Response content: {content}"


class SalesforceGeneralError(ExecutionError):
    """
    A non-specific Salesforce error.
    """

    def __str__(self):
        url = self.url_path
        if len(url) > 255:
            url = url[:252] + "..."
        return (
            f"Error Code {self.status_code} for {self.method.upper()} {url} "
            f"({self.resource_name}). Response content: {self.content}"
        )


STATUS_EXCEPTIONS: dict[int, type[ExecutionError]] = {
    300: SalesforceMoreThanOneRecord,
    400: SalesforceMalformedRequest,
    401: SalesforceExpiredSession,
    403: SalesforceRefusedRequest,
    404: SalesforceResourceNotFound,
    405: SalesforceMethodNotAllowedForResource,
    409: SalesforceApiVersionIncompatible,
    410: SalesforceResourceRemoved,
    415: SalesforceUnsupportedFormat,
    500: SalesforceServerError,
    503: SalesforceServerUnavailable,
}


def raise_for_status(response: httpx.Response, resource_name: str = ""):
    """Raise the ExecutionError matching an unsuccessful response"""
    if response.is_success:
        return
    exc_type = STATUS_EXCEPTIONS.get(response.status_code, SalesforceGeneralError)
    raise exc_type(response, resource_name)
