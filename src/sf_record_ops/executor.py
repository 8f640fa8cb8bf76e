from typing import Any

from .config import SalesforceConfiguration
from .logger import getLogger
from .registry import ClientRegistry, default_registry
from .requests import RecordRequest

LOGGER = getLogger("executor")


def execute(
    request: RecordRequest,
    configuration: SalesforceConfiguration,
    owner: Any,
    registry: ClientRegistry | None = None,
) -> str | None:
    """
    Send ``request`` using the shared client for ``configuration``.

    The client's auth refreshes the token once if Salesforce rejects it; a
    second rejection is raised as ``SalesforceExpiredSession``. Any other
    unsuccessful response is raised as an ``ExecutionError``.

    Returns the response body for requests that produce one, otherwise
    ``None``.
    """
    client = (registry or default_registry).acquire(configuration, owner)
    http_request = request.build(client)
    LOGGER.debug("Executing %r against %s", request, configuration.instance_name)
    response = client.send_checked(http_request, request.object_name)
    if not request.returns_content:
        return None
    return response.text
