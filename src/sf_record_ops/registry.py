import threading
from collections.abc import Callable, Hashable

from .client import SalesforceClient
from .config import SalesforceConfiguration
from .logger import getLogger

LOGGER = getLogger("registry")

ClientFactory = Callable[[SalesforceConfiguration], SalesforceClient]


class ClientHandle:
    """One shared client (and its cached token) plus the owners using it"""

    __slots__ = ("client", "owners")

    def __init__(self, client: SalesforceClient):
        self.client = client
        self.owners: set[Hashable] = set()

    def __repr__(self):
        return f"{type(self).__name__}({self.client}, owners={len(self.owners)})"


class ClientRegistry:
    """
    Shares one ``SalesforceClient`` per distinct configuration.

    Each component acquires the client for its configuration on its own
    behalf and releases it when disposed; the client is closed once the last
    owner has released it. Owners are held by reference until released.
    """

    def __init__(self, client_factory: ClientFactory = SalesforceClient):
        self._client_factory = client_factory
        self._handles: dict[SalesforceConfiguration, ClientHandle] = {}
        self._lock = threading.Lock()

    def acquire(
        self, configuration: SalesforceConfiguration, owner: Hashable
    ) -> SalesforceClient:
        configuration.validate()
        with self._lock:
            handle = self._handles.get(configuration)
            if handle is None:
                LOGGER.info(
                    "Creating Salesforce client for %s", configuration.base_url
                )
                handle = ClientHandle(self._client_factory(configuration))
                self._handles[configuration] = handle
            handle.owners.add(owner)
            return handle.client

    def release(self, configuration: SalesforceConfiguration, owner: Hashable) -> None:
        with self._lock:
            handle = self._handles.get(configuration)
            if handle is None:
                return
            handle.owners.discard(owner)
            if handle.owners:
                return
            del self._handles[configuration]
        LOGGER.info("Closing Salesforce client for %s", configuration.base_url)
        handle.client.close()

    def owners(self, configuration: SalesforceConfiguration) -> int:
        with self._lock:
            handle = self._handles.get(configuration)
            return len(handle.owners) if handle else 0

    def live_handles(self) -> dict[SalesforceConfiguration, ClientHandle]:
        with self._lock:
            return dict(self._handles)

    def close_all(self) -> None:
        with self._lock:
            handles = list(self._handles.values())
            self._handles.clear()
        for handle in handles:
            handle.client.close()

    def __len__(self):
        with self._lock:
            return len(self._handles)


default_registry = ClientRegistry()
