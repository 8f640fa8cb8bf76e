from .config import SalesforceConfiguration
from .client import SalesforceClient
from .auth import SalesforceToken, SalesforceAuth
from .registry import ClientRegistry, default_registry
from .requests import (
    RecordGet,
    RecordGetWithFields,
    RecordCreate,
    RecordUpdate,
    RecordDelete,
)
from .executor import execute
from .components import (
    Message,
    RecordGetComponent,
    RecordCreateComponent,
    RecordUpdateComponent,
    RecordDeleteComponent,
)

__all__ = [
    "SalesforceConfiguration",
    "SalesforceClient",
    "SalesforceAuth",
    "SalesforceToken",
    "ClientRegistry",
    "default_registry",
    "RecordGet",
    "RecordGetWithFields",
    "RecordCreate",
    "RecordUpdate",
    "RecordDelete",
    "execute",
    "Message",
    "RecordGetComponent",
    "RecordCreateComponent",
    "RecordUpdateComponent",
    "RecordDeleteComponent",
]
