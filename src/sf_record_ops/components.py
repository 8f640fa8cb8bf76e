"""
Pipeline components performing record operations.

A component is configured once, initialized, applied to any number of
messages and finally disposed. Disposal releases the shared client for the
component's configuration. Components are also context managers:

    with RecordGetComponent(config, "Account", lambda m: m.payload["Id"]) as get:
        result = get.apply(Message({"Id": "001D000000INjVe"}))
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
import json
from types import TracebackType
from typing import Any, ClassVar, TypeVar

from .config import SalesforceConfiguration
from .exceptions import ConfigurationError, RequestConstructionError
from .executor import execute
from .logger import getLogger
from .objects import is_known_object
from .registry import ClientRegistry, default_registry
from .requests import (
    JSONBody,
    RecordCreate,
    RecordDelete,
    RecordRequest,
    RecordUpdate,
    record_request,
)

LOGGER = getLogger("components")

_T = TypeVar("_T")


class Message:
    """Payload and attributes exchanged between pipeline components"""

    def __init__(self, payload: Any = None, attributes: dict[str, Any] | None = None):
        self.payload = payload
        self.attributes = dict(attributes or {})

    def json(self):
        return json.loads(self.payload)

    def __repr__(self):
        return f"Message(payload={self.payload!r}, attributes={self.attributes!r})"


DynamicValue = _T | Callable[[Message], _T | None] | None


class RecordGetException(RequestConstructionError):
    pass


class RecordCreateException(RequestConstructionError):
    pass


class RecordUpdateException(RequestConstructionError):
    pass


class RecordDeleteException(RequestConstructionError):
    pass


class RecordComponent(ABC):
    error_type: ClassVar[type[RequestConstructionError]] = RequestConstructionError

    configuration: SalesforceConfiguration | None
    object_name: str | None
    object_id: DynamicValue[str]

    def __init__(
        self,
        configuration: SalesforceConfiguration | None,
        object_name: str | None,
        object_id: DynamicValue[str] = None,
        registry: ClientRegistry | None = None,
    ):
        self.configuration = configuration
        self.object_name = object_name
        self.object_id = object_id
        self.registry = registry or default_registry
        self._initialized = False

    def initialize(self):
        cls = type(self)
        if self.configuration is None:
            raise ConfigurationError(cls, "Salesforce configuration must be provided.")
        self.configuration.validate(cls)
        if not (self.object_name or "").strip():
            raise ConfigurationError(cls, "Salesforce object name must be provided.")
        self.object_name = self.object_name.strip()
        if not is_known_object(self.object_name):
            LOGGER.debug(
                "%s: '%s' is not a known standard or custom object name",
                cls.__name__,
                self.object_name,
            )
        self._initialized = True
        return self

    def apply(self, message: Message) -> Message:
        if not self._initialized:
            self.initialize()
        request = self.build_request(message)
        result = execute(request, self.configuration, self, self.registry)
        return Message(
            self.output(result),
            {"component": type(self).__name__, "objectName": self.object_name},
        )

    @abstractmethod
    def build_request(self, message: Message) -> RecordRequest:
        """Build the record request for one message"""

    def output(self, result: str | None) -> Any:
        return result

    def dispose(self):
        if self.configuration is not None:
            self.registry.release(self.configuration, self)
        self._initialized = False

    def evaluate(self, value: DynamicValue[Any], message: Message) -> Any:
        if callable(value):
            return value(message)
        return value

    def evaluate_object_id(self, message: Message) -> str:
        object_id = self.evaluate(self.object_id, message)
        if object_id is None or not str(object_id).strip():
            raise self.error_type(
                f"The object ID could not be evaluated or was empty ({self.object_id!r})."
            )
        return str(object_id)

    def __enter__(self):
        return self.initialize()

    def __exit__(
        self,
        exc_type: type[BaseException] | None = None,
        exc_value: BaseException | None = None,
        traceback: TracebackType | None = None,
    ) -> None:
        self.dispose()


class RecordGetComponent(RecordComponent):
    """
    Returns a record of a Salesforce object given the object name and
    record ID. If no fields are given all the fields of the record are
    returned. The output payload is the record JSON.
    """

    error_type = RecordGetException

    def __init__(
        self,
        configuration: SalesforceConfiguration | None,
        object_name: str | None,
        object_id: DynamicValue[str] = None,
        fields: list[str] | None = None,
        registry: ClientRegistry | None = None,
    ):
        super().__init__(configuration, object_name, object_id, registry)
        self.fields = list(fields or [])

    def build_request(self, message):
        return record_request(
            self.object_name, self.evaluate_object_id(message), self.fields
        )


class _RecordBodyMixin:
    body: DynamicValue[JSONBody]

    def evaluate_body(self, message: Message) -> JSONBody:
        body = self.evaluate(self.body, message) if self.body is not None else message.payload
        if body is None or not isinstance(body, (str, bytes, Mapping)):
            raise self.error_type(
                f"The record body must be JSON text or a mapping, got {type(body).__name__}."
            )
        return body


class RecordCreateComponent(_RecordBodyMixin, RecordComponent):
    """Creates a record; the output payload is the JSON create result."""

    error_type = RecordCreateException

    def __init__(
        self,
        configuration: SalesforceConfiguration | None,
        object_name: str | None,
        body: DynamicValue[JSONBody] = None,
        registry: ClientRegistry | None = None,
    ):
        super().__init__(configuration, object_name, None, registry)
        self.body = body

    def build_request(self, message):
        return RecordCreate(self.object_name, self.evaluate_body(message))


class RecordUpdateComponent(_RecordBodyMixin, RecordComponent):
    """Updates the fields present in the body; the output payload is True."""

    error_type = RecordUpdateException

    def __init__(
        self,
        configuration: SalesforceConfiguration | None,
        object_name: str | None,
        object_id: DynamicValue[str] = None,
        body: DynamicValue[JSONBody] = None,
        registry: ClientRegistry | None = None,
    ):
        super().__init__(configuration, object_name, object_id, registry)
        self.body = body

    def build_request(self, message):
        return RecordUpdate(
            self.object_name,
            self.evaluate_object_id(message),
            self.evaluate_body(message),
        )

    def output(self, result):
        return True


class RecordDeleteComponent(RecordComponent):
    """Deletes a record; the output payload is True."""

    error_type = RecordDeleteException

    def build_request(self, message):
        return RecordDelete(self.object_name, self.evaluate_object_id(message))

    def output(self, result):
        return True
