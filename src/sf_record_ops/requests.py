"""
Record requests against the sObject Rows resource
https://developer.salesforce.com/docs/atlas.en-us.api_rest.meta/api_rest/resources_sobject_retrieve.htm
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
import json
from typing import Any, ClassVar

from httpx import Request

from .client import SalesforceClient
from .exceptions import RequestConstructionError

JSONBody = str | bytes | Mapping[str, Any]


def _require_record_id(record_id: str | None) -> str:
    if record_id is None or not str(record_id).strip():
        raise RequestConstructionError("Record ID must not be empty")
    return str(record_id).strip()


def _encode_body(body: JSONBody) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


class RecordRequest(ABC):
    """A request for a single record (or, for create, an sObject) of one type"""

    method: ClassVar[str]
    object_name: str

    def __init__(self, object_name: str):
        self.object_name = object_name

    @abstractmethod
    def path(self) -> str:
        """URL path relative to the sObjects resource"""

    def params(self) -> str | None:
        return None

    def content(self) -> bytes | None:
        return None

    @property
    def returns_content(self) -> bool:
        return True

    def url(self, sobjects_url: str) -> str:
        url = f"{sobjects_url}/{self.path()}"
        if params := self.params():
            url += "?" + params
        return url

    def build(self, client: SalesforceClient) -> Request:
        headers = {}
        content = self.content()
        if content is not None:
            headers["Content-Type"] = "application/json"
        return client.build_request(
            self.method,
            self.url(client.sobjects_url),
            content=content,
            headers=headers,
        )

    def __repr__(self):
        return f"{type(self).__name__}({self.method} {self.path()})"


class RecordGet(RecordRequest):
    method = "GET"

    def __init__(self, object_name: str, record_id: str):
        super().__init__(object_name)
        self.record_id = _require_record_id(record_id)

    def path(self):
        return f"{self.object_name}/{self.record_id}"


class RecordGetWithFields(RecordGet):
    def __init__(self, object_name: str, record_id: str, fields: Iterable[str]):
        super().__init__(object_name, record_id)
        self.fields = [field.strip() for field in fields if field and field.strip()]
        if not self.fields:
            raise RequestConstructionError("At least one field must be requested")

    def params(self):
        # commas are sent as is, Salesforce expects a plain comma separated list
        return "fields=" + ",".join(self.fields)


class RecordCreate(RecordRequest):
    method = "POST"

    def __init__(self, object_name: str, body: JSONBody):
        super().__init__(object_name)
        self.body = body

    def path(self):
        return self.object_name

    def content(self):
        return _encode_body(self.body)


class RecordUpdate(RecordRequest):
    method = "PATCH"

    def __init__(self, object_name: str, record_id: str, body: JSONBody):
        super().__init__(object_name)
        self.record_id = _require_record_id(record_id)
        self.body = body

    def path(self):
        return f"{self.object_name}/{self.record_id}"

    def content(self):
        return _encode_body(self.body)

    @property
    def returns_content(self):
        return False


class RecordDelete(RecordRequest):
    method = "DELETE"

    def __init__(self, object_name: str, record_id: str):
        super().__init__(object_name)
        self.record_id = _require_record_id(record_id)

    def path(self):
        return f"{self.object_name}/{self.record_id}"

    @property
    def returns_content(self):
        return False


def record_request(
    object_name: str, record_id: str, fields: Iterable[str] | None = None
) -> RecordGet:
    """Build a get request, restricted to ``fields`` when any are given"""
    if fields and any(field and field.strip() for field in fields):
        return RecordGetWithFields(object_name, record_id, fields)
    return RecordGet(object_name, record_id)
