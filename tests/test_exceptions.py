import pytest
from unittest.mock import Mock
import httpx

from sf_record_ops.exceptions import (
    raise_for_status,
    AuthenticationError,
    ConfigurationError,
    ExecutionError,
    SalesforceMoreThanOneRecord,
    SalesforceMalformedRequest,
    SalesforceExpiredSession,
    SalesforceRefusedRequest,
    SalesforceResourceNotFound,
    SalesforceMethodNotAllowedForResource,
    SalesforceApiVersionIncompatible,
    SalesforceResourceRemoved,
    SalesforceUnsupportedFormat,
    SalesforceServerError,
    SalesforceServerUnavailable,
    SalesforceGeneralError,
)


def create_mock_response(
    status_code: int, url_path="/test/path", text="Error message", method="GET"
):
    """Helper function to create mock httpx.Response objects"""
    mock_request = Mock()
    mock_request.method = method

    mock_response = Mock(spec=httpx.Response)
    mock_response.status_code = status_code
    mock_response.text = text
    mock_response.request = mock_request
    mock_response.is_success = 200 <= status_code < 300

    mock_url = Mock()
    mock_url.path = url_path
    mock_response.url = mock_url
    mock_response.headers = {}

    return mock_response


@pytest.mark.parametrize(
    "status_code,expected_exception",
    [
        (300, SalesforceMoreThanOneRecord),
        (400, SalesforceMalformedRequest),
        (401, SalesforceExpiredSession),
        (403, SalesforceRefusedRequest),
        (404, SalesforceResourceNotFound),
        (405, SalesforceMethodNotAllowedForResource),
        (409, SalesforceApiVersionIncompatible),
        (410, SalesforceResourceRemoved),
        (415, SalesforceUnsupportedFormat),
        (500, SalesforceServerError),
        (503, SalesforceServerUnavailable),
        # unmapped codes
        (418, SalesforceGeneralError),
        (429, SalesforceGeneralError),
    ],
)
def test_raise_for_status(status_code, expected_exception):
    """Test that the correct exception is raised for each status code"""
    response = create_mock_response(status_code)

    with pytest.raises(expected_exception) as excinfo:
        raise_for_status(response, "TestResource")

    exception = excinfo.value
    assert isinstance(exception, ExecutionError)
    assert exception.status_code == status_code
    assert exception.resource_name == "TestResource"
    assert exception.url_path == "/test/path"
    assert exception.content == "Error message"
    assert exception.method == "GET"


def test_raise_for_status_success():
    assert raise_for_status(create_mock_response(204), "Account") is None


def test_expired_session_is_authentication_error():
    with pytest.raises(AuthenticationError) as excinfo:
        raise_for_status(create_mock_response(401), "Account")

    assert isinstance(excinfo.value, ExecutionError)


def test_exception_string_representation():
    """Test string representation of exceptions"""
    response = create_mock_response(404)

    with pytest.raises(SalesforceResourceNotFound) as excinfo:
        raise_for_status(response, "Account")

    exception = excinfo.value
    assert "Resource Account Not Found" in str(exception)
    assert "404" in str(exception)
    assert "/test/path" in str(exception)


def test_general_error_truncates_long_urls():
    long_path = "/services/data/v48.0/" + "a" * 300
    response = create_mock_response(418, url_path=long_path)

    with pytest.raises(SalesforceGeneralError) as excinfo:
        raise_for_status(response, "LongPathResource")

    exception_str = str(excinfo.value)
    assert "..." in exception_str
    assert long_path not in exception_str
    assert "/services/data/v48.0/" in exception_str


def test_exception_repr():
    response = create_mock_response(404)

    with pytest.raises(SalesforceResourceNotFound) as excinfo:
        raise_for_status(response, "Account")

    exception = excinfo.value
    assert exception.__class__.__name__ in repr(exception)
    assert str(exception) in repr(exception)


@pytest.mark.parametrize("method", ["GET", "POST", "PATCH", "DELETE"])
def test_general_error_includes_method(method):
    with pytest.raises(SalesforceGeneralError) as excinfo:
        raise_for_status(create_mock_response(418, method=method), "Case")

    assert excinfo.value.method == method
    assert method in str(excinfo.value)


def test_configuration_error_names_component():
    class RecordGet:
        pass

    error = ConfigurationError(RecordGet, "Salesforce object name must be provided.")
    assert error.component == "RecordGet"
    assert str(error) == "RecordGet: Salesforce object name must be provided."
    assert str(ConfigurationError(None, "missing")) == "missing"
