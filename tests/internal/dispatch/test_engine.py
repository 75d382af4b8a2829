"""Tests for the dispatch engine."""

from unittest.mock import MagicMock

import httpx
import pytest
import respx
from pydantic import ValidationError

from sinch_sdk._internal.dispatch import dispatch, validate_all
from sinch_sdk._internal.models import ResponseModel
from sinch_sdk.exceptions import (
    ErrorCode,
    SinchConfigError,
    SinchValidationError,
    UnexpectedStatusCodeError,
)

BASE_URL = "http://test/scope"


def make_client(http_client: httpx.Client | None = None) -> MagicMock:
    client = MagicMock()
    client.validate.return_value = None
    client.url.return_value = BASE_URL
    client.authenticate.side_effect = lambda request: request
    client.http_client = http_client if http_client is not None else httpx.Client()
    return client


def make_request(
    *,
    method: str = "GET",
    path: str = "/things",
    query_string: str = "",
    body: bytes = b"",
    expected_status: int = 200,
) -> MagicMock:
    request = MagicMock()
    request.validate.return_value = None
    request.method.return_value = method
    request.path.return_value = path
    request.query_string.return_value = query_string
    request.body.return_value = body
    request.expected_status_code.return_value = expected_status
    return request


class Thing(ResponseModel):
    id: str = ""
    count: int = 0


class TestValidation:
    """Tests for the validation step."""

    def test_aggregates_client_and_request_errors(self):
        """Should report client and request failures together, client first."""
        client = make_client()
        client.validate.side_effect = SinchConfigError([ErrorCode.AUTH_TOKEN_REQUIRED])
        request = make_request()
        request.validate.side_effect = SinchValidationError(
            [ErrorCode.INVALID_TO_NUMBER, ErrorCode.INVALID_FROM_NUMBER]
        )

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200))
            with pytest.raises(SinchValidationError) as exc_info:
                dispatch(client, request, Thing())

        assert exc_info.value.errors == (
            ErrorCode.AUTH_TOKEN_REQUIRED,
            ErrorCode.INVALID_TO_NUMBER,
            ErrorCode.INVALID_FROM_NUMBER,
        )
        assert not route.called

    def test_client_error_alone_stops_dispatch(self):
        """Should raise the client's own config error without sending."""
        error = SinchConfigError([ErrorCode.PLAN_ID_REQUIRED])
        client = make_client()
        client.validate.side_effect = error
        request = make_request()

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200))
            with pytest.raises(SinchConfigError) as exc_info:
                dispatch(client, request, Thing())

        assert exc_info.value is error
        assert not route.called
        request.query_string.assert_not_called()
        request.body.assert_not_called()

    def test_request_error_alone_stops_dispatch(self):
        """Should raise the request's own error without sending."""
        error = SinchValidationError([ErrorCode.INVALID_BODY])
        request = make_request()
        request.validate.side_effect = error

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200))
            with pytest.raises(SinchValidationError) as exc_info:
                dispatch(make_client(), request, Thing())

        assert exc_info.value is error
        assert not isinstance(exc_info.value, SinchConfigError)
        assert not route.called

    def test_missing_transport_after_validation(self):
        """Should raise a config error when the transport is gone by send time."""
        client = make_client()
        client.http_client = None

        with pytest.raises(SinchConfigError) as exc_info:
            dispatch(client, make_request(), Thing())

        assert exc_info.value.errors == (ErrorCode.HTTP_CLIENT_REQUIRED,)
        client.authenticate.assert_not_called()

    def test_validate_all_passes_when_everything_is_valid(self):
        """Should return None when no object reports a problem."""
        assert validate_all(make_client(), make_request()) is None


class TestSerializationErrors:
    """Tests for query string and body errors."""

    def test_query_string_error_propagates_verbatim(self):
        """Should raise the exact query string error."""
        error = ValueError("cannot encode query")
        request = make_request()
        request.query_string.side_effect = error

        with pytest.raises(ValueError) as exc_info:
            dispatch(make_client(), request, Thing())

        assert exc_info.value is error
        request.body.assert_not_called()

    def test_body_error_propagates_verbatim(self):
        """Should raise the exact body serialization error."""
        error = TypeError("not serializable")
        request = make_request()
        request.body.side_effect = error

        with pytest.raises(TypeError) as exc_info:
            dispatch(make_client(), request, Thing())

        assert exc_info.value is error


class TestRequestBuilding:
    """Tests for URL, authentication and headers."""

    @respx.mock
    def test_composes_url_from_client_path_and_query(self):
        """Should request client.url() + path + query string."""
        route = respx.get(f"{BASE_URL}/things", params={"page": "2"}).mock(
            return_value=httpx.Response(200, json={"id": "x"})
        )

        dispatch(make_client(), make_request(query_string="?page=2"), Thing())

        assert route.called
        assert str(route.calls.last.request.url) == f"{BASE_URL}/things?page=2"

    @respx.mock
    def test_uses_request_method(self):
        """Should send with the request's method."""
        route = respx.patch(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(200, json={})
        )

        dispatch(make_client(), make_request(method="PATCH", body=b"{}"), Thing())

        assert route.called

    @respx.mock
    def test_sets_content_type_when_body_present(self):
        """Should send JSON content type with a non-empty body."""
        route = respx.post(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(201, json={"id": "abc"})
        )

        dispatch(
            make_client(),
            make_request(method="POST", body=b'{"name":"x"}', expected_status=201),
            Thing(),
        )

        sent = route.calls.last.request
        assert sent.headers["content-type"] == "application/json"
        assert sent.content == b'{"name":"x"}'

    @respx.mock
    def test_no_content_type_without_body(self):
        """Should not set a content type when there is no body."""
        route = respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, json={}))

        dispatch(make_client(), make_request(), Thing())

        assert "content-type" not in route.calls.last.request.headers

    @respx.mock
    def test_applies_client_authentication(self):
        """Should send whatever headers the client's authenticate hook adds."""
        route = respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, json={}))

        def authenticate(request: httpx.Request) -> httpx.Request:
            request.headers["Authorization"] = "Bearer secret-token"
            return request

        client = make_client()
        client.authenticate.side_effect = authenticate

        dispatch(client, make_request(), Thing())

        assert route.calls.last.request.headers["authorization"] == "Bearer secret-token"

    def test_authentication_error_stops_dispatch(self):
        """Should raise the hook's error without sending."""
        error = RuntimeError("no credentials")
        client = make_client()
        client.authenticate.side_effect = error

        with respx.mock(assert_all_called=False) as router:
            route = router.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200))
            with pytest.raises(RuntimeError) as exc_info:
                dispatch(client, make_request(), Thing())

        assert exc_info.value is error
        assert not route.called


class TestTransportErrors:
    """Tests for errors raised by the transport."""

    @respx.mock
    def test_connection_error_propagates(self):
        """Should raise the transport's connection error unmodified."""
        respx.get(f"{BASE_URL}/things").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            dispatch(make_client(), make_request(), Thing())

    @respx.mock
    def test_timeout_propagates(self):
        """Should surface timeouts as httpx.TimeoutException."""
        respx.get(f"{BASE_URL}/things").mock(side_effect=httpx.ReadTimeout("timeout"))

        with pytest.raises(httpx.TimeoutException):
            dispatch(make_client(), make_request(), Thing())

    @respx.mock
    def test_redirect_policy_violation_propagates(self):
        """Should raise the transport's redirect error unmodified."""
        respx.get(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(301, headers={"Location": "http://test/elsewhere"})
        )
        http_client = httpx.Client(follow_redirects=True, max_redirects=0)

        with pytest.raises(httpx.TooManyRedirects):
            dispatch(make_client(http_client), make_request(), Thing())

    @respx.mock
    def test_sends_exactly_once(self):
        """Should never retry a failed call."""
        route = respx.get(f"{BASE_URL}/things").mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            dispatch(make_client(), make_request(), Thing())

        assert route.call_count == 1


class TestStatusCheck:
    """Tests for the expected status code contract."""

    @respx.mock
    def test_unexpected_status_carries_both_codes(self):
        """Should report expected and actual codes."""
        respx.post(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, json={}))

        with pytest.raises(UnexpectedStatusCodeError) as exc_info:
            dispatch(
                make_client(),
                make_request(method="POST", body=b"{}", expected_status=201),
                Thing(),
            )

        assert exc_info.value.expected == 201
        assert exc_info.value.actual == 200
        assert exc_info.value.status_code == 200

    @respx.mock
    def test_server_error_is_status_error(self):
        """Should report 5xx answers as unexpected status codes."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(503))

        with pytest.raises(UnexpectedStatusCodeError) as exc_info:
            dispatch(make_client(), make_request(), Thing())

        assert exc_info.value.actual == 503

    @respx.mock
    def test_unfollowed_redirect_is_status_error(self):
        """Should not follow redirects by default."""
        respx.get(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(301, headers={"Location": "http://test/elsewhere"})
        )

        with pytest.raises(UnexpectedStatusCodeError) as exc_info:
            dispatch(make_client(), make_request(), Thing())

        assert exc_info.value.actual == 301

    @respx.mock
    def test_receiver_untouched_on_status_error(self):
        """Should leave the receiver empty when the status is wrong."""
        respx.get(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(404, json={"id": "should-not-decode"})
        )
        response = Thing()

        with pytest.raises(UnexpectedStatusCodeError):
            dispatch(make_client(), make_request(), response)

        assert response.id == ""


class TestDecoding:
    """Tests for the decode step."""

    @respx.mock
    def test_populates_receiver(self):
        """Should decode the payload into the receiver."""
        respx.get(f"{BASE_URL}/things").mock(
            return_value=httpx.Response(200, json={"id": "abc123", "count": 3})
        )
        response = Thing()

        assert dispatch(make_client(), make_request(), response) is None

        assert response.id == "abc123"
        assert response.count == 3

    @respx.mock
    def test_hands_raw_payload_to_receiver(self):
        """Should pass the exact response bytes to from_json."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, content=b"hello"))
        response = MagicMock()

        dispatch(make_client(), make_request(), response)

        response.from_json.assert_called_once_with(b"hello")

    @respx.mock
    def test_decode_error_propagates_verbatim(self):
        """Should raise the receiver's error even though the exchange succeeded."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, content=b"{}"))
        error = ValueError("bad payload")
        response = MagicMock()
        response.from_json.side_effect = error

        with pytest.raises(ValueError) as exc_info:
            dispatch(make_client(), make_request(), response)

        assert exc_info.value is error

    @respx.mock
    def test_invalid_json_raises_pydantic_error(self):
        """Should surface pydantic's error for malformed JSON."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, content=b"nope"))

        with pytest.raises(ValidationError):
            dispatch(make_client(), make_request(), Thing())


class TestDebugLogging:
    """Tests for debug output."""

    @respx.mock
    def test_debug_redacts_authorization(self, capsys):
        """Should log the request without exposing credentials."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, json={}))

        def authenticate(request: httpx.Request) -> httpx.Request:
            request.headers["Authorization"] = "Bearer secret-token"
            return request

        client = make_client()
        client.authenticate.side_effect = authenticate

        dispatch(client, make_request(), Thing(), debug=True)

        err = capsys.readouterr().err
        assert "[sinch-sdk] GET" in err
        assert "secret-token" not in err
        assert "[REDACTED]" in err

    @respx.mock
    def test_silent_without_debug(self, capsys):
        """Should write nothing when debug is off."""
        respx.get(f"{BASE_URL}/things").mock(return_value=httpx.Response(200, json={}))

        dispatch(make_client(), make_request(), Thing())

        assert capsys.readouterr().err == ""
