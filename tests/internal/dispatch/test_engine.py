"""Tests for the dispatch engine."""

import json
import logging
from unittest.mock import patch

import httpx
import pytest
import respx

from signal_sdk._internal.debug import close_debug_logger, create_debug_logger
from signal_sdk._internal.dispatch import endpoints
from signal_sdk._internal.dispatch.engine import (
    DispatchEngine,
    build_query,
    classify_response,
    error_message,
    resolve_path,
    serialize_body,
    serialize_query_value,
)
from signal_sdk._internal.dispatch.models import Endpoint, ResponseShape
from signal_sdk._internal.dispatch.result import Outcome
from signal_sdk._internal.http import create_http_client
from signal_sdk.exceptions import (
    SignalAPIError,
    SignalResponseError,
    SignalTimeoutError,
    SignalTransportError,
    SignalValidationError,
)
from signal_sdk.models import (
    About,
    ChangeGroupMembersRequest,
    SendMessage,
    SendMessageResponse,
    SetPinRequest,
)

BASE_URL = "http://signal.test"


@pytest.fixture
def engine():
    http = create_http_client(base_url=BASE_URL, timeout_ms=1000)
    yield DispatchEngine(http)
    http.close()


class TestResolvePath:
    """Tests for path template substitution."""

    def test_no_placeholders(self):
        """Should return a path without placeholders unchanged."""
        assert resolve_path(endpoints.GET_ABOUT) == "/v1/about"

    def test_substitutes_each_placeholder(self):
        """Should substitute every placeholder in the path."""
        path = resolve_path(endpoints.GET_GROUP, {"number": "+1555", "groupid": "group.abc"})
        assert path == "/v1/groups/+1555/group.abc"

    def test_trust_identity_path(self):
        """Should build the trust path from both numbers."""
        path = resolve_path(
            endpoints.TRUST_IDENTITY, {"number": "+111", "number_to_trust": "+222"}
        )
        assert path == "/v1/identities/+111/trust/+222"

    def test_values_are_not_substituted_twice(self):
        """Should insert a value that looks like a placeholder literally."""
        path = resolve_path(endpoints.GET_GROUP, {"number": "{groupid}", "groupid": "g1"})
        assert path == "/v1/groups/{groupid}/g1"

    def test_values_are_not_encoded(self):
        """Should insert values without percent-encoding."""
        path = resolve_path(endpoints.GET_CONTACTS, {"number": "+1 555"})
        assert path == "/v1/contacts/+1 555"

    def test_missing_placeholder_raises(self):
        """Should raise SignalValidationError naming the missing placeholder."""
        with pytest.raises(SignalValidationError, match="groupid"):
            resolve_path(endpoints.GET_GROUP, {"number": "+1555"})

    def test_none_value_counts_as_missing(self):
        """Should treat a None value as missing."""
        with pytest.raises(SignalValidationError, match="number"):
            resolve_path(endpoints.GET_CONTACTS, {"number": None})

    def test_extra_params_are_ignored(self):
        """Should ignore parameters the path does not use."""
        assert resolve_path(endpoints.GET_ABOUT, {"number": "+1"}) == "/v1/about"


class TestQuerySerialization:
    """Tests for query parameter serialization."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (30, "30"),
            ("abc", "abc"),
            (["+1", "+2", "+3"], "+1,+2,+3"),
            (("a",), "a"),
            ([], ""),
        ],
    )
    def test_serialize_query_value(self, value, expected):
        """Should serialize booleans, integers, strings and lists."""
        assert serialize_query_value(value) == expected

    def test_omits_none_values(self):
        """Should drop None values from the query."""
        query = build_query(
            endpoints.RECEIVE_MESSAGES,
            {"timeout": 5, "ignore_attachments": None, "max_messages": None},
        )
        assert query == [("timeout", "5")]

    def test_keeps_declared_order(self):
        """Should emit parameters in the endpoint's declared order."""
        query = build_query(
            endpoints.RECEIVE_MESSAGES,
            {"send_read_receipts": False, "timeout": 1, "ignore_stories": True},
        )
        assert query == [
            ("timeout", "1"),
            ("ignore_stories", "true"),
            ("send_read_receipts", "false"),
        ]

    def test_false_is_sent_not_omitted(self):
        """Should send False as "false" rather than drop it."""
        query = build_query(endpoints.RECEIVE_MESSAGES, {"ignore_attachments": False})
        assert query == [("ignore_attachments", "false")]

    def test_empty_query(self):
        """Should return no pairs when nothing is given."""
        assert build_query(endpoints.RECEIVE_MESSAGES) == []

    def test_unknown_parameter_raises(self):
        """Should raise SignalValidationError for an unknown parameter."""
        with pytest.raises(SignalValidationError, match="limit"):
            build_query(endpoints.RECEIVE_MESSAGES, {"limit": 3})

    def test_endpoint_without_query_rejects_params(self):
        """Should reject query parameters for an endpoint without any."""
        with pytest.raises(SignalValidationError):
            build_query(endpoints.GET_ABOUT, {"timeout": 1})


class TestSerializeBody:
    """Tests for request body serialization."""

    def test_no_body(self):
        """Should return None when there is no body."""
        assert serialize_body(endpoints.SET_PIN, None) is None

    def test_model_body(self):
        """Should serialize a request model to a dict."""
        assert serialize_body(endpoints.SET_PIN, SetPinRequest(pin="1234")) == {"pin": "1234"}

    def test_excludes_none_fields(self):
        """Should omit fields that are None."""
        body = serialize_body(
            endpoints.SEND_MESSAGE,
            SendMessage(number="+1", recipients=["+2"], message="hi"),
        )
        assert body == {
            "number": "+1",
            "recipients": ["+2"],
            "message": "hi",
            "text_mode": "normal",
        }

    def test_mapping_is_validated(self):
        """Should validate a mapping into the endpoint's body model."""
        body = serialize_body(endpoints.ADD_GROUP_MEMBERS, {"members": ["+2", "+3"]})
        assert body == {"members": ["+2", "+3"]}

    def test_invalid_mapping_raises(self):
        """Should raise SignalValidationError for an invalid mapping."""
        with pytest.raises(SignalValidationError, match="invalid request body"):
            serialize_body(endpoints.ADD_GROUP_MEMBERS, {"members": "not-a-list"})

    def test_wrong_model_raises(self):
        """Should raise SignalValidationError for the wrong body model."""
        with pytest.raises(SignalValidationError, match="ChangeGroupMembersRequest"):
            serialize_body(endpoints.ADD_GROUP_MEMBERS, SetPinRequest(pin="1"))

    def test_body_for_bodyless_endpoint_raises(self):
        """Should reject a body for an endpoint that takes none."""
        with pytest.raises(SignalValidationError, match="does not accept"):
            serialize_body(
                endpoints.GET_ABOUT, ChangeGroupMembersRequest(members=["+2"])
            )


class TestErrorMessage:
    """Tests for failure message extraction."""

    def test_uses_envelope_message(self):
        """Should use the message from the error envelope."""
        assert error_message(400, '{"error":"boom"}') == "boom"

    def test_empty_body_falls_back(self):
        """Should fall back to the status and "No content"."""
        message = error_message(500, "")
        assert message == "Request failed with status 500: No content"

    def test_unparseable_body_falls_back(self):
        """Should include the raw body when it is not JSON."""
        message = error_message(502, "<html>Bad Gateway</html>")
        assert "502" in message
        assert "<html>Bad Gateway</html>" in message

    def test_envelope_without_message_falls_back(self):
        """Should fall back when the envelope has no error field."""
        message = error_message(400, '{"detail":"nope"}')
        assert message.startswith("Request failed with status 400")

    def test_non_string_message_falls_back(self):
        """Should fall back when the error field is not a string."""
        message = error_message(400, '{"error": {"code": 1}}')
        assert "400" in message

    def test_empty_message_falls_back(self):
        """Should fall back when the error message is empty."""
        assert "404" in error_message(404, '{"error": ""}')

    def test_json_array_falls_back(self):
        """Should fall back when the body is a JSON array."""
        assert "400" in error_message(400, "[]")


class TestClassifyResponse:
    """Tests for response classification."""

    @pytest.mark.parametrize("status", [200, 201, 204])
    def test_success_codes_for_no_content(self, status):
        """Should treat 200, 201 and 204 as success."""
        result = classify_response(endpoints.HEALTH_CHECK, httpx.Response(status))
        assert result.outcome is Outcome.EMPTY
        assert result.ok is True
        assert result.value is None
        assert result.status_code == status

    @pytest.mark.parametrize("status", [202, 301, 304, 400, 401, 404, 409, 500, 503])
    def test_other_codes_are_failures(self, status):
        """Should treat every other status as a service failure."""
        result = classify_response(
            endpoints.HEALTH_CHECK, httpx.Response(status, json={"error": "boom"})
        )
        assert result.outcome is Outcome.SERVICE_ERROR
        assert isinstance(result.error, SignalAPIError)
        assert str(result.error) == "boom"
        assert result.error.status_code == status

    def test_no_content_ignores_body(self):
        """Should ignore the body of a no-content endpoint."""
        result = classify_response(endpoints.SET_PIN, httpx.Response(201, text="whatever"))
        assert result.outcome is Outcome.EMPTY

    def test_text_returns_body_verbatim(self):
        """Should return a text body unchanged."""
        result = classify_response(
            endpoints.GET_ATTACHMENT, httpx.Response(200, content=b"iVBORw0KGgo=\n")
        )
        assert result.outcome is Outcome.VALUE
        assert result.value == "iVBORw0KGgo=\n"

    def test_text_empty_body_is_empty_string(self):
        """Should return an empty string for an empty text body."""
        result = classify_response(endpoints.GET_CONTACT_AVATAR, httpx.Response(204))
        assert result.outcome is Outcome.VALUE
        assert result.value == ""

    def test_text_with_json_body_is_not_parsed(self):
        """Should not parse JSON in a text response."""
        result = classify_response(
            endpoints.SEND_MESSAGE_LEGACY, httpx.Response(201, text='{"timestamp":"1"}')
        )
        assert result.value == '{"timestamp":"1"}'

    def test_json_model(self):
        """Should parse a JSON body into the response model."""
        result = classify_response(
            endpoints.SEND_MESSAGE, httpx.Response(201, json={"timestamp": "123"})
        )
        assert result.outcome is Outcome.VALUE
        assert isinstance(result.value, SendMessageResponse)
        assert result.value.timestamp == "123"

    def test_json_list(self):
        """Should parse a JSON list response."""
        result = classify_response(
            endpoints.GET_ACCOUNTS, httpx.Response(200, json=["+1", "+2"])
        )
        assert result.value == ["+1", "+2"]

    def test_malformed_json_is_shape_error(self):
        """Should report malformed JSON as a shape failure."""
        result = classify_response(endpoints.GET_ABOUT, httpx.Response(200, text="not json"))
        assert result.outcome is Outcome.SHAPE_ERROR
        assert isinstance(result.error, SignalResponseError)
        assert result.error.status_code == 200
        assert result.error.body == "not json"

    def test_wrong_shape_is_shape_error(self):
        """Should report a mismatched JSON shape as a shape failure."""
        result = classify_response(endpoints.GET_ACCOUNTS, httpx.Response(200, json={"a": 1}))
        assert result.outcome is Outcome.SHAPE_ERROR

    def test_empty_body_for_json_is_shape_error(self):
        """Should report an empty JSON body as a shape failure."""
        result = classify_response(endpoints.GET_ABOUT, httpx.Response(204))
        assert result.outcome is Outcome.SHAPE_ERROR

    def test_error_status_with_bad_body_is_service_error_not_shape(self):
        """Should classify an error status as a service failure first."""
        result = classify_response(endpoints.GET_ABOUT, httpx.Response(500, text="oops"))
        assert result.outcome is Outcome.SERVICE_ERROR
        assert "500" in str(result.error)
        assert "oops" in str(result.error)


class TestDispatchEngineExecute:
    """Tests for DispatchEngine.execute()."""

    @respx.mock
    def test_sends_single_request(self, engine):
        """Should send one request and parse the result."""
        route = respx.get(f"{BASE_URL}/v1/about").mock(
            return_value=httpx.Response(200, json={"build": 2, "versions": ["v1", "v2"]})
        )

        result = engine.execute(endpoints.GET_ABOUT)

        assert route.call_count == 1
        assert result.outcome is Outcome.VALUE
        assert isinstance(result.value, About)
        assert result.value.build == 2
        assert result.value.versions == ["v1", "v2"]

    @respx.mock
    def test_sends_json_body(self, engine):
        """Should send the body as JSON."""
        route = respx.post(f"{BASE_URL}/v1/accounts/+1555/pin").mock(
            return_value=httpx.Response(201)
        )

        engine.execute(
            endpoints.SET_PIN, path_params={"number": "+1555"}, body=SetPinRequest(pin="1234")
        )

        request = route.calls.last.request
        assert json.loads(request.content) == {"pin": "1234"}
        assert request.headers["content-type"] == "application/json"

    @respx.mock
    def test_sends_json_body_on_delete(self, engine):
        """Should send a JSON body with DELETE."""
        route = respx.delete(f"{BASE_URL}/v1/groups/+1/g1/members").mock(
            return_value=httpx.Response(204)
        )

        result = engine.execute(
            endpoints.REMOVE_GROUP_MEMBERS,
            path_params={"number": "+1", "groupid": "g1"},
            body=ChangeGroupMembersRequest(members=["+2"]),
        )

        assert result.ok
        assert json.loads(route.calls.last.request.content) == {"members": ["+2"]}

    @respx.mock
    def test_omits_body_when_absent(self, engine):
        """Should send no content when there is no body."""
        route = respx.post(f"{BASE_URL}/v1/contacts/+1/sync").mock(
            return_value=httpx.Response(204)
        )

        engine.execute(endpoints.SYNC_CONTACTS, path_params={"number": "+1"})

        assert route.calls.last.request.content == b""

    @respx.mock
    def test_sends_user_agent(self, engine):
        """Should send the SDK User-Agent header."""
        route = respx.get(f"{BASE_URL}/v1/health").mock(return_value=httpx.Response(204))

        engine.execute(endpoints.HEALTH_CHECK)

        assert route.calls.last.request.headers["user-agent"].startswith("signal-sdk/")

    @respx.mock
    def test_timeout_is_transport_error(self, engine):
        """Should report a timeout as a transport failure."""
        respx.get(f"{BASE_URL}/v1/health").mock(side_effect=httpx.ReadTimeout("timeout"))

        result = engine.execute(endpoints.HEALTH_CHECK)

        assert result.outcome is Outcome.TRANSPORT_ERROR
        assert isinstance(result.error, SignalTimeoutError)
        assert isinstance(result.error.__cause__, httpx.ReadTimeout)
        assert result.status_code is None

    @respx.mock
    def test_connect_error_is_transport_error(self, engine):
        """Should report a connection error as a transport failure."""
        respx.get(f"{BASE_URL}/v1/health").mock(
            side_effect=httpx.ConnectError("connection failed")
        )

        result = engine.execute(endpoints.HEALTH_CHECK)

        assert result.outcome is Outcome.TRANSPORT_ERROR
        assert isinstance(result.error, SignalTransportError)
        assert not isinstance(result.error, SignalTimeoutError)
        assert "connection failed" in str(result.error)

    @respx.mock
    def test_validation_error_sends_nothing(self, engine):
        """Should send nothing when the arguments are invalid."""
        route = respx.route().mock(return_value=httpx.Response(204))

        with pytest.raises(SignalValidationError):
            engine.execute(endpoints.GET_GROUP, path_params={"number": "+1"})

        assert not route.called

    @respx.mock
    def test_custom_endpoint(self, engine):
        """Should interpret any descriptor, not only catalog entries."""
        custom = Endpoint("list_things", "GET", "/v9/things/{kind}", ResponseShape.JSON, list[int])
        respx.get(f"{BASE_URL}/v9/things/odd").mock(return_value=httpx.Response(200, json=[1, 3]))

        result = engine.execute(custom, path_params={"kind": "odd"})

        assert result.value == [1, 3]


class TestDebugOutput:
    """Tests for engine debug logging."""

    @respx.mock
    def test_body_is_not_redacted_when_debug_is_off(self, engine, caplog):
        """Should skip body redaction when debug logging is off."""
        respx.post(f"{BASE_URL}/v1/accounts/+1/pin").mock(return_value=httpx.Response(201))
        caplog.set_level(logging.WARNING, logger="signal_sdk")

        with patch("signal_sdk._internal.dispatch.engine.redact_payload") as redact:
            engine.execute(
                endpoints.SET_PIN, path_params={"number": "+1"}, body=SetPinRequest(pin="1")
            )

        redact.assert_not_called()

    @respx.mock
    def test_debug_logger_receives_redacted_body(self, caplog, capsys):
        """Should write the redacted body to the client's debug logger."""
        respx.post(f"{BASE_URL}/v1/accounts/+1/pin").mock(return_value=httpx.Response(201))
        caplog.set_level(logging.WARNING, logger="signal_sdk")
        debug_logger = create_debug_logger()
        http = create_http_client(base_url=BASE_URL)

        DispatchEngine(http, debug_logger).execute(
            endpoints.SET_PIN, path_params={"number": "+1"}, body=SetPinRequest(pin="4321")
        )
        http.close()
        close_debug_logger(debug_logger)

        err = capsys.readouterr().err
        assert '[signal-sdk] set_pin body: {"pin": "[REDACTED]"}' in err
        assert "4321" not in err
