"""
Tests for response classification.

Test plan:
- 200: parsed value, unparsable body -> TRANSPORT
- 400: CLIENT with exact node text
- 401/500: ACCESS, told apart by status_code
- other statuses: TRANSPORT with status_code
- no status (I/O failure): TRANSPORT with cause
- CallResult.unwrap raises the carried error
"""

import httpx
import pytest

from cvt_client.classify import CallResult, classify
from cvt_client.errors import (
    AccessError,
    ClientError,
    ErrorKind,
    TransportFailure,
)
from cvt_client.responses import parse_tips
from cvt_client.transport import RawResponse


class TestSuccess:
    def test_parses_body(self) -> None:
        raw = RawResponse(status_code=200, body='{"hashes": ["A"], "duration": 4}')
        result = classify(raw, parse_tips)
        assert result.ok
        assert result.value is not None
        assert result.value.hashes == ("A",)
        assert result.value.duration == 4

    @pytest.mark.parametrize("body", ["not json", "", "[1, 2]", '{"hashes": 5}'])
    def test_unparsable_body(self, body: str) -> None:
        result = classify(RawResponse(status_code=200, body=body), parse_tips)
        assert not result.ok
        assert result.error is not None
        assert result.error.kind == ErrorKind.TRANSPORT
        assert result.error.status_code == 200


class TestNodeErrors:
    def test_400_client_error_exact_text(self) -> None:
        result = classify(RawResponse(status_code=400, body="bad request"), parse_tips)
        assert isinstance(result.error, ClientError)
        assert result.error.kind == ErrorKind.CLIENT
        assert result.error.detail == "bad request"
        assert str(result.error) == "bad request"

    def test_401_access_error(self) -> None:
        result = classify(RawResponse(status_code=401, body="denied"), parse_tips)
        assert isinstance(result.error, AccessError)
        assert result.error.status_code == 401
        assert result.error.detail == "401 denied"

    def test_500_access_error(self) -> None:
        result = classify(RawResponse(status_code=500, body="boom"), parse_tips)
        assert isinstance(result.error, AccessError)
        assert result.error.kind == ErrorKind.ACCESS
        assert result.error.status_code == 500

    @pytest.mark.parametrize("status", [201, 204, 302, 404, 429, 503])
    def test_uncontracted_status_is_transport_failure(self, status: int) -> None:
        result = classify(RawResponse(status_code=status, body="{}"), parse_tips)
        assert isinstance(result.error, TransportFailure)
        assert result.error.status_code == status
        assert result.value is None


class TestTransportFailure:
    def test_io_failure(self) -> None:
        cause = httpx.ConnectError("Connection refused")
        raw = RawResponse(status_code=None, transport_error=cause)
        result = classify(raw, parse_tips)
        assert isinstance(result.error, TransportFailure)
        assert result.error.cause is cause
        assert result.error.status_code is None
        assert result.value is None


class TestCallResult:
    def test_unwrap_value(self) -> None:
        assert CallResult(value=3).unwrap() == 3

    def test_unwrap_raises(self) -> None:
        error = ClientError("bad request", status_code=400)
        with pytest.raises(ClientError) as exc:
            CallResult(error=error).unwrap()
        assert exc.value is error
