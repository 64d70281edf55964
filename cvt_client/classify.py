"""
Response classification: RawResponse -> CallResult.

Status contract:
    200      decode body with the command's parser -> success
    400      ClientError carrying the node's error text verbatim
    401/500  AccessError carrying status and error text
    other    TransportFailure (logged; outside the node's contract)

    I/O failure (no status) -> TransportFailure carrying the cause.
    200 with an unparsable body -> TransportFailure.

``classify`` never raises. Callers branch on ``CallResult.ok`` /
``CallResult.error.kind``, or call ``unwrap()`` to get the value or raise.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from cvt_client.errors import AccessError, ClientError, CvtError, TransportFailure
from cvt_client.transport import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401
HTTP_SERVER_ERROR = 500


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Outcome of one gateway call: a value or an error, never both."""

    value: T | None = None
    error: CvtError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _failure(error: CvtError) -> CallResult[Any]:
    return CallResult(error=error)


def classify(raw: RawResponse, parse: Callable[[Any], T]) -> CallResult[T]:
    """Classify a transport outcome.

    Args:
        raw: What the transport adapter returned.
        parse: Command-specific parser applied to the decoded JSON body of
            a 200 response.
    """
    if raw.transport_error is not None or raw.status_code is None:
        cause = raw.transport_error
        return _failure(
            TransportFailure(f"node not reachable: {cause}", cause=cause)
        )

    status = raw.status_code

    if status == HTTP_OK:
        try:
            return CallResult(value=parse(json.loads(raw.body)))
        except (ValueError, TypeError, KeyError) as e:
            return _failure(
                TransportFailure(
                    f"unparsable response: {e}", status_code=status, cause=e
                )
            )

    if status == HTTP_BAD_REQUEST:
        return _failure(ClientError(raw.body, status_code=status))

    if status in (HTTP_UNAUTHORIZED, HTTP_SERVER_ERROR):
        return _failure(AccessError(f"{status} {raw.body}", status_code=status))

    logger.warning("Unexpected status %s from node: %.200s", status, raw.body)
    return _failure(
        TransportFailure(f"unexpected status {status}", status_code=status)
    )
