"""
cvt-client: gateway to a CVT node's command API.

Public API:

    Gateway:
        - ``CvtApi``: one method per node command; validates, dispatches,
          classifies.

    Configuration:
        - ``TransportConfig``: scheme/host/port, timeouts, version header.

    Transport (for dependency injection):
        - ``HttpTransport``: transport protocol.
        - ``HttpxTransport``: default httpx-based transport.
        - ``TransportAdapter``: header injection + single dispatch.

    Errors:
        - ``ErrorKind`` and ``CvtError`` with ``ValidationError``,
          ``ClientError``, ``AccessError``, ``TransportFailure``.
        - ``CallResult``: non-raising outcome from ``CvtApi.call()``.

    Identifier checks:
        - ``is_hash``, ``is_array_of_hashes``, ``is_trytes``,
          ``remove_checksum``.
"""

__version__ = "0.1.0"

from cvt_client.api import CvtApi
from cvt_client.classify import CallResult, classify
from cvt_client.errors import (
    AccessError,
    ClientError,
    CvtError,
    ErrorKind,
    TransportFailure,
    ValidationError,
)
from cvt_client.pow import LocalPoW
from cvt_client.transport import (
    API_VERSION,
    API_VERSION_HEADER,
    HttpTransport,
    HttpxTransport,
    NodeRequest,
    RawResponse,
    TransportAdapter,
    TransportConfig,
)
from cvt_client.validators import (
    is_array_of_hashes,
    is_hash,
    is_trytes,
    remove_checksum,
)

__all__ = [
    "API_VERSION",
    "API_VERSION_HEADER",
    "AccessError",
    "CallResult",
    "ClientError",
    "CvtApi",
    "CvtError",
    "ErrorKind",
    "HttpTransport",
    "HttpxTransport",
    "LocalPoW",
    "NodeRequest",
    "RawResponse",
    "TransportAdapter",
    "TransportConfig",
    "TransportFailure",
    "ValidationError",
    "classify",
    "is_array_of_hashes",
    "is_hash",
    "is_trytes",
    "remove_checksum",
]
