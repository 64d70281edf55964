"""
Error taxonomy for node API calls.

Four kinds, each scoped to the single call that produced it:

    - VALIDATION: an identifier failed the local format check. Raised
      before any network activity.
    - CLIENT: the node answered 400 (request rejected as malformed).
    - ACCESS: the node answered 401 (unauthorized) or 500 (server failure).
      Distinguish the two by ``status_code``.
    - TRANSPORT: the node was not reachable, the response was unparsable,
      or the status code is outside the contract.

Every error carries its ``kind`` so callers can branch on the taxonomy
without relying on the exception class hierarchy. The subclasses exist
for ``except`` clauses that want them.

Nothing here is retried. Only TRANSPORT might warrant a retry by the
caller.
"""

from __future__ import annotations

from enum import StrEnum

# Shared message for every hash-array validation failure.
INVALID_HASHES_INPUT_ERROR = "Invalid hashes provided."
INVALID_ADDRESSES_INPUT_ERROR = "Invalid addresses provided."


class ErrorKind(StrEnum):
    """Taxonomy kind of a failed call."""

    VALIDATION = "VALIDATION"
    CLIENT = "CLIENT"
    ACCESS = "ACCESS"
    TRANSPORT = "TRANSPORT"


class CvtError(Exception):
    """Base class for every failure surfaced by the gateway.

    Attributes:
        kind: Taxonomy kind.
        detail: Human-readable detail. For CLIENT and ACCESS errors this is
            the node-provided error body. CLIENT carries it verbatim; ACCESS
            prefixes it with the status code ("401 <body>").
        status_code: HTTP status code, or None when the node never answered
            (VALIDATION, unreachable node).
        cause: Underlying exception for TRANSPORT failures, else None.
    """

    kind: ErrorKind

    def __init__(
        self,
        detail: str,
        *,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status_code={self.status_code!r}, detail={self.detail!r})"
        )


class ValidationError(CvtError):
    """A supplied identifier or identifier array failed the format check."""

    kind = ErrorKind.VALIDATION


class ClientError(CvtError):
    """The node rejected the request (HTTP 400)."""

    kind = ErrorKind.CLIENT


class AccessError(CvtError):
    """Authorization (HTTP 401) or server (HTTP 500) failure."""

    kind = ErrorKind.ACCESS


class TransportFailure(CvtError):
    """Node unreachable, response unparsable, or status outside the contract."""

    kind = ErrorKind.TRANSPORT
