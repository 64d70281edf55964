"""
Transport for node command calls.

Defines the seam where the concrete HTTP implementation plugs in. The
adapter depends on the ``HttpTransport`` protocol, not on httpx directly,
so tests can swap in a fake without touching dispatch logic.

Concrete implementations:
    - HttpxTransport (default, owns a pooled httpx.Client)
    - fakes in tests, returning canned RawResponse values

Layers:
    HttpTransport.send(NodeRequest) -> RawResponse
        One physical POST. Raises on I/O failure.

    with_header(send, name, value)
        Wraps a send function so every request carries a fixed header.
        Composed once when the adapter is built.

    TransportAdapter.execute(Command) -> RawResponse
        Builds the request, sends it exactly once, and folds I/O failures
        into a RawResponse carrying the cause. Never retries.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Protocol, runtime_checkable

import httpx

from cvt_client.commands import Command

logger = logging.getLogger(__name__)

API_VERSION_HEADER = "X-CVT-API-Version"
API_VERSION = "1"

# Seconds, for both connect and read. Callers bound hung calls, not the transport.
DEFAULT_TIMEOUT_S = 5000.0

DEFAULT_PROTOCOL = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 14265


@dataclass(frozen=True)
class TransportConfig:
    """Connection target and timeouts. Fixed for the gateway's lifetime.

    Attributes:
        protocol: URL scheme, "http" or "https".
        host: Node host name or address.
        port: Node API port.
        connect_timeout: Seconds to wait for a connection.
        read_timeout: Seconds to wait for a response (also used for write
            and pool acquisition).
        api_version: Value of the API version header on every request.
    """

    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    connect_timeout: float = DEFAULT_TIMEOUT_S
    read_timeout: float = DEFAULT_TIMEOUT_S
    api_version: str = API_VERSION

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host}:{self.port}"

    @classmethod
    def from_env(cls, **overrides: object) -> TransportConfig:
        """Build from CVT_API_* environment variables.

        Keyword overrides win over the environment.
        """
        from cvt_client.config import load_transport_settings

        settings: dict[str, object] = dict(load_transport_settings())
        settings.update(overrides)
        return cls(**settings)  # type: ignore[arg-type]


@dataclass(frozen=True)
class NodeRequest:
    """One outbound POST: target URL, JSON body, headers."""

    url: str
    payload: dict[str, object]
    headers: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class RawResponse:
    """Transport-level outcome of a single call.

    Exactly one of two shapes:
        - the node answered: ``status_code`` and ``body`` (raw text) set;
        - the call failed at I/O level: ``status_code`` is None and
          ``transport_error`` holds the cause.
    """

    status_code: int | None
    body: str = ""
    transport_error: BaseException | None = None

    @property
    def reached_node(self) -> bool:
        return self.transport_error is None and self.status_code is not None


SendFn = Callable[[NodeRequest], RawResponse]


@runtime_checkable
class HttpTransport(Protocol):
    """Sync transport for JSON POST requests."""

    def send(self, request: NodeRequest) -> RawResponse:
        """Send the request and return status and body.

        Any status code is a normal return; classification happens later.

        Raises:
            Exception: On I/O failures (connection refused, reset, timeout,
                malformed framing). The adapter maps these to a
                RawResponse carrying the cause.
        """
        ...

    def close(self) -> None:
        ...


class HttpxTransport:
    """Default transport, one pooled httpx.Client per instance.

    httpx.Client is safe to share between threads, so one instance can
    serve concurrent calls.
    """

    def __init__(
        self,
        connect_timeout: float = DEFAULT_TIMEOUT_S,
        read_timeout: float = DEFAULT_TIMEOUT_S,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(
            timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
        )

    def send(self, request: NodeRequest) -> RawResponse:
        response = self._client.post(
            request.url,
            json=request.payload,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                **request.headers,
            },
        )
        return RawResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        self._client.close()


def with_header(send: SendFn, name: str, value: str) -> SendFn:
    """Return a send function that adds ``name: value`` to every request."""

    def _send(request: NodeRequest) -> RawResponse:
        headers = {**request.headers, name: value}
        return send(replace(request, headers=headers))

    return _send


class TransportAdapter:
    """Turns a Command into a RawResponse against a fixed node.

    Args:
        config: Connection target, timeouts and version header value.
        transport: Injectable transport. Defaults to an HttpxTransport built
            from ``config`` and owned (closed) by this adapter. A supplied
            transport is left open on ``close()``.
    """

    def __init__(
        self,
        config: TransportConfig,
        transport: HttpTransport | None = None,
    ) -> None:
        self._config = config
        self._owns_transport = transport is None
        self._transport: HttpTransport = transport or HttpxTransport(
            connect_timeout=config.connect_timeout,
            read_timeout=config.read_timeout,
        )
        self._send = with_header(
            self._transport.send, API_VERSION_HEADER, config.api_version
        )
        logger.info("Node URL: %s", config.base_url)

    @property
    def config(self) -> TransportConfig:
        return self._config

    def execute(self, command: Command) -> RawResponse:
        """Send one command. Exactly one physical call, no retry."""
        request = NodeRequest(url=self._config.base_url, payload=command.to_payload())
        logger.debug("Dispatching %s to %s", command.command, request.url)
        try:
            return self._send(request)
        except (httpx.RequestError, OSError) as e:
            logger.error(
                "Execution of the API call raised exception. Node not reachable? (%s)",
                e,
            )
            return RawResponse(status_code=None, transport_error=e)

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()
