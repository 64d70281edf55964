"""
CvtApi: the public gateway to a node's command API.

Each operation runs the same pipeline:

    validate (some operations) -> build command -> TransportAdapter.execute
    -> classify -> unwrap

Operations return a typed result or raise a CvtError subclass
(ValidationError, ClientError, AccessError, TransportFailure). ``call()``
runs the pipeline without unwrapping, for callers that prefer to branch on
``CallResult`` instead of catching.

One instance is safe for concurrent use from several threads: the only
shared state is the frozen TransportConfig and the transport's connection
pool. No retries, no caching, no per-call timeout override.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, TypeVar

from cvt_client import commands
from cvt_client.classify import CallResult, classify
from cvt_client.commands import Command
from cvt_client.errors import INVALID_HASHES_INPUT_ERROR, ValidationError
from cvt_client.pow import LocalPoW
from cvt_client.responses import (
    AddNeighborsResult,
    FindTransactionsResult,
    InclusionStatesResult,
    NeighborsResult,
    NodeInfo,
    RemoveNeighborsResult,
    TipsResult,
    TransactionsToApproveResult,
    TrytesResult,
    parse_add_neighbors,
    parse_find_transactions,
    parse_inclusion_states,
    parse_neighbors,
    parse_node_info,
    parse_remove_neighbors,
    parse_tips,
    parse_transactions_to_approve,
    parse_trytes,
)
from cvt_client.transport import HttpTransport, TransportAdapter, TransportConfig
from cvt_client.validators import is_array_of_hashes, remove_checksum

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _require_hashes(values: Sequence[str]) -> None:
    if not is_array_of_hashes(values):
        raise ValidationError(INVALID_HASHES_INPUT_ERROR)


class CvtApi:
    """Gateway to one node.

    Args:
        config: Connection target. Defaults to ``TransportConfig()``
            (http://localhost:14265).
        transport: Injectable HTTP transport. Defaults to an HttpxTransport
            owned by this gateway. Pass a fake for testing.
        local_pow: Optional proof-of-work collaborator, held for
            higher-level flows. Not used by any operation here.
    """

    def __init__(
        self,
        config: TransportConfig | None = None,
        transport: HttpTransport | None = None,
        local_pow: LocalPoW | None = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._adapter = TransportAdapter(self._config, transport)
        self._local_pow = local_pow

    @classmethod
    def from_env(
        cls,
        transport: HttpTransport | None = None,
        local_pow: LocalPoW | None = None,
    ) -> CvtApi:
        """Build a gateway from CVT_API_PROTOCOL/HOST/PORT."""
        return cls(TransportConfig.from_env(), transport, local_pow)

    @property
    def config(self) -> TransportConfig:
        return self._config

    @property
    def local_pow(self) -> LocalPoW | None:
        return self._local_pow

    def close(self) -> None:
        self._adapter.close()

    def __enter__(self) -> CvtApi:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # -----------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------

    def call(self, command: Command, parse: Callable[[Any], T]) -> CallResult[T]:
        """Dispatch a built command and classify the outcome. Never raises."""
        return classify(self._adapter.execute(command), parse)

    def _run(self, command: Command, parse: Callable[[Any], T]) -> T:
        return self.call(command, parse).unwrap()

    # -----------------------------------------------------------------
    # Node and neighbors
    # -----------------------------------------------------------------

    def get_node_info(self) -> NodeInfo:
        return self._run(commands.node_info(), parse_node_info)

    def get_neighbors(self) -> NeighborsResult:
        return self._run(commands.get_neighbors(), parse_neighbors)

    def add_neighbors(self, *uris: str) -> AddNeighborsResult:
        """Add neighbors by URI (e.g. ``udp://10.0.0.2:14600``).

        Not safe to retry blindly: the node may already have applied it.
        """
        return self._run(commands.add_neighbors(uris), parse_add_neighbors)

    def remove_neighbors(self, *uris: str) -> RemoveNeighborsResult:
        return self._run(commands.remove_neighbors(uris), parse_remove_neighbors)

    def get_tips(self) -> TipsResult:
        return self._run(commands.get_tips(), parse_tips)

    # -----------------------------------------------------------------
    # Transaction search
    # -----------------------------------------------------------------

    def find_transactions(
        self,
        addresses: Iterable[str] | None = None,
        tags: Iterable[str] | None = None,
        approvees: Iterable[str] | None = None,
        bundles: Iterable[str] | None = None,
    ) -> FindTransactionsResult:
        """Find transaction hashes matching any supplied filters.

        Filters are not format-checked here; the node is authoritative.
        How filters of different kinds combine is up to the node.
        """
        command = commands.find_transactions(addresses, tags, approvees, bundles)
        return self._run(command, parse_find_transactions)

    def find_transactions_by_addresses(self, *addresses: str) -> FindTransactionsResult:
        """Find by addresses, stripping any checksum suffix first.

        Raises:
            ValidationError: An address is neither 81 nor 90 trytes.
        """
        stripped = [remove_checksum(a) for a in addresses]
        return self.find_transactions(addresses=stripped)

    def find_transactions_by_bundles(self, *bundles: str) -> FindTransactionsResult:
        return self.find_transactions(bundles=bundles)

    def find_transactions_by_approvees(self, *approvees: str) -> FindTransactionsResult:
        return self.find_transactions(approvees=approvees)

    def find_transactions_by_digests(self, *digests: str) -> FindTransactionsResult:
        # Digests are searched through the tags filter.
        return self.find_transactions(tags=digests)

    # -----------------------------------------------------------------
    # Transaction state and data
    # -----------------------------------------------------------------

    def get_inclusion_states(
        self, transactions: Sequence[str], tips: Sequence[str]
    ) -> InclusionStatesResult:
        """Whether each transaction is confirmed as seen from ``tips``.

        Raises:
            ValidationError: Either list contains a malformed hash. No
                network call is made.
        """
        _require_hashes(transactions)
        _require_hashes(tips)
        command = commands.get_inclusion_states(transactions, tips)
        return self._run(command, parse_inclusion_states)

    def get_trytes(self, *hashes: str) -> TrytesResult:
        """Raw transaction data for each hash.

        Raises:
            ValidationError: A hash is malformed. No network call is made.
        """
        _require_hashes(hashes)
        return self._run(commands.get_trytes(hashes), parse_trytes)

    def get_transactions_to_approve(
        self, depth: int, reference: str | None = None
    ) -> TransactionsToApproveResult:
        """Tip selection: trunk and branch transactions to approve.

        Args:
            depth: Number of bundles to go back for tip selection.
            reference: Hash the random walk starts from, so the returned
                tips reference it. Not format-checked here.
        """
        command = commands.get_transactions_to_approve(depth, reference)
        return self._run(command, parse_transactions_to_approve)
