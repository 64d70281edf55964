"""
Command payloads for the node's command API.

Every request body is a JSON object with a ``command`` discriminator plus
command-specific fields. Builders here are pure constructors: they never
validate and never fail. Identifier checks happen in the facade, before a
builder is reached.

Rules:
    - Commands are frozen; sequences are stored as tuples.
    - ``to_payload()`` omits None-valued fields (not sent as null). An
      absent ``reference`` or an absent find filter never reaches the wire.
    - How find filters combine across kinds (AND vs OR) is decided by
      the node, not here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import Any

GET_NODE_INFO = "getNodeInfo"
GET_NEIGHBORS = "getNeighbors"
ADD_NEIGHBORS = "addNeighbors"
REMOVE_NEIGHBORS = "removeNeighbors"
GET_TIPS = "getTips"
FIND_TRANSACTIONS = "findTransactions"
GET_INCLUSION_STATES = "getInclusionStates"
GET_TRYTES = "getTrytes"
GET_TRANSACTIONS_TO_APPROVE = "getTransactionsToApprove"


@dataclass(frozen=True)
class Command:
    """A command with no fields beyond its discriminator."""

    command: str

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready request body, None-valued fields excluded."""
        payload: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[f.name] = list(value) if isinstance(value, tuple) else value
        return payload


@dataclass(frozen=True)
class NeighborsCommand(Command):
    uris: tuple[str, ...] = ()


@dataclass(frozen=True)
class FindTransactionsCommand(Command):
    """Search by any subset of four independent filters."""

    addresses: tuple[str, ...] | None = None
    tags: tuple[str, ...] | None = None
    approvees: tuple[str, ...] | None = None
    bundles: tuple[str, ...] | None = None


@dataclass(frozen=True)
class InclusionStatesCommand(Command):
    transactions: tuple[str, ...] = ()
    tips: tuple[str, ...] = ()


@dataclass(frozen=True)
class TrytesCommand(Command):
    hashes: tuple[str, ...] = ()


@dataclass(frozen=True)
class TransactionsToApproveCommand(Command):
    """Tip selection.

    Attributes:
        depth: Number of bundles to go back when selecting tips.
        reference: Transaction hash the random walk must reference in its
            past. None means the field is left out of the request.
    """

    depth: int
    reference: str | None = None


def _seq(values: Iterable[str] | None) -> tuple[str, ...] | None:
    if values is None:
        return None
    return tuple(values)


# =========================================================================
# Builders
# =========================================================================


def node_info() -> Command:
    return Command(GET_NODE_INFO)


def get_neighbors() -> Command:
    return Command(GET_NEIGHBORS)


def add_neighbors(uris: Iterable[str]) -> NeighborsCommand:
    return NeighborsCommand(ADD_NEIGHBORS, uris=tuple(uris))


def remove_neighbors(uris: Iterable[str]) -> NeighborsCommand:
    return NeighborsCommand(REMOVE_NEIGHBORS, uris=tuple(uris))


def get_tips() -> Command:
    return Command(GET_TIPS)


def find_transactions(
    addresses: Iterable[str] | None = None,
    tags: Iterable[str] | None = None,
    approvees: Iterable[str] | None = None,
    bundles: Iterable[str] | None = None,
) -> FindTransactionsCommand:
    """Build a findTransactions command.

    Each filter is carried as its own field. A filter given as None is
    omitted from the payload; an empty iterable is sent as an empty list.
    """
    return FindTransactionsCommand(
        FIND_TRANSACTIONS,
        addresses=_seq(addresses),
        tags=_seq(tags),
        approvees=_seq(approvees),
        bundles=_seq(bundles),
    )


def get_inclusion_states(
    transactions: Iterable[str], tips: Iterable[str]
) -> InclusionStatesCommand:
    return InclusionStatesCommand(
        GET_INCLUSION_STATES, transactions=tuple(transactions), tips=tuple(tips)
    )


def get_trytes(hashes: Iterable[str]) -> TrytesCommand:
    return TrytesCommand(GET_TRYTES, hashes=tuple(hashes))


def get_transactions_to_approve(
    depth: int, reference: str | None = None
) -> TransactionsToApproveCommand:
    return TransactionsToApproveCommand(
        GET_TRANSACTIONS_TO_APPROVE, depth=depth, reference=reference
    )
