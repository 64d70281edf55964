"""
Response types for node commands.

Boring frozen dataclasses, one per command, built by pure parse functions
from the decoded JSON body. Parsing is tolerant of missing keys (defaults
apply) but not of wrong shapes: a body that is not an object, or a field
of the wrong type, raises ValueError/TypeError and the classifier reports
it as an unparsable response.

Every response carries ``duration``, the node-reported processing time in
milliseconds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _require_object(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TypeError(f"expected JSON object, got {type(body).__name__}")
    return body


def _str_list(body: dict[str, Any], key: str) -> tuple[str, ...]:
    values = body.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise TypeError(f"{key!r} must be a list of strings")
    return tuple(values)


def _str(body: dict[str, Any], key: str) -> str:
    value = body.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string")
    return value


def _int(body: dict[str, Any], key: str) -> int:
    value = body.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key!r} must be an integer")
    return value


# =========================================================================
# Node info
# =========================================================================


@dataclass(frozen=True)
class NodeInfo:
    app_name: str = ""
    app_version: str = ""
    jre_available_processors: int = 0
    jre_free_memory: int = 0
    jre_max_memory: int = 0
    jre_total_memory: int = 0
    jre_version: str = ""
    latest_milestone: str = ""
    latest_milestone_index: int = 0
    latest_solid_subtangle_milestone: str = ""
    latest_solid_subtangle_milestone_index: int = 0
    neighbors: int = 0
    packets_queue_size: int = 0
    time: int = 0
    tips: int = 0
    transactions_to_request: int = 0
    duration: int = 0


def parse_node_info(body: Any) -> NodeInfo:
    b = _require_object(body)
    return NodeInfo(
        app_name=_str(b, "appName"),
        app_version=_str(b, "appVersion"),
        jre_available_processors=_int(b, "jreAvailableProcessors"),
        jre_free_memory=_int(b, "jreFreeMemory"),
        jre_max_memory=_int(b, "jreMaxMemory"),
        jre_total_memory=_int(b, "jreTotalMemory"),
        jre_version=_str(b, "jreVersion"),
        latest_milestone=_str(b, "latestMilestone"),
        latest_milestone_index=_int(b, "latestMilestoneIndex"),
        latest_solid_subtangle_milestone=_str(b, "latestSolidSubtangleMilestone"),
        latest_solid_subtangle_milestone_index=_int(
            b, "latestSolidSubtangleMilestoneIndex"
        ),
        neighbors=_int(b, "neighbors"),
        packets_queue_size=_int(b, "packetsQueueSize"),
        time=_int(b, "time"),
        tips=_int(b, "tips"),
        transactions_to_request=_int(b, "transactionsToRequest"),
        duration=_int(b, "duration"),
    )


# =========================================================================
# Neighbors
# =========================================================================


@dataclass(frozen=True)
class Neighbor:
    address: str
    connection_type: str = ""
    number_of_all_transactions: int = 0
    number_of_invalid_transactions: int = 0
    number_of_new_transactions: int = 0
    number_of_random_transaction_requests: int = 0
    number_of_sent_transactions: int = 0


@dataclass(frozen=True)
class NeighborsResult:
    neighbors: tuple[Neighbor, ...] = ()
    duration: int = 0


@dataclass(frozen=True)
class AddNeighborsResult:
    added_neighbors: int = 0
    duration: int = 0


@dataclass(frozen=True)
class RemoveNeighborsResult:
    removed_neighbors: int = 0
    duration: int = 0


def _parse_neighbor(entry: Any) -> Neighbor:
    e = _require_object(entry)
    return Neighbor(
        address=_str(e, "address"),
        connection_type=_str(e, "connectionType"),
        number_of_all_transactions=_int(e, "numberOfAllTransactions"),
        number_of_invalid_transactions=_int(e, "numberOfInvalidTransactions"),
        number_of_new_transactions=_int(e, "numberOfNewTransactions"),
        number_of_random_transaction_requests=_int(
            e, "numberOfRandomTransactionRequests"
        ),
        number_of_sent_transactions=_int(e, "numberOfSentTransactions"),
    )


def parse_neighbors(body: Any) -> NeighborsResult:
    b = _require_object(body)
    entries = b.get("neighbors") or []
    if not isinstance(entries, list):
        raise TypeError("'neighbors' must be a list")
    return NeighborsResult(
        neighbors=tuple(_parse_neighbor(e) for e in entries),
        duration=_int(b, "duration"),
    )


def parse_add_neighbors(body: Any) -> AddNeighborsResult:
    b = _require_object(body)
    return AddNeighborsResult(
        added_neighbors=_int(b, "addedNeighbors"), duration=_int(b, "duration")
    )


def parse_remove_neighbors(body: Any) -> RemoveNeighborsResult:
    b = _require_object(body)
    return RemoveNeighborsResult(
        removed_neighbors=_int(b, "removedNeighbors"), duration=_int(b, "duration")
    )


# =========================================================================
# Transactions
# =========================================================================


@dataclass(frozen=True)
class TipsResult:
    hashes: tuple[str, ...] = ()
    duration: int = 0


@dataclass(frozen=True)
class FindTransactionsResult:
    hashes: tuple[str, ...] = ()
    duration: int = 0


@dataclass(frozen=True)
class InclusionStatesResult:
    """Confirmation flag per requested transaction, in request order."""

    states: tuple[bool, ...] = ()
    duration: int = 0


@dataclass(frozen=True)
class TrytesResult:
    """Raw transaction data, one entry per requested hash."""

    trytes: tuple[str, ...] = ()
    duration: int = 0


@dataclass(frozen=True)
class TransactionsToApproveResult:
    trunk_transaction: str = ""
    branch_transaction: str = ""
    duration: int = 0


def parse_tips(body: Any) -> TipsResult:
    b = _require_object(body)
    return TipsResult(hashes=_str_list(b, "hashes"), duration=_int(b, "duration"))


def parse_find_transactions(body: Any) -> FindTransactionsResult:
    b = _require_object(body)
    return FindTransactionsResult(
        hashes=_str_list(b, "hashes"), duration=_int(b, "duration")
    )


def parse_inclusion_states(body: Any) -> InclusionStatesResult:
    b = _require_object(body)
    states = b.get("states") or []
    if not isinstance(states, list) or not all(isinstance(s, bool) for s in states):
        raise TypeError("'states' must be a list of booleans")
    return InclusionStatesResult(states=tuple(states), duration=_int(b, "duration"))


def parse_trytes(body: Any) -> TrytesResult:
    b = _require_object(body)
    return TrytesResult(trytes=_str_list(b, "trytes"), duration=_int(b, "duration"))


def parse_transactions_to_approve(body: Any) -> TransactionsToApproveResult:
    b = _require_object(body)
    return TransactionsToApproveResult(
        trunk_transaction=_str(b, "trunkTransaction"),
        branch_transaction=_str(b, "branchTransaction"),
        duration=_int(b, "duration"),
    )
