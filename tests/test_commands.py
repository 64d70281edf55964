"""
Tests for command builders.

Test plan:
- Discriminators match the node's command names
- Commands are immutable; sequences become tuples
- find_transactions carries only the supplied filters
- get_transactions_to_approve omits reference when absent, including
  after a JSON encode/decode
"""

import dataclasses
import json

import pytest

from cvt_client import commands

HASH = "B" * 81


class TestDiscriminators:
    @pytest.mark.parametrize(
        ("command", "name"),
        [
            (commands.node_info(), "getNodeInfo"),
            (commands.get_neighbors(), "getNeighbors"),
            (commands.add_neighbors(["udp://1.2.3.4:14600"]), "addNeighbors"),
            (commands.remove_neighbors(["udp://1.2.3.4:14600"]), "removeNeighbors"),
            (commands.get_tips(), "getTips"),
            (commands.find_transactions(), "findTransactions"),
            (commands.get_inclusion_states([], []), "getInclusionStates"),
            (commands.get_trytes([]), "getTrytes"),
            (commands.get_transactions_to_approve(3), "getTransactionsToApprove"),
        ],
    )
    def test_command_name(self, command: commands.Command, name: str) -> None:
        assert command.command == name
        assert command.to_payload()["command"] == name

    def test_fieldless_payload(self) -> None:
        assert commands.node_info().to_payload() == {"command": "getNodeInfo"}


class TestImmutability:
    def test_frozen(self) -> None:
        command = commands.get_trytes([HASH])
        with pytest.raises(dataclasses.FrozenInstanceError):
            command.hashes = ()  # type: ignore[misc]

    def test_input_list_is_copied(self) -> None:
        uris = ["udp://1.2.3.4:14600"]
        command = commands.add_neighbors(uris)
        uris.append("udp://5.6.7.8:14600")
        assert command.uris == ("udp://1.2.3.4:14600",)

    def test_payload_uses_lists(self) -> None:
        payload = commands.add_neighbors(("udp://1.2.3.4:14600",)).to_payload()
        assert payload == {"command": "addNeighbors", "uris": ["udp://1.2.3.4:14600"]}


class TestFindTransactions:
    def test_only_supplied_filters(self) -> None:
        payload = commands.find_transactions(bundles=[HASH]).to_payload()
        assert payload == {"command": "findTransactions", "bundles": [HASH]}

    def test_all_filters(self) -> None:
        payload = commands.find_transactions(
            addresses=["A"], tags=["T"], approvees=["P"], bundles=["B"]
        ).to_payload()
        assert payload == {
            "command": "findTransactions",
            "addresses": ["A"],
            "tags": ["T"],
            "approvees": ["P"],
            "bundles": ["B"],
        }

    def test_empty_filter_is_sent_empty(self) -> None:
        payload = commands.find_transactions(tags=[]).to_payload()
        assert payload["tags"] == []
        assert "addresses" not in payload


class TestInclusionStatesAndTrytes:
    def test_inclusion_states_fields(self) -> None:
        payload = commands.get_inclusion_states([HASH], [HASH]).to_payload()
        assert payload == {
            "command": "getInclusionStates",
            "transactions": [HASH],
            "tips": [HASH],
        }

    def test_trytes_fields(self) -> None:
        payload = commands.get_trytes([HASH]).to_payload()
        assert payload == {"command": "getTrytes", "hashes": [HASH]}


class TestTransactionsToApprove:
    def test_reference_omitted(self) -> None:
        payload = commands.get_transactions_to_approve(3, None).to_payload()
        assert payload == {"command": "getTransactionsToApprove", "depth": 3}
        assert "reference" not in payload

    def test_reference_omitted_after_json_round_trip(self) -> None:
        payload = commands.get_transactions_to_approve(3).to_payload()
        decoded = json.loads(json.dumps(payload))
        assert decoded["depth"] == 3
        assert "reference" not in decoded

    def test_reference_included(self) -> None:
        payload = commands.get_transactions_to_approve(5, HASH).to_payload()
        assert payload["reference"] == HASH
        assert payload["depth"] == 5
