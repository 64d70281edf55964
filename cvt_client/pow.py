"""
Local proof-of-work collaborator.

The gateway only holds a reference for higher-level flows (attaching
transactions to the ledger); none of its own operations call it.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LocalPoW(Protocol):
    def perform_pow(self, trytes: str, min_weight_magnitude: int) -> str:
        """Return ``trytes`` with the nonce filled in."""
        ...
