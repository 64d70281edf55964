"""
Identifier format checks.

Addresses, transaction hashes, bundle hashes and tags are strings over the
tryte alphabet (uppercase A-Z plus 9). Hashes are 81 trytes; an address may
carry a 9-tryte checksum suffix, giving 90.

All predicates are pure and never raise. ``remove_checksum`` is the one
exception: an address of neither valid shape is rejected with
ValidationError, since there is nothing sensible to strip.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cvt_client.errors import INVALID_ADDRESSES_INPUT_ERROR, ValidationError

TRYTE_ALPHABET = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ"

HASH_LENGTH = 81
CHECKSUM_LENGTH = 9
ADDRESS_LENGTH_WITH_CHECKSUM = HASH_LENGTH + CHECKSUM_LENGTH
TAG_LENGTH = 27

_TRYTES = frozenset(TRYTE_ALPHABET)


def is_trytes(
    value: Any,
    length: int | None = None,
    alphabet: frozenset[str] = _TRYTES,
) -> bool:
    """Check that ``value`` is a non-empty string over ``alphabet``.

    Args:
        value: Candidate identifier. Non-strings are rejected.
        length: Exact length required, or None for any non-zero length.
        alphabet: Permitted characters. Defaults to the tryte alphabet.
    """
    if not isinstance(value, str) or not value:
        return False
    if length is not None and len(value) != length:
        return False
    return all(ch in alphabet for ch in value)


def is_hash(value: Any) -> bool:
    """True for an 81-tryte hash, or a 90-tryte hash with checksum."""
    return is_trytes(value, HASH_LENGTH) or is_trytes(
        value, ADDRESS_LENGTH_WITH_CHECKSUM
    )


def is_array_of_hashes(values: Any) -> bool:
    """True iff ``values`` is a sequence whose every element is a hash.

    The empty sequence is valid. Requiring at least one element is the
    caller's concern. A bare string is not a sequence of hashes.
    """
    if values is None or isinstance(values, (str, bytes)):
        return False
    if not isinstance(values, Sequence):
        return False
    return all(is_hash(v) for v in values)


def is_address_with_checksum(address: Any) -> bool:
    return is_trytes(address, ADDRESS_LENGTH_WITH_CHECKSUM)


def is_address_without_checksum(address: Any) -> bool:
    return is_trytes(address, HASH_LENGTH)


def remove_checksum(address: str) -> str:
    """Strip the checksum suffix from an address.

    An 81-tryte address is returned unchanged.

    Raises:
        ValidationError: ``address`` is neither 81 nor 90 trytes.
    """
    if is_address_with_checksum(address):
        return address[:HASH_LENGTH]
    if is_address_without_checksum(address):
        return address
    raise ValidationError(INVALID_ADDRESSES_INPUT_ERROR)
