"""
Module 02 - Hashing Capability
Leaf hashing and two-to-one compression injected into the sparse tree.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- Hasher: abstract capability consumed by the tree
- Sha256Hasher / Blake2bHasher: concrete hashlib-backed capabilities
- get_hasher: lookup by configured name
- Hex encoding/decoding with 0x prefix for proof transport

Commitment Rules (Hard Contracts):
1. Leaf hashing: H(0x00 || enc(e_0) || ... || enc(e_n-1)),
   enc(e) = e as 8 bytes big-endian
2. Inner hashing: H(0x01 || left || right)
3. Both functions are deterministic; the prefixes keep leaf and inner
   preimages disjoint.
"""
from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import Sequence

from smt.schemas.errors import ConfigurationException, InvalidLeafValueException

LEAF_PREFIX: bytes = b"\x00"
NODE_PREFIX: bytes = b"\x01"

# Width of one encoded field element
ELEMENT_BYTES: int = 8


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def encode_elements(values: Sequence[int]) -> bytes:
    """
    Encode field elements as concatenated 8-byte big-endian words.

    Raises:
        InvalidLeafValueException: If an element does not fit in 8 bytes
    """
    try:
        return b"".join(int(v).to_bytes(ELEMENT_BYTES, "big") for v in values)
    except OverflowError as e:
        raise InvalidLeafValueException(
            f"Field element does not fit in {ELEMENT_BYTES} bytes",
            details={"error": str(e)},
        ) from e


class Hasher(ABC):
    """
    Hash capability used by SparseMerkleTree.

    Implementations must be deterministic and collision-resistant;
    the tree never inspects digests beyond equality.
    """

    name: str = "abstract"
    digest_size: int = 32

    @abstractmethod
    def leaf_hash(self, values: Sequence[int]) -> bytes:
        """Hash a leaf value (sequence of field elements)."""

    @abstractmethod
    def two_to_one(self, left: bytes, right: bytes) -> bytes:
        """Compress two child digests into their parent digest."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Sha256Hasher(Hasher):
    """SHA-256 with leaf/inner domain separation. The default capability."""

    name = "sha256"
    digest_size = 32

    def leaf_hash(self, values: Sequence[int]) -> bytes:
        return sha256(LEAF_PREFIX + encode_elements(values))

    def two_to_one(self, left: bytes, right: bytes) -> bytes:
        return sha256(NODE_PREFIX + left + right)


class Blake2bHasher(Hasher):
    """BLAKE2b truncated to 32 bytes, same framing as Sha256Hasher."""

    name = "blake2b"
    digest_size = 32

    def _digest(self, data: bytes) -> bytes:
        return hashlib.blake2b(data, digest_size=self.digest_size).digest()

    def leaf_hash(self, values: Sequence[int]) -> bytes:
        return self._digest(LEAF_PREFIX + encode_elements(values))

    def two_to_one(self, left: bytes, right: bytes) -> bytes:
        return self._digest(NODE_PREFIX + left + right)


_HASHERS: dict[str, type[Hasher]] = {
    Sha256Hasher.name: Sha256Hasher,
    Blake2bHasher.name: Blake2bHasher,
}


def get_hasher(name: str) -> Hasher:
    """
    Instantiate a hasher by its configured name.

    Raises:
        ConfigurationException: If no hasher is registered under name
    """
    try:
        return _HASHERS[name.lower()]()
    except KeyError:
        raise ConfigurationException(
            f"Unknown hasher: {name!r}. Available: {sorted(_HASHERS)}",
            setting="hasher",
        ) from None


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "LEAF_PREFIX",
    "NODE_PREFIX",
    "sha256",
    "encode_elements",
    "Hasher",
    "Sha256Hasher",
    "Blake2bHasher",
    "get_hasher",
    "to_hex",
    "from_hex",
]
