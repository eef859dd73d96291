"""
Module 03 - Tree Nodes and Paths
Node variants stored in the sparse map, and bit-path helpers.

A path is a tuple of bools, read from the root: bit i selects the left
(False) or right (True) child at depth i. The empty path is the root.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from smt.crypto.hashing import Hasher
from smt.schemas.errors import InvalidPathLengthException

Path = tuple[bool, ...]


@dataclass(frozen=True)
class LeafNode:
    """Leaf holding a fixed-width value of field elements."""
    value: tuple[int, ...]

    def hash(self, hasher: Hasher) -> bytes:
        return hasher.leaf_hash(self.value)


@dataclass(frozen=True)
class InnerNode:
    """
    Inner node holding the digests of its two children.

    Children are not embedded; they are found again by path lookup.
    """
    left: bytes
    right: bytes

    def hash(self, hasher: Hasher) -> bytes:
        return hasher.two_to_one(self.left, self.right)


Node = Union[LeafNode, InnerNode]


def normalize_path(path: Sequence[bool]) -> Path:
    """
    Convert a bit sequence into the canonical map key.

    Raises:
        InvalidPathLengthException: If any entry is not a bool
    """
    bits = tuple(path)
    for bit in bits:
        if not isinstance(bit, bool):
            raise InvalidPathLengthException(
                f"Path entries must be bool, got {type(bit).__name__}",
                actual=len(bits),
            )
    return bits


def path_to_str(path: Sequence[bool]) -> str:
    """Render a path as a '0'/'1' string (root is the empty string)."""
    return "".join("1" if bit else "0" for bit in path)


def str_to_path(bits: str) -> Path:
    """
    Parse a '0'/'1' string into a path.

    Raises:
        ValueError: If bits contains characters other than '0' and '1'
    """
    if any(c not in "01" for c in bits):
        raise ValueError(f"Path string must contain only '0' and '1', got {bits!r}")
    return tuple(c == "1" for c in bits)


def path_to_index(path: Sequence[bool]) -> int:
    """
    Leaf index of a path, most significant bit first.

    Example:
        >>> path_to_index([False, True, True])
        3
    """
    index = 0
    for bit in path:
        index = (index << 1) | int(bit)
    return index


def index_to_path(index: int, height: int) -> Path:
    """
    Path of the leaf at index in a tree of the given height.

    Raises:
        InvalidPathLengthException: If index does not fit in height bits
    """
    if index < 0 or index >= 1 << height:
        raise InvalidPathLengthException(
            f"Leaf index {index} out of range for height {height}",
            expected=f"0 <= index < 2**{height}",
        )
    return tuple(bool((index >> (height - 1 - i)) & 1) for i in range(height))


__all__ = [
    "Path",
    "Node",
    "LeafNode",
    "InnerNode",
    "normalize_path",
    "path_to_str",
    "str_to_path",
    "path_to_index",
    "index_to_path",
]
