"""
Module 03 - Zero-Hash Cache
Hashes of entirely-default subtrees, one per depth.

Owner: Protocol/Crypto Engineer
Module ID: M03

Construction Rules:
1. hashes[height] = leaf_hash(default value)
2. hashes[d] = two_to_one(hashes[d + 1], hashes[d + 1]) for d < height
3. Index 0 is the root of an empty tree

Built leaf-to-root, then reversed once. O(height) time and space,
independent of how many leaves are ever written.
"""
from __future__ import annotations

from typing import Iterator, Sequence

from smt.crypto.hashing import Hasher
from smt.merkle.nodes import InnerNode, LeafNode


class ZeroHashCache:
    """
    Precomputed default-subtree hashes indexed by depth from the root.

    Example:
        >>> cache = ZeroHashCache(Sha256Hasher(), [0, 0, 0, 0], height=2)
        >>> len(cache)
        3
        >>> cache[2] == Sha256Hasher().leaf_hash([0, 0, 0, 0])
        True
    """

    def __init__(self, hasher: Hasher, default_value: Sequence[int], height: int) -> None:
        h = LeafNode(value=tuple(default_value)).hash(hasher)
        hashes = [h]
        for _ in range(height):
            h = InnerNode(left=h, right=h).hash(hasher)
            hashes.append(h)
        hashes.reverse()
        self._hashes: tuple[bytes, ...] = tuple(hashes)
        self.height = height

    def __getitem__(self, depth: int) -> bytes:
        return self._hashes[depth]

    def __len__(self) -> int:
        return len(self._hashes)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._hashes)

    @property
    def root(self) -> bytes:
        """Root hash of a tree where every leaf is default."""
        return self._hashes[0]

    @property
    def leaf(self) -> bytes:
        """Hash of a single default leaf."""
        return self._hashes[-1]

    def as_tuple(self) -> tuple[bytes, ...]:
        return self._hashes


__all__ = ["ZeroHashCache"]
