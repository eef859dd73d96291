"""
Module 03 - Sparse Merkle Tree
Fixed-height authenticated key-value map over bit-path addresses.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- SparseMerkleTree: point updates, node/leaf/root queries, inclusion proofs

Storage Rules (Hard Contracts):
1. Only written paths are stored: each leaf plus its full ancestor chain
2. An absent path is an entirely-default subtree; its hash comes from
   the ZeroHashCache at that depth
3. Every stored InnerNode holds the current hashes of both children.
   update() maintains this eagerly, so queries never recompute subtrees
4. Entries are never removed; writing the default value stores it
   explicitly

Determinism Notes:
- Same sequence of updates with the same capabilities -> same root
- Insertion order of the map is irrelevant; lookups are exact-match
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from smt.config.runtime import TreeConfig
from smt.crypto.field import Field, GoldilocksField, get_field
from smt.crypto.hashing import Hasher, Sha256Hasher, get_hasher, to_hex
from smt.merkle.merkle_proofs import MerkleProof
from smt.merkle.nodes import (
    InnerNode,
    LeafNode,
    Node,
    Path,
    normalize_path,
    path_to_str,
)
from smt.merkle.zero_hashes import ZeroHashCache
from smt.schemas.errors import (
    InvalidLeafValueException,
    InvalidPathLengthException,
    LeafNotFoundException,
)

logger = logging.getLogger(__name__)

DEFAULT_LEAF_WIDTH = 4


class SparseMerkleTree:
    """
    Sparse Merkle tree over 2**height leaves.

    Single-owner and single-threaded: callers that share a tree across
    threads must guard the whole instance with one lock.

    Example:
        >>> tree = SparseMerkleTree(height=2)
        >>> tree.update([False, True], [1, 2, 3, 4])
        >>> tree.get_leaf([False, True])
        [1, 2, 3, 4]
        >>> len(tree.prove([False, True]).siblings)
        2
    """

    def __init__(
        self,
        height: int,
        hasher: Optional[Hasher] = None,
        field: Optional[Field] = None,
        leaf_width: int = DEFAULT_LEAF_WIDTH,
    ) -> None:
        if height < 0:
            raise InvalidPathLengthException(
                f"Tree height must be non-negative, got {height}",
                expected=">= 0",
                actual=height,
            )
        if leaf_width < 1:
            raise InvalidLeafValueException(
                f"Leaf width must be positive, got {leaf_width}",
                details={"leaf_width": leaf_width},
            )

        self.height = height
        self.leaf_width = leaf_width
        self.hasher = hasher or Sha256Hasher()
        self.field = field or GoldilocksField()
        self.nodes: dict[Path, Node] = {}
        self._zero_hashes = ZeroHashCache(self.hasher, self.default_value(), height)

        logger.debug(
            f"Created sparse tree height={height} hasher={self.hasher.name} "
            f"field={self.field.name} leaf_width={leaf_width}"
        )

    @classmethod
    def from_config(cls, config: TreeConfig) -> "SparseMerkleTree":
        """Build an empty tree from a TreeConfig."""
        return cls(
            height=config.height,
            hasher=get_hasher(config.hasher),
            field=get_field(config.field),
            leaf_width=config.leaf_width,
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def zero_hashes(self) -> tuple[bytes, ...]:
        """Default-subtree hashes, index 0 = root depth."""
        return self._zero_hashes.as_tuple()

    def default_value(self) -> list[int]:
        return [self.field.zero()] * self.leaf_width

    def contains(self, path: Sequence[bool]) -> bool:
        """Whether path has an explicit entry in the map."""
        return normalize_path(path) in self.nodes

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return (
            f"SparseMerkleTree(height={self.height}, nodes={len(self.nodes)}, "
            f"root={to_hex(self.get_root())})"
        )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def _leaf_path(self, path: Sequence[bool]) -> Path:
        bits = normalize_path(path)
        if len(bits) != self.height:
            raise InvalidPathLengthException(
                f"Leaf path must have exactly {self.height} bits, got {len(bits)}",
                expected=f"== {self.height}",
                actual=len(bits),
            )
        return bits

    def _node_path(self, path: Sequence[bool]) -> Path:
        bits = normalize_path(path)
        if len(bits) > self.height:
            raise InvalidPathLengthException(
                f"Node path must have at most {self.height} bits, got {len(bits)}",
                expected=f"<= {self.height}",
                actual=len(bits),
            )
        return bits

    def _leaf_value(self, value: Sequence[int]) -> tuple[int, ...]:
        elements = tuple(value)
        if len(elements) != self.leaf_width:
            raise InvalidLeafValueException(
                f"Leaf value must have {self.leaf_width} elements, got {len(elements)}",
                details={"expected": self.leaf_width, "actual": len(elements)},
            )
        return tuple(self.field.validate(e) for e in elements)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_leaf(self, path: Sequence[bool]) -> list[int]:
        """
        Return the value stored at a leaf path.

        Raises:
            InvalidPathLengthException: If path is not exactly height bits
            LeafNotFoundException: If the leaf was never written, or the
                entry at path is not a leaf
        """
        bits = self._leaf_path(path)
        node = self.nodes.get(bits)
        if isinstance(node, LeafNode):
            return list(node.value)
        raise LeafNotFoundException(
            f"No leaf stored at path {path_to_str(bits)!r}",
            path=path_to_str(bits),
            found="absent" if node is None else type(node).__name__,
        )

    def get_node_hash(self, path: Sequence[bool]) -> bytes:
        """
        Hash of the node at path, or of the default subtree at that depth
        when nothing has been written below it.

        Raises:
            InvalidPathLengthException: If path is longer than height
        """
        bits = self._node_path(path)
        node = self.nodes.get(bits)
        if node is None:
            return self._zero_hashes[len(bits)]
        return node.hash(self.hasher)

    def get_sibling_hash(self, path: Sequence[bool]) -> bytes:
        """
        Hash of the node sharing path's parent, i.e. path with its
        last bit flipped.

        Raises:
            InvalidPathLengthException: If path is empty or longer than height
        """
        bits = self._node_path(path)
        if not bits:
            raise InvalidPathLengthException(
                "The root has no sibling; path must have at least 1 bit",
                expected=">= 1",
                actual=0,
            )
        return self.get_node_hash(bits[:-1] + (not bits[-1],))

    def get_root(self) -> bytes:
        return self.get_node_hash(())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, path: Sequence[bool], value: Sequence[int]) -> None:
        """
        Write value at a leaf and recompute every ancestor up to the root.

        Path and value are validated before anything is written, so a
        rejected call leaves the tree untouched.

        Raises:
            InvalidPathLengthException: If path is not exactly height bits
            InvalidLeafValueException: If value has the wrong width or
                contains non-field elements
        """
        bits = self._leaf_path(path)
        leaf = LeafNode(value=self._leaf_value(value))

        self.nodes[bits] = leaf

        current = bits
        while current:
            node_hash = self.get_node_hash(current)
            sibling_hash = self.get_sibling_hash(current)
            parent = current[:-1]
            if current[-1]:
                self.nodes[parent] = InnerNode(left=sibling_hash, right=node_hash)
            else:
                self.nodes[parent] = InnerNode(left=node_hash, right=sibling_hash)
            current = parent

        logger.debug(f"Updated leaf {path_to_str(bits)!r}, nodes={len(self.nodes)}")

    # ------------------------------------------------------------------
    # Proofs
    # ------------------------------------------------------------------

    def prove(self, path: Sequence[bool]) -> MerkleProof:
        """
        Inclusion proof for the leaf at path.

        Siblings run from the leaf level up to (not including) the root,
        so the proof has exactly height entries.

        Raises:
            InvalidPathLengthException: If path is not exactly height bits
        """
        current = self._leaf_path(path)
        siblings: list[bytes] = []
        while current:
            siblings.append(self.get_sibling_hash(current))
            current = current[:-1]
        return MerkleProof(siblings=tuple(siblings))


__all__ = ["SparseMerkleTree", "DEFAULT_LEAF_WIDTH"]
