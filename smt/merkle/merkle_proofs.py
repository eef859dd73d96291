"""
Module 03 - Merkle Proofs
Inclusion proof object plus a reference verifier for callers.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- MerkleProof: ordered sibling hashes, leaf level first
- compute_root_from_proof: fold a leaf value up its sibling chain
- verify_merkle_proof: compare the folded root with a claimed root
- MerkleProver / MerkleVerifier: class-based convenience wrappers

Folding Rule:
At level i (0 = leaf level) bit i of the leaf index, counted from the
least significant bit, says whether the running hash is the left (0)
or right (1) child. With MSB-first paths this is path[height - 1 - i].
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from smt.crypto.hashing import Hasher, to_hex
from smt.merkle.nodes import index_to_path
from smt.schemas.errors import InvalidLeafValueException, MerkleVerificationException

if TYPE_CHECKING:
    from smt.merkle.sparse_tree import SparseMerkleTree


@dataclass(frozen=True)
class MerkleProof:
    """
    Inclusion proof for one leaf of a sparse Merkle tree.

    Attributes:
        siblings: Sibling hashes from the leaf level up to the level just
            below the root; one entry per level of the tree
    """
    siblings: tuple[bytes, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "siblings", tuple(self.siblings))

    def __len__(self) -> int:
        return len(self.siblings)

    @property
    def height(self) -> int:
        return len(self.siblings)


def compute_root_from_proof(
    hasher: Hasher,
    value: Sequence[int],
    index: int,
    proof: MerkleProof,
) -> bytes:
    """
    Recompute the root implied by a leaf value, its index and a proof.

    Args:
        hasher: Hash capability the tree was built with
        value: Claimed leaf value
        index: Leaf index (see path_to_index)
        proof: Sibling chain, leaf level first

    Returns:
        The root digest the proof commits to
    """
    current_hash = hasher.leaf_hash(value)
    current_index = index

    for sibling in proof.siblings:
        if current_index & 1:
            current_hash = hasher.two_to_one(sibling, current_hash)
        else:
            current_hash = hasher.two_to_one(current_hash, sibling)
        current_index >>= 1

    return current_hash


def verify_merkle_proof(
    hasher: Hasher,
    value: Sequence[int],
    index: int,
    root: bytes,
    proof: MerkleProof,
) -> bool:
    """
    Verify that value sits at index under root.

    Returns:
        True if the proof is valid, False otherwise (including an index
        that does not fit in the proof's height, or a value the hasher
        cannot encode)
    """
    if index < 0 or index >= 1 << len(proof.siblings):
        return False
    try:
        computed = compute_root_from_proof(hasher, value, index, proof)
    except InvalidLeafValueException:
        return False
    return computed == root


class MerkleProver:
    """
    Convenience class for generating proofs from a live tree.

    Example:
        >>> proof = MerkleProver.prove(tree, [False, True])
        >>> len(proof) == tree.height
        True
    """

    @staticmethod
    def prove(tree: "SparseMerkleTree", path: Sequence[bool]) -> MerkleProof:
        return tree.prove(path)

    @staticmethod
    def prove_index(tree: "SparseMerkleTree", index: int) -> MerkleProof:
        """Generate a proof for the leaf at an integer index."""
        return tree.prove(index_to_path(index, tree.height))


class MerkleVerifier:
    """Convenience class for verifying proofs."""

    @staticmethod
    def verify(
        hasher: Hasher,
        value: Sequence[int],
        index: int,
        root: bytes,
        proof: MerkleProof,
    ) -> bool:
        return verify_merkle_proof(hasher, value, index, root, proof)

    @staticmethod
    def verify_or_raise(
        hasher: Hasher,
        value: Sequence[int],
        index: int,
        root: bytes,
        proof: MerkleProof,
    ) -> None:
        """
        Verify a proof, raising on failure.

        Raises:
            MerkleVerificationException: If the proof does not reproduce root
        """
        if not verify_merkle_proof(hasher, value, index, root, proof):
            raise MerkleVerificationException(
                f"Proof does not reproduce root {to_hex(root)}",
                leaf_index=index,
                details={"height": len(proof.siblings)},
            )


__all__ = [
    "MerkleProof",
    "compute_root_from_proof",
    "verify_merkle_proof",
    "MerkleProver",
    "MerkleVerifier",
]
