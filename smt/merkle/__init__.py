"""
Module 03 - Sparse Merkle Tree
Fixed-height sparse Merkle tree with eager ancestor propagation.

Owner: Protocol/Crypto Engineer
Module ID: M03

This module provides:
- SparseMerkleTree: update / get_leaf / get_node_hash / get_sibling_hash /
  get_root / prove
- ZeroHashCache: default-subtree hashes per depth
- MerkleProof and a reference verifier
- ProofPayload: serializable proof for transport

Usage:
    from smt.merkle import (
        SparseMerkleTree, index_to_path, path_to_index, verify_merkle_proof,
    )

    tree = SparseMerkleTree(height=8)
    path = index_to_path(5, 8)
    tree.update(path, [1, 2, 3, 4])
    proof = tree.prove(path)
    assert verify_merkle_proof(
        tree.hasher, [1, 2, 3, 4], path_to_index(path), tree.get_root(), proof
    )
"""
from .nodes import (
    Path,
    Node,
    LeafNode,
    InnerNode,
    normalize_path,
    path_to_str,
    str_to_path,
    path_to_index,
    index_to_path,
)

from .zero_hashes import ZeroHashCache

from .merkle_proofs import (
    MerkleProof,
    compute_root_from_proof,
    verify_merkle_proof,
    MerkleProver,
    MerkleVerifier,
)

from .sparse_tree import SparseMerkleTree, DEFAULT_LEAF_WIDTH

from .payload import ProofPayload


__all__ = [
    # Paths & nodes
    "Path",
    "Node",
    "LeafNode",
    "InnerNode",
    "normalize_path",
    "path_to_str",
    "str_to_path",
    "path_to_index",
    "index_to_path",
    # Tree
    "ZeroHashCache",
    "SparseMerkleTree",
    "DEFAULT_LEAF_WIDTH",
    # Proofs
    "MerkleProof",
    "compute_root_from_proof",
    "verify_merkle_proof",
    "MerkleProver",
    "MerkleVerifier",
    "ProofPayload",
]
