"""
Sparse Merkle tree over fixed-height bit paths with field-element leaves.
"""

__version__ = "0.1.0"

from smt.crypto import (
    Hasher,
    Sha256Hasher,
    Blake2bHasher,
    Field,
    GoldilocksField,
)
from smt.merkle import (
    SparseMerkleTree,
    MerkleProof,
    ProofPayload,
    verify_merkle_proof,
    index_to_path,
    path_to_index,
)
from smt.schemas.errors import (
    SmtException,
    InvalidPathLengthException,
    LeafNotFoundException,
)

__all__ = [
    "Hasher",
    "Sha256Hasher",
    "Blake2bHasher",
    "Field",
    "GoldilocksField",
    "SparseMerkleTree",
    "MerkleProof",
    "ProofPayload",
    "verify_merkle_proof",
    "index_to_path",
    "path_to_index",
    "SmtException",
    "InvalidPathLengthException",
    "LeafNotFoundException",
]
