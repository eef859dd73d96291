"""
Core cryptographic capabilities.

Module 02 provides the hash and field capabilities injected into the tree.
"""
from .hashing import (
    sha256,
    encode_elements,
    Hasher,
    Sha256Hasher,
    Blake2bHasher,
    get_hasher,
    to_hex,
    from_hex,
)
from .field import (
    Field,
    GoldilocksField,
    get_field,
)

__all__ = [
    "sha256",
    "encode_elements",
    "Hasher",
    "Sha256Hasher",
    "Blake2bHasher",
    "get_hasher",
    "to_hex",
    "from_hex",
    "Field",
    "GoldilocksField",
    "get_field",
]
