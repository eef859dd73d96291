"""
Module 04 - Proof Transport
Self-contained, serializable inclusion proof for handing to a verifier.

Purpose: Bundle everything an external verifier needs (path, value,
root, siblings) into one validated Pydantic model with a canonical JSON
form. Digests travel as 0x-prefixed hex.
"""
from __future__ import annotations

from typing import Annotated, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from smt.crypto.hashing import Hasher, from_hex, to_hex
from smt.merkle.merkle_proofs import MerkleProof, verify_merkle_proof
from smt.merkle.nodes import normalize_path, path_to_index, path_to_str, str_to_path
from smt.merkle.sparse_tree import SparseMerkleTree
from smt.schemas.canonical import dumps_canonical, loads_canonical
from smt.schemas.errors import LeafNotFoundException
from smt.schemas.versioning import SCHEMA_VERSION, assert_supported_schema_version


class ProofPayload(BaseModel):
    """
    Inclusion proof together with the claim it supports.

    A leaf that was never written is proven with the tree's default
    value, which makes the same payload usable as a non-membership proof.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    schema_version: str = Field(default=SCHEMA_VERSION)
    height: int = Field(..., ge=0, description="Height of the tree the proof is for")
    path: str = Field(..., pattern=r"^[01]*$", description="Leaf path, root first, as '0'/'1'")
    value: list[Annotated[int, Field(ge=0, lt=2**64)]] = Field(
        ..., min_length=1, description="Claimed leaf value"
    )
    root: str = Field(..., description="Committed root, 0x hex")
    siblings: list[str] = Field(default_factory=list, description="Sibling hashes, leaf level first")

    @field_validator("schema_version")
    @classmethod
    def _check_version(cls, v: str) -> str:
        assert_supported_schema_version(v)
        return v

    @field_validator("root")
    @classmethod
    def _check_root(cls, v: str) -> str:
        from_hex(v)
        return v

    @field_validator("siblings")
    @classmethod
    def _check_siblings(cls, v: list[str]) -> list[str]:
        for item in v:
            from_hex(item)
        return v

    @model_validator(mode="after")
    def _check_lengths(self) -> "ProofPayload":
        if len(self.path) != self.height:
            raise ValueError(
                f"path has {len(self.path)} bits but height is {self.height}"
            )
        if len(self.siblings) != self.height:
            raise ValueError(
                f"proof has {len(self.siblings)} siblings but height is {self.height}"
            )
        return self

    @classmethod
    def from_tree(cls, tree: SparseMerkleTree, path: Sequence[bool]) -> "ProofPayload":
        """Capture a proof for path against the tree's current root."""
        bits = normalize_path(path)
        proof = tree.prove(bits)
        try:
            value = tree.get_leaf(bits)
        except LeafNotFoundException as e:
            if e.details.get("found") != "absent":
                raise
            value = tree.default_value()
        return cls(
            height=tree.height,
            path=path_to_str(bits),
            value=value,
            root=to_hex(tree.get_root()),
            siblings=[to_hex(s) for s in proof.siblings],
        )

    @property
    def index(self) -> int:
        return path_to_index(str_to_path(self.path))

    def to_proof(self) -> MerkleProof:
        return MerkleProof(siblings=[from_hex(s) for s in self.siblings])

    def verify(self, hasher: Hasher) -> bool:
        """Check the proof reproduces the claimed root under hasher."""
        return verify_merkle_proof(
            hasher,
            self.value,
            self.index,
            from_hex(self.root),
            self.to_proof(),
        )

    def to_json(self) -> str:
        return dumps_canonical(self)

    @classmethod
    def from_json(cls, data: str) -> "ProofPayload":
        return cls.model_validate(loads_canonical(data))


__all__ = ["ProofPayload"]
