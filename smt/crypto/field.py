"""
Module 02 - Field Capability
Field elements that make up leaf values.

The tree only needs two things from a field: a canonical zero element
(to build the default leaf) and a way to validate incoming elements.
"""
from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from smt.schemas.errors import ConfigurationException, InvalidLeafValueException


class Field(ABC):
    """Field capability used by SparseMerkleTree."""

    name: str = "abstract"

    @property
    @abstractmethod
    def order(self) -> int:
        """Number of elements in the field."""

    def zero(self) -> int:
        """Canonical default element."""
        return 0

    @abstractmethod
    def validate(self, element: object) -> int:
        """
        Return element as a canonical field element.

        Raises:
            InvalidLeafValueException: If element is not a member of the field
        """

    def rand_vec(self, n: int, rng: Optional[random.Random] = None) -> list[int]:
        """Sample n uniformly random elements."""
        rng = rng or random.Random()
        return [rng.randrange(self.order) for _ in range(n)]


class GoldilocksField(Field):
    """Prime field of order 2^64 - 2^32 + 1."""

    name = "goldilocks"
    ORDER: int = 2**64 - 2**32 + 1

    @property
    def order(self) -> int:
        return self.ORDER

    def validate(self, element: object) -> int:
        # bool is an int subclass but never a field element
        if isinstance(element, bool) or not isinstance(element, int):
            raise InvalidLeafValueException(
                f"Field element must be an int, got {type(element).__name__}",
                details={"field": self.name},
            )
        if not 0 <= element < self.ORDER:
            raise InvalidLeafValueException(
                f"Field element {element} outside [0, {self.ORDER})",
                details={"field": self.name, "element": str(element)},
            )
        return element

    def __repr__(self) -> str:
        return "GoldilocksField()"


_FIELDS: dict[str, type[Field]] = {
    GoldilocksField.name: GoldilocksField,
}


def get_field(name: str) -> Field:
    """
    Instantiate a field by its configured name.

    Raises:
        ConfigurationException: If no field is registered under name
    """
    try:
        return _FIELDS[name.lower()]()
    except KeyError:
        raise ConfigurationException(
            f"Unknown field: {name!r}. Available: {sorted(_FIELDS)}",
            setting="field",
        ) from None


__all__ = [
    "Field",
    "GoldilocksField",
    "get_field",
]
