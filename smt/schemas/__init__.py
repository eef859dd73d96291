"""
Module 01 - Schemas & Errors
File: __init__.py

Purpose: Export the error taxonomy, version constants and canonical
serialization helpers.
"""

from .versioning import (
    SCHEMA_VERSION,
    SUPPORTED_SCHEMA_VERSIONS,
    UnsupportedSchemaVersionError,
    assert_supported_schema_version,
)

from .canonical import (
    CANONICAL_JSON_SEPARATORS,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    loads_canonical,
)

from .errors import (
    ErrorCodes,
    SmtError,
    SmtException,
    InvalidPathLengthException,
    LeafNotFoundException,
    InvalidLeafValueException,
    MerkleVerificationException,
    CanonicalizationException,
    ConfigurationException,
)

__all__ = [
    # Versioning
    "SCHEMA_VERSION",
    "SUPPORTED_SCHEMA_VERSIONS",
    "UnsupportedSchemaVersionError",
    "assert_supported_schema_version",
    # Canonical
    "CANONICAL_JSON_SEPARATORS",
    "canonical_equals",
    "canonicalize_value",
    "dumps_canonical",
    "loads_canonical",
    # Errors
    "ErrorCodes",
    "SmtError",
    "SmtException",
    "InvalidPathLengthException",
    "LeafNotFoundException",
    "InvalidLeafValueException",
    "MerkleVerificationException",
    "CanonicalizationException",
    "ConfigurationException",
]
