"""
Module 01 - Schemas & Errors
File: versioning.py

Purpose: Centralize proof transport version constants.
No imports from other schema files to avoid circular dependencies.
"""

# Current proof payload schema version
SCHEMA_VERSION: str = "v1"

SUPPORTED_SCHEMA_VERSIONS: frozenset[str] = frozenset({"v1"})


class UnsupportedSchemaVersionError(ValueError):
    """Raised when an unsupported schema version is encountered."""

    def __init__(self, version: str, supported: frozenset[str] | None = None) -> None:
        self.version = version
        self.supported = supported or SUPPORTED_SCHEMA_VERSIONS
        super().__init__(
            f"Unsupported schema version: '{version}'. "
            f"Supported versions: {sorted(self.supported)}"
        )


def assert_supported_schema_version(version: str) -> None:
    """
    Validate that the given schema version is supported.

    Raises:
        UnsupportedSchemaVersionError: If the version is not supported.
    """
    if version not in SUPPORTED_SCHEMA_VERSIONS:
        raise UnsupportedSchemaVersionError(version)
