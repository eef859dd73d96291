"""
Module 01 - Schemas & Errors
File: errors.py

Purpose: Standard error taxonomy for the sparse Merkle tree.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the package."""

    # Path & Node Errors
    INVALID_PATH_LENGTH = "INVALID_PATH_LENGTH"
    MISSING_OR_WRONG_VARIANT = "MISSING_OR_WRONG_VARIANT"
    INVALID_LEAF_VALUE = "INVALID_LEAF_VALUE"

    # Merkle & Commitment Errors
    MERKLE_PROOF_INVALID = "MERKLE_PROOF_INVALID"

    # Schema & Serialization Errors
    SCHEMA_VALIDATION_ERROR = "SCHEMA_VALIDATION_ERROR"
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Configuration Errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SmtError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (logs, proof
    transport responses) rather than as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_PATH_LENGTH],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "SmtException":
        """Convert this error model to a raised exception."""
        return SmtException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SmtException(Exception):
    """
    Base exception for all sparse Merkle tree errors.

    This exception carries structured error information and can be
    converted to/from SmtError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "SMT_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> SmtError:
        """Convert this exception to a SmtError model."""
        return SmtError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidPathLengthException(SmtException):
    """Exception raised when a path violates a length precondition."""

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        actual: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if expected is not None:
            full_details["expected"] = expected
        if actual is not None:
            full_details["actual"] = actual
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_PATH_LENGTH,
            details=full_details,
            retryable=False,
        )


class LeafNotFoundException(SmtException):
    """Exception raised when a leaf path is absent or holds an inner node."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        found: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path is not None:
            full_details["path"] = path
        if found is not None:
            full_details["found"] = found
        super().__init__(
            message=message,
            code=ErrorCodes.MISSING_OR_WRONG_VARIANT,
            details=full_details,
            retryable=False,
        )


class InvalidLeafValueException(SmtException):
    """Exception raised when a leaf value has the wrong width or bad elements."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_LEAF_VALUE,
            details=details,
            retryable=False,
        )


class MerkleVerificationException(SmtException):
    """Exception raised when Merkle proof verification fails."""

    def __init__(
        self,
        message: str,
        leaf_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_index is not None:
            full_details["leaf_index"] = leaf_index
        super().__init__(
            message=message,
            code=ErrorCodes.MERKLE_PROOF_INVALID,
            details=full_details,
            retryable=False,
        )


class CanonicalizationException(SmtException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ConfigurationException(SmtException):
    """Exception raised for unknown capabilities or malformed settings."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if setting:
            full_details["setting"] = setting
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIGURATION_ERROR,
            details=full_details,
            retryable=False,
        )
