"""
Module 01 - Errors and Canonical JSON Unit Tests
Tests for smt/schemas/errors.py and smt/schemas/canonical.py
"""
import pytest

from smt import schemas
from smt.schemas.canonical import canonical_equals, dumps_canonical, loads_canonical
from smt.schemas.errors import (
    CanonicalizationException,
    ErrorCodes,
    InvalidLeafValueException,
    InvalidPathLengthException,
    LeafNotFoundException,
    SmtError,
    SmtException,
)
from smt.schemas.versioning import (
    SCHEMA_VERSION,
    UnsupportedSchemaVersionError,
    assert_supported_schema_version,
)


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_all_derive_from_base(self):
        for exc in (
            InvalidPathLengthException("x"),
            LeafNotFoundException("x"),
            InvalidLeafValueException("x"),
        ):
            assert isinstance(exc, SmtException)
            assert exc.retryable is False

    def test_path_length_details(self):
        exc = InvalidPathLengthException("bad", expected="== 4", actual=3)

        assert exc.code == ErrorCodes.INVALID_PATH_LENGTH
        assert exc.details == {"expected": "== 4", "actual": 3}
        assert str(exc) == "bad"

    def test_leaf_not_found_details(self):
        exc = LeafNotFoundException("missing", path="0101", found="absent")

        assert exc.code == ErrorCodes.MISSING_OR_WRONG_VARIANT
        assert exc.details == {"path": "0101", "found": "absent"}

    def test_to_error_model(self):
        model = LeafNotFoundException("missing", path="01").to_error_model()

        assert isinstance(model, SmtError)
        assert model.code == ErrorCodes.MISSING_OR_WRONG_VARIANT
        assert model.details["path"] == "01"

    def test_model_to_exception(self):
        exc = SmtError(code=ErrorCodes.INVALID_LEAF_VALUE, message="m").to_exception()

        assert isinstance(exc, SmtException)
        assert exc.code == ErrorCodes.INVALID_LEAF_VALUE

    def test_repr(self):
        assert repr(InvalidPathLengthException("bad")) == (
            "InvalidPathLengthException(code='INVALID_PATH_LENGTH', message='bad')"
        )


class TestCanonicalJson:
    """Tests for dumps_canonical()."""

    def test_sorted_compact(self):
        assert dumps_canonical({"b": 2, "a": [1, True]}) == '{"a":[1,true],"b":2}'

    def test_bytes_as_hex(self):
        assert dumps_canonical({"h": b"\x01\xff"}) == '{"h":"0x01ff"}'

    def test_none_dropped(self):
        assert dumps_canonical({"a": None, "b": 1}) == '{"b":1}'

    def test_float_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({"a": 1.5})

    def test_unknown_type_rejected(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({"a": object()})

    def test_canonical_equals(self):
        assert canonical_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert not canonical_equals({"a": 1.5}, {"a": 1.5})

    def test_loads(self):
        assert loads_canonical('{"a":1}') == {"a": 1}


class TestVersioning:
    """Tests for the schema version check and package exports."""

    def test_supported_version_passes(self):
        assert_supported_schema_version(SCHEMA_VERSION)

    def test_unsupported_version_raises(self):
        with pytest.raises(UnsupportedSchemaVersionError, match="v2"):
            assert_supported_schema_version("v2")

    def test_exports_resolve(self):
        for name in schemas.__all__:
            assert hasattr(schemas, name), name

    def test_exports_limited_to_used_helpers(self):
        assert set(n for n in schemas.__all__ if "VERSION" in n.upper()) == {
            "SCHEMA_VERSION",
            "SUPPORTED_SCHEMA_VERSIONS",
            "UnsupportedSchemaVersionError",
            "assert_supported_schema_version",
        }
