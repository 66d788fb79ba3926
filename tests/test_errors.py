"""
Tests for error construction and path annotation.
"""

import pytest

from trailcheck import (
    STANDARD_ERRORS,
    ErrorKind,
    Index,
    ValidationError,
    annotate,
    message_of,
    root_cause,
    with_path,
)


class Halt(BaseException):
    pass


class TaggedError(Exception):
    def __init__(self, message: str, code: int):
        super().__init__(message)
        self.code = code


def _raise(err):
    def thunk():
        raise err

    return thunk


class TestStandardErrors:
    def test_messages(self):
        assert str(STANDARD_ERRORS.handle_invalid()) == "invalid"
        assert str(STANDARD_ERRORS.handle_missing()) == "missing"
        assert str(STANDARD_ERRORS.handle_unsupported()) == "unsupported"

    def test_kinds(self):
        assert STANDARD_ERRORS.handle_invalid().kind is ErrorKind.INVALID
        assert STANDARD_ERRORS.handle_missing().kind is ErrorKind.MISSING
        assert STANDARD_ERRORS.handle_unsupported().kind is ErrorKind.UNSUPPORTED

    def test_fresh_instance_per_call(self):
        assert STANDARD_ERRORS.handle_invalid() is not STANDARD_ERRORS.handle_invalid()

    def test_is_value_error(self):
        err = STANDARD_ERRORS.handle_missing()
        assert isinstance(err, ValueError)
        assert err.message == "missing"
        assert err.path == ()


class TestAnnotate:
    def test_prefixes_message(self):
        err = annotate(ValidationError(ErrorKind.INVALID), "name")
        assert str(err) == "name -> invalid"
        assert err.path == ("name",)

    def test_index_segment(self):
        err = annotate(ValidationError(ErrorKind.INVALID), Index(3))
        assert str(err) == "[3] -> invalid"
        assert err.path == (3,)

    def test_int_key_segment(self):
        err = annotate(ValidationError(ErrorKind.INVALID), 3)
        assert str(err) == "3 -> invalid"

    def test_key_error_message_unquoted(self):
        err = annotate(annotate(KeyError("absent"), "inner"), "outer")
        assert type(err) is KeyError
        assert err.args == ("outer -> inner -> absent",)
        assert message_of(err) == "outer -> inner -> absent"

    def test_c_level_message_falls_back_to_value_error(self):
        try:
            b"\xff".decode("ascii")
        except UnicodeDecodeError as original:
            err = annotate(original, "raw")
        assert type(err) is ValueError
        assert str(err).startswith("raw -> 'ascii' codec can't decode")
        assert err.path == ("raw",)

    def test_keeps_class_and_attributes(self):
        original = TaggedError("boom", code=42)
        err = annotate(original, "field")
        assert type(err) is TaggedError
        assert err.code == 42
        assert str(err) == "field -> boom"
        assert err is not original
        assert str(original) == "boom"

    def test_keeps_notes(self):
        original = ValueError("bad")
        original.add_note("context")
        err = annotate(original, "x")
        assert err.__notes__ == ["context"]

    def test_accumulates(self):
        err = ValidationError(ErrorKind.MISSING)
        for segment in ("inner", Index(0), "outer"):
            err = annotate(err, segment)
        assert str(err) == "outer -> [0] -> inner -> missing"
        assert err.path == ("outer", 0, "inner")
        assert err.kind is ErrorKind.MISSING


class TestWithPath:
    def test_returns_result_unchanged(self):
        sentinel = object()
        assert with_path("x", lambda: sentinel) is sentinel

    def test_reraises_annotated(self):
        with pytest.raises(ValidationError, match="^field -> unsupported$"):
            with_path("field", _raise(ValidationError(ErrorKind.UNSUPPORTED)))

    def test_chains_root_cause(self):
        original = TaggedError("root", code=1)
        with pytest.raises(TaggedError) as excinfo:
            with_path("a", lambda: with_path("b", _raise(original)))
        assert str(excinfo.value) == "a -> b -> root"
        assert root_cause(excinfo.value) is original

    def test_base_exceptions_pass_through(self):
        with pytest.raises(Halt) as excinfo:
            with_path("x", _raise(Halt()))
        assert excinfo.value.args == ()
