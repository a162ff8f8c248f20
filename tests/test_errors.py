import pytest

from apecore.common import SRC_POS_INVALID, SrcPos
from apecore.errors import (
    ERROR_MESSAGE_MAX_LENGTH,
    ERRORS_MAX_COUNT,
    ErrorList,
    ErrorType,
)


@pytest.mark.parametrize(
    "error_type, name",
    [
        (ErrorType.PARSING, "PARSING"),
        (ErrorType.COMPILATION, "COMPILATION"),
        (ErrorType.RUNTIME, "RUNTIME"),
        (ErrorType.TIMEOUT, "TIMEOUT"),
        (ErrorType.ALLOCATION, "ALLOCATION"),
        (ErrorType.USER, "USER"),
        (ErrorType.NONE, "INVALID"),
    ],
)
def test_error_type_names(error_type, name):
    errors = ErrorList()
    errors.add(error_type, SRC_POS_INVALID, "message")
    assert str(errors.last().type) == name


def test_add_and_read_back():
    errors = ErrorList()
    pos = SrcPos(None, 3, 7)
    errors.add(ErrorType.COMPILATION, pos, "Nothing to return from")
    assert errors.has_errors()
    assert len(errors) == 1
    err = errors[0]
    assert err.type is ErrorType.COMPILATION
    assert err.message == "Nothing to return from"
    assert err.pos == pos
    assert err.traceback is None


def test_empty_list():
    errors = ErrorList()
    assert not errors.has_errors()
    assert errors.last() is None
    with pytest.raises(IndexError):
        errors[0]


def test_addf_formats_message():
    errors = ErrorList()
    errors.addf(ErrorType.COMPILATION, SRC_POS_INVALID,
                'Module "%s" was already imported', "math")
    assert errors.last().message == 'Module "math" was already imported'


def test_limit_drops_extra_errors():
    errors = ErrorList()
    for n in range(ERRORS_MAX_COUNT + 4):
        errors.add(ErrorType.RUNTIME, SRC_POS_INVALID, str(n))
    assert len(errors) == ERRORS_MAX_COUNT
    assert errors.last().message == str(ERRORS_MAX_COUNT - 1)


def test_long_message_truncated():
    errors = ErrorList()
    errors.add(ErrorType.USER, SRC_POS_INVALID, "x" * 1000)
    assert len(errors.last().message) == ERROR_MESSAGE_MAX_LENGTH - 1


def test_clear_and_iterate():
    errors = ErrorList()
    errors.add(ErrorType.PARSING, SRC_POS_INVALID, "a")
    errors.add(ErrorType.RUNTIME, SRC_POS_INVALID, "b")
    assert [e.message for e in errors] == ["a", "b"]
    errors.clear()
    assert len(errors) == 0
    assert not errors.has_errors()