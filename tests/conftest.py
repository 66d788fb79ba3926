from typing import Any

import pytest

from trailcheck import (
    is_array_of,
    is_optional,
    is_partial_object_of,
    is_required,
)


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_num(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@pytest.fixture(scope="function")
def is_string():
    return is_required(_is_str)


@pytest.fixture(scope="function")
def is_number():
    return is_required(_is_num)


@pytest.fixture(scope="function")
def is_address(is_string, is_number):
    return is_partial_object_of({"street": is_string, "houseNumber": is_number})


@pytest.fixture(scope="function")
def is_my_type(is_string, is_number, is_address):
    return is_partial_object_of(
        {
            "foo": is_optional(is_string),
            "bar": is_number,
            "arr": is_array_of(is_number),
            "addresses": is_optional(is_array_of(is_address)),
        }
    )


@pytest.fixture(scope="function")
def is_my_other_type(is_string, is_my_type):
    return is_partial_object_of({"baz": is_string, "myType": is_my_type})


@pytest.fixture(scope="function")
def valid_other_type() -> dict[str, Any]:
    return {"baz": "dop", "myType": {"foo": "3", "bar": 3, "arr": [3, 3]}}
