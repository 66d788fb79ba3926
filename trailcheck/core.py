"""
Object and array validator factories for trailcheck.

Both factories are curried over an ErrorPolicy so the same construction code
serves the standard errors and any custom policy.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import fields, is_dataclass
from typing import Any, Callable

from pydantic import BaseModel

from .errors import ErrorPolicy, raise_at, with_path
from .types import MISSING, Index, Predicate, Schema
from .validators import ensure_callable

_TEXT_TYPES = (str, bytes, bytearray)


def own_keys(obj: Any) -> list[str] | None:
    """
    Keys an object subject carries, in its own order.

    Returns None for anything that is not an object subject:
        Mapping          -> its keys
        BaseModel        -> declared fields, then extras
        BaseException    -> non-dunder instance attributes
        dataclass object -> its fields
    """
    if isinstance(obj, Mapping):
        return list(obj.keys())
    if isinstance(obj, BaseModel):
        return [*type(obj).model_fields, *(obj.model_extra or {})]
    if isinstance(obj, BaseException):
        return [k for k in vars(obj) if not k.startswith("__")]
    if is_dataclass(obj) and not isinstance(obj, type):
        return [f.name for f in fields(obj)]
    return None


def field_value(obj: Any, key: str) -> Any:
    """
    Read `key` from an object subject, MISSING when absent.

    Exceptions expose their message under "message" even though it is not
    one of their own keys.
    """
    if isinstance(obj, Mapping):
        return obj.get(key, MISSING)
    if isinstance(obj, BaseException):
        attrs = vars(obj)
        if key in attrs:
            return attrs[key]
        if key == "message":
            return str(obj)
        return MISSING
    if key in own_keys(obj):
        return getattr(obj, key)
    return MISSING


def is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def _checked(predicate: Predicate, value: Any, policy: ErrorPolicy) -> Callable[[], bool]:
    """Thunk running `predicate`, turning an exact False into handle_invalid."""

    def run() -> bool:
        if predicate(value) is False:
            raise policy.handle_invalid()
        return True

    return run


def object_of(strict: bool) -> Callable[[ErrorPolicy], Callable[[Schema], Predicate]]:
    """
    Object validator factory.

    strict=True rejects keys the schema does not name; strict=False ignores
    them. Unknown keys are reported in the subject's key order, schema
    failures in the schema's order, and the first failure wins.

    Usage:
        is_point = object_of(True)(STANDARD_ERRORS)({"x": is_number, "y": is_number})
        is_point({"x": 1, "y": 2})          # True
        is_point({"x": 1})                  # raises "y -> missing"
        is_point({"x": 1, "y": 2, "z": 3})  # raises "z -> unsupported"
    """

    def bind(policy: ErrorPolicy) -> Callable[[Schema], Predicate]:
        def build(schema: Schema) -> Predicate:
            if not isinstance(schema, Mapping):
                raise TypeError("schema must be a mapping")
            predicates = dict(schema)
            for key, predicate in predicates.items():
                ensure_callable(predicate, f"predicate for {key} is not a function")

            def check(obj: Any = MISSING) -> bool:
                if obj is MISSING:
                    raise policy.handle_missing()
                keys = own_keys(obj)
                if keys is None:
                    raise policy.handle_invalid()

                if strict:
                    for key in keys:
                        if key not in predicates:
                            raise_at(key, policy.handle_unsupported)

                for key, predicate in predicates.items():
                    with_path(key, _checked(predicate, field_value(obj, key), policy))

                return True

            return check

        return build

    return bind


def array_of(policy: ErrorPolicy) -> Callable[[Predicate], Predicate]:
    """
    Array validator factory.

    Every element goes through the same predicate; failures are prefixed
    with the element's index as "[i]".
    """

    def build(predicate: Predicate) -> Predicate:
        ensure_callable(predicate)

        def check(arr: Any = MISSING) -> bool:
            if arr is MISSING:
                raise policy.handle_missing()
            if not is_sequence(arr):
                raise policy.handle_invalid()

            for i, item in enumerate(arr):
                with_path(Index(i), _checked(predicate, item, policy))

            return True

        return check

    return build
