"""
Primitive combinators for trailcheck.

is_required and is_optional decide what happens to absent values before
delegating to another predicate; label adds a named breadcrumb and hands the
validated value back.
"""

from __future__ import annotations

from typing import Any, Callable

from .errors import ErrorPolicy, with_path
from .types import MISSING, Predicate


def ensure_callable(predicate: Any, message: str = "predicate is not a function") -> None:
    """Fail fast on a malformed schema. Never routed through an error policy."""
    if not callable(predicate):
        raise TypeError(message)


def required(policy: ErrorPolicy) -> Callable[[Predicate], Predicate]:
    """
    Build is_required for a policy.

    Usage:
        is_string = required(STANDARD_ERRORS)(lambda s: isinstance(s, str))
        is_string("a")   # True
        is_string()      # raises "missing"
    """

    def is_required(predicate: Predicate) -> Predicate:
        ensure_callable(predicate)

        def check(value: Any = MISSING) -> Any:
            if value is MISSING:
                raise policy.handle_missing()
            return predicate(value)

        return check

    return is_required


def is_optional(predicate: Predicate) -> Predicate:
    """
    Accept MISSING and None without consulting `predicate`.

    Usage:
        nickname = is_optional(is_string)
        nickname(None)   # True
        nickname(3)      # whatever is_string(3) does
    """
    ensure_callable(predicate)

    def check(value: Any = MISSING) -> Any:
        if value is MISSING or value is None:
            return True
        return predicate(value)

    return check


def label(name: str, predicate: Predicate) -> Predicate:
    """
    Prefix failures with `name` and return the value itself on success.

    A falsy result yields False rather than raising, leaving the decision to
    the caller (or an enclosing validator).
    """
    ensure_callable(predicate)

    def check(value: Any = MISSING) -> Any:
        return with_path(name, lambda: value if predicate(value) else False)

    return check
