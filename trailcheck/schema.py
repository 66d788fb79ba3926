"""
Policy binding for trailcheck.

Provides the Combinators bundle and custom_errors(), which checks a
caller-supplied error policy with trailcheck's own object validator before
binding every factory to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from .core import array_of, field_value, object_of
from .errors import STANDARD_ERRORS, ErrorPolicy
from .types import Predicate, Schema
from .validators import is_optional, label, required

logger = logging.getLogger(__name__)

POLICY_KEYS = ("handle_invalid", "handle_missing", "handle_unsupported")


@dataclass(frozen=True, slots=True)
class Combinators:
    """Every public factory, bound to one error policy."""

    policy: ErrorPolicy
    is_object_of: Callable[[Schema], Predicate]
    is_partial_object_of: Callable[[Schema], Predicate]
    is_array_of: Callable[[Predicate], Predicate]
    is_required: Callable[[Predicate], Predicate]
    is_optional: Callable[[Predicate], Predicate]
    label: Callable[[str, Predicate], Predicate]


def combinators_for(policy: ErrorPolicy) -> Combinators:
    """Bind the factories to an already-built policy. Does not check it."""
    return Combinators(
        policy=policy,
        is_object_of=object_of(True)(policy),
        is_partial_object_of=object_of(False)(policy),
        is_array_of=array_of(policy),
        is_required=required(policy),
        is_optional=is_optional,
        label=label,
    )


def _must_be_function(handler: Any) -> bool:
    if not callable(handler):
        raise TypeError("must be function")
    return True


is_function = required(STANDARD_ERRORS)(_must_be_function)

is_error_policy = object_of(True)(STANDARD_ERRORS)(
    {key: is_function for key in POLICY_KEYS}
)


def custom_errors(policy: Any) -> Combinators:
    """
    Bind every factory to a caller-supplied error policy.

    `policy` must carry exactly handle_invalid, handle_missing and
    handle_unsupported, each a zero-argument callable returning an exception.
    A mapping, an ErrorPolicy or any other object trailcheck can validate
    will do. A malformed policy is rejected with the standard errors, e.g.
    "handle_invalid -> missing" or "extra -> unsupported".

    Usage:
        strict = custom_errors({
            "handle_invalid": lambda: ValueError("bad value"),
            "handle_missing": lambda: KeyError("absent"),
            "handle_unsupported": lambda: ValueError("unexpected key"),
        })
        is_user = strict.is_object_of({"name": strict.is_required(is_string)})
    """
    is_error_policy(policy)
    handlers = {key: field_value(policy, key) for key in POLICY_KEYS}
    logger.debug(
        "Binding custom error policy: %s",
        ", ".join(f"{k}={getattr(v, '__qualname__', repr(v))}" for k, v in handlers.items()),
    )
    return combinators_for(ErrorPolicy(**handlers))
