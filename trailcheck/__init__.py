"""
trailcheck - composable structural validators with path-annotated errors.

Usage:
    from trailcheck import is_object_of, is_array_of, is_required, is_optional

    is_string = is_required(lambda s: isinstance(s, str))
    is_user = is_object_of({
        "name": is_string,
        "nickname": is_optional(is_string),
        "tags": is_array_of(is_string),
    })

    is_user({"name": "Ada", "tags": ["x", 1]})
    # ValidationError: tags -> [1] -> invalid
"""

from .core import array_of, object_of
from .errors import (
    STANDARD_ERRORS,
    ErrorPolicy,
    ValidationError,
    annotate,
    message_of,
    root_cause,
    with_path,
)
from .schema import Combinators, combinators_for, custom_errors
from .types import MISSING, ErrorKind, Index, Path, Predicate, Schema
from .validators import is_optional, label, required

_standard = combinators_for(STANDARD_ERRORS)

is_object_of = _standard.is_object_of
is_partial_object_of = _standard.is_partial_object_of
is_array_of = _standard.is_array_of
is_required = _standard.is_required

__all__ = [
    # Sentinels and types
    "MISSING",
    "Index",
    "ErrorKind",
    "Path",
    "Predicate",
    "Schema",
    # Errors
    "ValidationError",
    "ErrorPolicy",
    "STANDARD_ERRORS",
    "annotate",
    "message_of",
    "with_path",
    "root_cause",
    # Standard combinators
    "is_object_of",
    "is_partial_object_of",
    "is_array_of",
    "is_required",
    "is_optional",
    "label",
    # Policy binding
    "Combinators",
    "combinators_for",
    "custom_errors",
    # Factories
    "object_of",
    "array_of",
    "required",
]
