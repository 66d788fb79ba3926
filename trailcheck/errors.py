"""
Error construction and path annotation for trailcheck.

An ErrorPolicy decides which exception each failure kind raises. Every
composite validator runs its children through with_path(), so a failure deep
inside a structure surfaces as e.g. "order -> lines -> [2] -> sku -> invalid".
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, TypeVar

from .types import ErrorFactory, ErrorKind, Index, Path, Segment

T = TypeVar("T")

PATH_SEPARATOR = " -> "


class ValidationError(ValueError):
    """
    Error raised by the standard policy.

    The message starts as the bare kind ("invalid", "missing", "unsupported")
    and grows a path prefix at every nesting level it passes through.
    `path` holds the same breadcrumbs in structured form.
    """

    def __init__(self, kind: ErrorKind, message: str | None = None, path: Path = ()):
        super().__init__(message or kind.value)
        self.kind = kind
        self.path = path

    @property
    def message(self) -> str:
        return str(self)


@dataclass(frozen=True, slots=True)
class ErrorPolicy:
    """Constructors for the three failure kinds. Each returns a new exception."""

    handle_invalid: ErrorFactory
    handle_missing: ErrorFactory
    handle_unsupported: ErrorFactory


STANDARD_ERRORS = ErrorPolicy(
    handle_invalid=partial(ValidationError, ErrorKind.INVALID),
    handle_missing=partial(ValidationError, ErrorKind.MISSING),
    handle_unsupported=partial(ValidationError, ErrorKind.UNSUPPORTED),
)


def render_segment(segment: Segment) -> str:
    """Sequence indices render as [i], every other segment as str(segment)."""
    if isinstance(segment, Index):
        return f"[{int(segment)}]"
    return str(segment)


def message_of(err: BaseException) -> str:
    """
    The message an error was raised with.

    Single-argument errors report that argument verbatim, so a KeyError
    yields "absent" rather than its quoted str() form "'absent'".
    """
    if len(err.args) == 1:
        return str(err.args[0])
    return str(err)


def annotate(err: Exception, segment: Segment) -> Exception:
    """
    Return a copy of `err` whose message is prefixed with `segment`.

    The copy has the same class and every instance attribute of the original
    (kind markers, custom fields, notes). Its `path` gains `segment` in front.
    __init__ is not re-run, so exception classes with custom constructor
    signatures are copied as-is.

    Some built-in errors render from C-level fields instead of args
    (UnicodeDecodeError, UnicodeEncodeError). A copy of those would lose the
    path from its text, so they are replaced by a ValueError carrying the
    annotated message and the original's instance attributes.
    """
    message = f"{render_segment(segment)}{PATH_SEPARATOR}{message_of(err)}"
    cls = type(err)
    wrapped = cls.__new__(cls)
    wrapped.args = (message,)
    rendered = str(wrapped)
    if message not in rendered and rendered != repr(message):
        wrapped = ValueError(message)
    wrapped.__dict__.update(vars(err))
    wrapped.path = (segment, *getattr(err, "path", ()))
    return wrapped


def with_path(segment: Segment, thunk: Callable[[], T]) -> T:
    """
    Run `thunk`, re-raising any failure annotated with `segment`.

    The annotated error is chained to the one it replaces, so the innermost
    error is reachable through __cause__.
    """
    try:
        return thunk()
    except Exception as err:
        raise annotate(err, segment) from err


def root_cause(err: BaseException) -> BaseException:
    """Follow __cause__ links to the innermost error of a chain."""
    while err.__cause__ is not None:
        err = err.__cause__
    return err


def raise_at(segment: Segment, factory: ErrorFactory) -> Any:
    """Raise a fresh policy error already annotated with `segment`."""

    def fail() -> Any:
        raise factory()

    return with_path(segment, fail)
