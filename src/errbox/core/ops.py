"""Free functions over the three error shapes: plain, annotated and boxed.

Each function switches explicitly on the shape of its argument, and each
accepts None (meaning "no error") without raising:

    >>> err = None
    >>> err = append(err, do_something_careless())
    >>> err = append(err, do_something_ok())  # returns None, nothing appended
    >>> contains(err, SENTINEL)
    True
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errbox.foundation.config import get_settings

from .box import Box, as_box
from .stack import AnnotatedError, capture_site, with_stack
from .types import ErrorShape

if TYPE_CHECKING:
    from errbox.foundation.config import ErrboxSettings

logger = logging.getLogger("errbox.ops")


def shape_of(err: BaseException | None) -> ErrorShape:
    """Discriminate err into one of the closed set of shapes."""
    match err:
        case None:
            return ErrorShape.NIL
        case Box():
            return ErrorShape.BOX
        case AnnotatedError():
            return ErrorShape.ANNOTATED
        case _:
            return ErrorShape.PLAIN


def annotate(err: BaseException | None, message: str = "", *args: object, stacklevel: int = 1) -> BaseException | None:
    """Attach a message and the caller's location to err.

    Repeated calls on the same error extend its existing trail. Annotating a
    Box annotates every entry (one shared annotation) and returns the box.
    ``message`` is a printf-style template filled with ``args``; an empty
    message records the location only.

    ``stacklevel`` lets wrapper helpers attribute the annotation to their own
    caller, as with ``logging``.
    """
    match err:
        case None:
            return None
        case Box():
            err.annotate_all(capture_site(message, args, stacklevel))
            return err
        case _:
            this = with_stack(err)
            this.add_annotation(capture_site(message, args, stacklevel))
            return this


def append(dest: BaseException | None, err: BaseException | None) -> BaseException | None:
    """Append err to dest, coercing dest to a Box, and return the box.

    If err is None, dest is returned untouched and no box is allocated.
    Appending a Box flattens its entries into dest in order.
    """
    if err is None:
        return dest
    box = as_box(dest)
    match err:
        case Box():
            entries = err.snapshot()
            box.extend(entries)
            logger.debug("flattened %d boxed errors", len(entries))
        case _:
            box.append_entry(with_stack(err))
    return box


def errors(err: BaseException | None) -> list[BaseException]:
    """List of errors held by err: box entries (a copy), [err], or [] for None."""
    match err:
        case None:
            return []
        case Box():
            return list(err.snapshot())
        case _:
            return [err]


def cause(err: BaseException | None) -> BaseException | None:
    """The original error, one level down.

    Annotated errors give their stored cause, boxes the cause of their first
    entry (None when empty), plain errors themselves.
    """
    match err:
        case None:
            return None
        case AnnotatedError():
            return err.cause
        case Box():
            first = err.first()
            return cause(first) if first is not None else None
        case _:
            return err


def unwrap(err: BaseException | None) -> BaseException | None:
    """Single step along the wrap chain. Boxes do not unwrap; plain errors follow ``__cause__``."""
    match err:
        case None | Box():
            return None
        case AnnotatedError():
            return err.cause
        case _:
            return err.__cause__


def is_error(err: BaseException | None, target: BaseException | type[BaseException] | None) -> bool:
    """Report whether target is err or anywhere down its wrap chain.

    An exception instance matches by identity; an exception class matches
    any instance of it.
    """
    if target is None:
        return err is None
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if err is target or (isinstance(target, type) and isinstance(err, target)):
            return True
        seen.add(id(err))
        err = unwrap(err)
    return False


def contains(err: BaseException | None, target: BaseException | type[BaseException] | None) -> bool:
    """Like is_error, but looks inside every entry when err is a Box."""
    match err:
        case Box():
            return any(is_error(entry, target) for entry in err.snapshot())
        case _:
            return is_error(err, target)


def render(err: BaseException | None, settings: ErrboxSettings | None = None) -> str:
    """Render any error shape; None renders as an empty string."""
    match err:
        case None:
            return ""
        case Box() | AnnotatedError():
            return err.render(settings or get_settings())
        case _:
            return str(err)
