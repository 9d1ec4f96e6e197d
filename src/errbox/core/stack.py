"""Annotated errors: an exception plus the trail of call sites it travelled through.

An AnnotatedError wraps exactly one cause. Annotating it again extends its
trail in place, so annotated errors never nest:

    >>> err = annotate(ValueError("bang"), "with num %d", 10)
    >>> err = annotate(err, "with string: %s", "recombobulator")
    >>> print(err)
    bang
     +--> with num 10
     |  @ app/main.py:14 (do_something)
     +--> with string: recombobulator
        @ app/main.py:21 (main)

Instances carry no lock. Sharing one AnnotatedError between threads that
annotate it concurrently needs external synchronization.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from typing import TYPE_CHECKING

from errbox.foundation.config import get_settings, to_slash

from .render import render_annotated
from .types import Annotation, FieldMap

if TYPE_CHECKING:
    from errbox.foundation.config import ErrboxSettings

logger = logging.getLogger("errbox.stack")


class AnnotatedError(Exception):
    """Exception wrapping a cause with an ordered list of call-site annotations.

    The cause is fixed at construction and also exposed as ``__cause__`` so
    standard traceback printing shows the original exception.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self._cause = cause
        self._annotations: list[Annotation] = []
        self._fields: FieldMap | None = None
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def annotations(self) -> tuple[Annotation, ...]:
        """Snapshot of the annotation trail, oldest first."""
        return tuple(self._annotations)

    def add_annotation(self, annotation: Annotation) -> None:
        self._annotations.append(annotation)

    def unwrap(self) -> BaseException:
        """Single-level unwrap: the wrapped cause."""
        return self._cause

    # ─── Side-channel fields ─────────────────────────────────────────────

    def fields(self) -> FieldMap:
        """Mutable map for out-of-band data that is never rendered.

        Example:
            >>> stacked = with_stack(err)
            >>> stacked.fields()["what"] = "thingy"
            >>> stacked.string_field("what")
            'thingy'
        """
        if self._fields is None:
            self._fields = {}
        return self._fields

    def string_field(self, name: str) -> str:
        """Return field ``name`` if it holds a str, else ``""``."""
        value = self.fields().get(name)
        return value if isinstance(value, str) else ""

    # ─── Presentation ────────────────────────────────────────────────────

    def render(self, settings: ErrboxSettings | None = None) -> str:
        return render_annotated(self, settings or get_settings())

    def to_dict(self) -> dict[str, object]:
        """JSON-ready snapshot: cause text and type, annotation trail, fields."""
        return {
            "cause": str(self._cause),
            "cause_type": type(self._cause).__name__,
            "annotations": [a.model_dump() for a in self._annotations],
            "fields": dict(self._fields or {}),
        }

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"AnnotatedError({self._cause!r}, annotations={len(self._annotations)})"


def with_stack(err: BaseException | None) -> AnnotatedError | None:
    """Coerce err to an AnnotatedError.

    None stays None, an AnnotatedError is returned as is (same object), any
    other exception is wrapped with an empty annotation trail.
    """
    match err:
        case None:
            return None
        case AnnotatedError():
            return err
        case _:
            return AnnotatedError(err)


def capture_site(message: str, args: tuple[object, ...], stacklevel: int = 1) -> Annotation:
    """Build an annotation for the caller of the public function invoking this.

    ``stacklevel`` follows the logging convention: 1 records the immediate
    caller of annotate()/push_if()/push_if_err(), 2 its caller, and so on.
    When the frame is unavailable the annotation keeps its message and has
    ``line == 0``, which the renderer treats as "no location".
    """
    text = format_message(message, args)
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return Annotation(message=text)
    code = frame.f_code
    return Annotation(
        message=text,
        file=to_slash(code.co_filename),
        function=code.co_qualname,
        line=frame.f_lineno or 0,
    )


def format_message(message: str, args: tuple[object, ...]) -> str:
    """Apply printf-style args. A lone mapping argument fills named placeholders.

    A template that does not match its args never raises; the args are
    appended to the raw template instead.
    """
    if not args:
        return message
    values = args[0] if len(args) == 1 and isinstance(args[0], Mapping) and args[0] else args
    try:
        return message % values
    except (TypeError, ValueError, KeyError) as exc:
        logger.debug("bad annotation template %r: %s", message, exc)
        return f"{message} (args: {', '.join(map(repr, args))})"
