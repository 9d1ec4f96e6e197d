"""Box: a thread-safe, ordered collection of annotated errors.

A Box is itself an exception, so it can be returned or raised wherever a
single error is expected. Entries are always AnnotatedError instances; pushing
or appending a Box flattens it, so boxes never nest.

    >>> box = Box()
    >>> box.push_if(ValueError("bad stuff happened"), "because we were careless")
    True
    >>> box.push_if(None, "nothing to see")
    False

Every read and write takes the box lock. The lock is never held while
formatting caller arguments or rendering causes; those work on snapshots.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from errbox.foundation.config import get_settings

from .render import render_entries
from .stack import AnnotatedError, capture_site, with_stack

if TYPE_CHECKING:
    from errbox.foundation.config import ErrboxSettings

    from .types import Annotation

logger = logging.getLogger("errbox.box")


class Box(Exception):
    """Mutex-guarded ordered collection of AnnotatedError entries."""

    def __init__(self) -> None:
        super().__init__()
        self._lock = threading.Lock()
        self._entries: list[AnnotatedError] = []

    # ─── Pushing ─────────────────────────────────────────────────────────

    def push_if(self, err: BaseException | None, message: str = "", *args: object) -> bool:
        """Annotate and store err, returning True if err was not None.

        Storing is skipped when err is the very entry already at the tail, so
        re-pushing the last error only extends its annotation trail.
        Use push_if_err to get the annotated error back.
        """
        if err is None:
            return False
        self._push(err, capture_site(message, args))
        return True

    def push_if_err(self, err: BaseException | None, message: str = "", *args: object) -> BaseException | None:
        """Same as push_if, but return the annotated error (None if err was None)."""
        if err is None:
            return None
        return self._push(err, capture_site(message, args))

    def _push(self, err: BaseException, annotation: Annotation) -> BaseException:
        match err:
            case Box():
                err.annotate_all(annotation)
                if err is not self:
                    self.extend(err.snapshot())
                return err
            case _:
                this = with_stack(err)
                this.add_annotation(annotation)
                self.append_entry(this)
                return this

    # ─── Entry access (all under the lock) ───────────────────────────────

    def append_entry(self, entry: AnnotatedError) -> bool:
        """Append entry unless it is the current last entry. Returns True if stored."""
        with self._lock:
            if self._entries and self._entries[-1] is entry:
                return False
            self._entries.append(entry)
            return True

    def extend(self, entries: list[AnnotatedError]) -> None:
        with self._lock:
            self._entries.extend(entries)

    def annotate_all(self, annotation: Annotation) -> None:
        """Attach the same annotation to every entry, in place."""
        with self._lock:
            for entry in self._entries:
                entry.add_annotation(annotation)

    def snapshot(self) -> list[AnnotatedError]:
        """Copy of the entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def first(self) -> AnnotatedError | None:
        with self._lock:
            return self._entries[0] if self._entries else None

    def last(self) -> AnnotatedError | None:
        """Most recently stored entry, or None for an empty box."""
        with self._lock:
            return self._entries[-1] if self._entries else None

    # ─── Presentation ────────────────────────────────────────────────────

    def render(self, settings: ErrboxSettings | None = None) -> str:
        return render_entries(self.snapshot(), settings or get_settings())

    def to_dict(self) -> dict[str, object]:
        entries = self.snapshot()
        return {"count": len(entries), "errors": [e.to_dict() for e in entries]}

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        with self._lock:
            n = len(self._entries)
        return f"Box({n} errors)"


def new_box() -> Box:
    """Return a new, empty Box."""
    return Box()


def as_box(err: BaseException | None) -> Box:
    """Coerce err to a Box: None gives a new box, a Box is kept, anything else seeds a new box."""
    match err:
        case None:
            return Box()
        case Box():
            return err
        case _:
            box = Box()
            box.append_entry(with_stack(err))
            logger.debug("boxed %s as first entry", type(err).__name__)
            return box
