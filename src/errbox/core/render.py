"""Human-readable rendering of annotated errors and boxes.

Output format of a single annotated error:

    <cause>
     +--> <message>
     |  @ <file>:<line> (<function>)
     +--> <message>
        @ <file>:<line> (<function>)

A box with more than one entry renders a header, then each entry under a
divider and an ordinal label. Call-site lines obey ``settings.show_stack``
and file names are trimmed with ``settings.trace_prefix``.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from errbox.foundation.config import ErrboxSettings

    from .stack import AnnotatedError

# Branch markers
_THIS = " +--"
_NEXT = " |  "
_EMPTY = "    "

DIVIDER = "-" * 28


def render_annotated(err: AnnotatedError, settings: ErrboxSettings) -> str:
    """Render cause followed by its annotation trail."""
    annotations = err.annotations
    if not annotations:
        return str(err.cause)

    buf = StringIO()
    buf.write(f"{err.cause}\n")
    last = len(annotations) - 1
    for i, anno in enumerate(annotations):
        delim = _THIS
        if anno.has_message:
            buf.write(f"{delim}> {anno.message}\n")
            delim = _NEXT if i < last else _EMPTY
        if settings.show_stack and anno.has_location:
            buf.write(f"{delim}@ {anno.location(settings.trace_prefix)}\n")
    return buf.getvalue()


def render_entries(entries: Sequence[AnnotatedError], settings: ErrboxSettings) -> str:
    """Render a snapshot of box entries."""
    match len(entries):
        case 0:
            return ""
        case 1:
            return render_annotated(entries[0], settings)

    buf = StringIO()
    buf.write(f"Got {len(entries)} errors:\n")
    for i, err in enumerate(entries, start=1):
        buf.write(f"{DIVIDER}\n")
        buf.write(f"# {i}\n")
        buf.write(render_annotated(err, settings))
        buf.write("\n")
    return buf.getvalue()
