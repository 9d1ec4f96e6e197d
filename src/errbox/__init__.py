"""errbox - exceptions with call-site provenance, which can be boxed and processed later.

Annotate errors as they travel up the stack, collect independent failures into
a single Box, and still test for sentinel errors anywhere inside.

Annotating:
    >>> from errbox import annotate
    >>>
    >>> def do_something():
    ...     return annotate(this_fails(), "with the number: %d", 10)
    >>>
    >>> print(annotate(do_something(), "with string: %s", "recombobulator"))
    bang
     +--> with the number: 10
     |  @ examples/annotate.py:14 (do_something)
     +--> with string: recombobulator
        @ examples/annotate.py:21 (main)

Grouping:
    >>> from errbox import Box, append, contains
    >>>
    >>> err = None
    >>> err = append(err, do_something_careless())
    >>> err = append(err, open_missing_file())
    >>> contains(err, FileNotFoundError)
    True
    >>> print(err)
    Got 2 errors:
    ----------------------------
    # 1
    ...

Chaining:
    >>> from errbox import start
    >>> err = start(load).then(parse).then(store).first_error()

Configuration (once, at startup):
    >>> from errbox import set_trace_prefix, set_show_stack
    >>> set_trace_prefix("recombobulator/")  # hide checkout paths in traces
    >>> set_show_stack(False)               # messages only
"""

from __future__ import annotations

__version__ = "0.2.0"

# Errors
from .core import (
    AnnotatedError,
    Annotation,
    Box,
    Chain,
    ErrorShape,
    annotate,
    append,
    cause,
    contains,
    errors,
    is_error,
    new_box,
    render,
    shape_of,
    start,
    unwrap,
    with_stack,
)

# Configuration
from .foundation.config import (
    ErrboxSettings,
    clear_settings_cache,
    get_settings,
    set_show_stack,
    set_trace_prefix,
)

# Observability
from .observability import configure_logging, get_logger, log_error

__all__ = [
    "__version__",
    # Shapes
    "AnnotatedError", "Annotation", "Box", "ErrorShape", "shape_of",
    # Operations
    "annotate", "with_stack", "append", "errors", "new_box",
    "cause", "unwrap", "is_error", "contains", "render",
    # Chain runner
    "Chain", "start",
    # Configuration
    "ErrboxSettings", "get_settings", "clear_settings_cache", "set_trace_prefix", "set_show_stack",
    # Observability
    "configure_logging", "get_logger", "log_error",
]
