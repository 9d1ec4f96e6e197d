"""Error annotation and aggregation.

- AnnotatedError/annotate: an error plus the call sites it was annotated at
- Box/append/push_if: thread-safe, flattening collections of errors
- cause/unwrap/is_error/contains: identity matching through wrappers and boxes
- start/Chain: run fallible steps in order, report the first failure
"""

from .box import Box, as_box, new_box
from .chain import Chain, Step, start
from .ops import annotate, append, cause, contains, errors, is_error, render, shape_of, unwrap
from .render import render_annotated, render_entries
from .stack import AnnotatedError, capture_site, format_message, with_stack
from .types import Annotation, ErrorShape, FieldMap, FieldValue, trim_prefix

__all__ = [
    # Shapes
    "AnnotatedError", "Box", "ErrorShape", "shape_of",
    # Annotation
    "Annotation", "annotate", "with_stack", "capture_site", "format_message",
    "FieldMap", "FieldValue",
    # Aggregation
    "append", "errors", "new_box", "as_box",
    # Matching
    "cause", "unwrap", "is_error", "contains",
    # Chain runner
    "Chain", "Step", "start",
    # Presentation
    "render", "render_annotated", "render_entries", "trim_prefix",
]
