"""Value types shared by annotated errors and boxes.

Uses Pydantic models for the immutable annotation record so trails can be
dumped straight into structured log events.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

# Values stored in the out-of-band field map of an annotated error
FieldPrimitive = Union[str, int, float, bool, None]
FieldValue: TypeAlias = Union[FieldPrimitive, list[Any], dict[str, Any]]
FieldMap: TypeAlias = dict[str, FieldValue]


class ErrorShape(StrEnum):
    """The closed set of error shapes every operation dispatches on."""

    NIL = "nil"
    PLAIN = "plain"
    ANNOTATED = "annotated"
    BOX = "box"


# ═══════════════════════════════════════════════════════════════════════════════
# Call-site Annotation
# ═══════════════════════════════════════════════════════════════════════════════


class Annotation(BaseModel):
    """One note attached to an error: what happened and where. Frozen once captured."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", revalidate_instances="never",
        json_schema_extra={"title": "Annotation", "examples": [
            {"message": "with num 10", "file": "app/main.py", "function": "do_something", "line": 14},
        ]},
    )

    message: str = ""
    file: str = Field(default="", repr=False)
    function: str = ""
    line: int = Field(default=0, ge=0)

    @property
    def has_message(self) -> bool:
        return self.message != ""

    @property
    def has_location(self) -> bool:
        """False when the call site could not be captured."""
        return self.line > 0

    def location(self, prefix: str = "") -> str:
        """Format as ``file:line (function)``, dropping ``prefix`` and everything before it."""
        return f"{trim_prefix(self.file, prefix)}:{self.line} ({self.function})"

    def __str__(self) -> str:
        return f"{self.message} @ {self.location()}" if self.has_message else self.location()


def trim_prefix(file: str, prefix: str) -> str:
    """Drop everything up to and including the first occurrence of prefix."""
    if not prefix:
        return file
    idx = file.find(prefix)
    return file[idx + len(prefix):] if idx > -1 else file
