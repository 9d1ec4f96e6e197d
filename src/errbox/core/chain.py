"""Chain runner: run every step, keep the first failure.

    >>> err = start(load).then(parse).then(store).first_error()

Unlike Result.and_then style railways, a failing step does not stop the
chain: every step runs exactly once, in order. Only the first failure is
reported; later ones are discarded, not boxed. Use append() to collect all.
"""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger("errbox.chain")

# A step signals failure by returning or raising an exception
Step = Callable[[], object]


class Chain:
    """Accumulates zero-argument fallible steps. Build with start()."""

    __slots__ = ("_first", "_steps")

    def __init__(self) -> None:
        self._first: BaseException | None = None
        self._steps = 0

    def then(self, op: Step) -> Chain:
        """Run op now and remember its error if it is the first one."""
        self._steps += 1
        err = _call(op)
        if err is not None:
            if self._first is None:
                self._first = err
            else:
                logger.debug("chain step %d failed after an earlier failure, discarding %s", self._steps, type(err).__name__)
        return self

    def first_error(self) -> BaseException | None:
        """Error of the first failed step, or None if all succeeded."""
        return self._first

    @property
    def failed(self) -> bool:
        return self._first is not None

    @property
    def steps(self) -> int:
        """Number of steps run so far."""
        return self._steps

    def __repr__(self) -> str:
        return f"Chain(steps={self._steps}, failed={self.failed})"


def start(op: Step) -> Chain:
    """Begin a chain with op as its first step."""
    return Chain().then(op)


def _call(op: Step) -> BaseException | None:
    try:
        result = op()
    except Exception as exc:
        return exc
    return result if isinstance(result, BaseException) else None
