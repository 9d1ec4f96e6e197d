"""Tests for the chain runner: every step runs, only the first failure is kept."""

from __future__ import annotations

import pytest

from errbox.core import Chain, Step, annotate, is_error, start


def test_all_steps_run_first_error_wins() -> None:
    """Given [ok, ok, fail1, ok, fail2], all five run and fail1 is reported."""
    counter = 0
    fail1, fail2 = ValueError("fail1"), ValueError("fail2")

    def ok() -> None:
        nonlocal counter
        counter += 1

    def failing(err: BaseException) -> Step:
        def step() -> BaseException:
            nonlocal counter
            counter += 1
            return err
        return step

    chain = start(ok).then(ok).then(failing(fail1)).then(ok).then(failing(fail2))

    assert counter == 5
    assert chain.first_error() is fail1
    assert chain.failed
    assert chain.steps == 5


def test_all_ok() -> None:
    chain = start(lambda: None).then(lambda: "a value, not an error")
    assert chain.first_error() is None
    assert not chain.failed


def test_raised_exception_is_a_failure() -> None:
    boom = KeyError("boom")

    def raises() -> None:
        raise boom

    later = ValueError("later")
    chain = start(lambda: None).then(raises).then(lambda: later)
    assert chain.first_error() is boom


def test_first_error_keeps_annotations() -> None:
    sentinel = LookupError("missing")
    err = start(lambda: annotate(sentinel, "while loading")).first_error()
    assert is_error(err, sentinel)


def test_base_exceptions_propagate() -> None:
    def interrupted() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        start(interrupted)


def test_chain_is_reusable_builder() -> None:
    chain = Chain()
    assert chain.first_error() is None
    assert chain.then(lambda: None) is chain
    assert repr(chain) == "Chain(steps=1, failed=False)"
