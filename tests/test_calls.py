from __future__ import annotations

import asyncio

from core.calls import Outcome, settle_many, settle_one


async def _value(v, delay=0.0):
    await asyncio.sleep(delay)
    return v


async def _boom(msg="boom"):
    raise RuntimeError(msg)


def test_settle_one_applies_transform_to_bare_value():
    value, error = asyncio.run(settle_one(_value(2), lambda v: v * 10))
    assert (value, error) == (20, None)


def test_settle_one_returns_failure_instead_of_raising():
    outcome = asyncio.run(settle_one(_boom()))
    assert outcome.value is None
    assert isinstance(outcome.error, RuntimeError)
    assert not outcome.ok


def test_settle_one_catches_transform_errors():
    outcome = asyncio.run(settle_one(_value("x"), int))
    assert isinstance(outcome.error, ValueError)


def test_settle_many_passes_ordered_results():
    calls = [_value(1, 0.02), _value(2, 0.0), _value(3, 0.01)]
    outcome = asyncio.run(settle_many(calls, lambda rs: rs))
    assert outcome == Outcome([1, 2, 3], None)


def test_settle_many_fails_whole_batch_on_one_failure():
    finished = []

    async def slow_ok():
        await asyncio.sleep(0.02)
        finished.append("slow")
        return "ok"

    outcome = asyncio.run(settle_many([slow_ok(), _boom("leg 2"), _value("ok")], len))
    assert outcome.value is None
    assert str(outcome.error) == "leg 2"
    # every leg settled before the failure was reported
    assert finished == ["slow"]


def test_settle_many_reports_first_failure_in_input_order():
    outcome = asyncio.run(settle_many([_value(1), _boom("first"), _boom("second")]))
    assert str(outcome.error) == "first"


def test_settle_many_empty_batch():
    assert asyncio.run(settle_many([], len)) == Outcome(0, None)
