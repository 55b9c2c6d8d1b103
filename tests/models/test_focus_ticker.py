"""Unit tests for the one-second Ticker."""

from __future__ import annotations

from focustimer_cli.models.focus.ticker import Ticker


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_idle_ticker_never_due():
    clock = FakeClock()
    ticker = Ticker(clock=clock)
    clock.now += 10

    assert ticker.active is False
    assert ticker.due() is False


def test_tick_due_after_interval():
    clock = FakeClock()
    ticker = Ticker(clock=clock)
    ticker.start()

    clock.now += 0.5
    assert ticker.due() is False
    clock.now += 0.5
    assert ticker.due() is True
    assert ticker.due() is False


def test_missed_ticks_are_not_recovered():
    clock = FakeClock()
    ticker = Ticker(clock=clock)
    ticker.start()

    clock.now += 30  # host suspended
    assert ticker.due() is True
    assert ticker.due() is False
    clock.now += 1
    assert ticker.due() is True


def test_start_twice_keeps_schedule():
    clock = FakeClock()
    ticker = Ticker(clock=clock)
    ticker.start()
    clock.now += 0.75
    ticker.start()
    clock.now += 0.25

    assert ticker.due() is True


def test_stop_cancels_pending_tick():
    clock = FakeClock()
    ticker = Ticker(clock=clock)
    ticker.start()
    clock.now += 5
    ticker.stop()

    assert ticker.active is False
    assert ticker.due() is False
