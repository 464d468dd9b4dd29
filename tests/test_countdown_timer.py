import pytest

from quiz_host.core.services.countdown_timer import CountdownTimer


def test_idle_until_started(scheduler):
    timer = CountdownTimer(scheduler)
    assert timer.remaining is None
    assert not timer.is_running()
    assert scheduler.pending() == []


def test_decrements_once_per_second(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(5)

    scheduler.advance(999)
    assert timer.remaining == 5
    scheduler.advance(1)
    assert timer.remaining == 4
    scheduler.advance(2000)
    assert timer.remaining == 2


def test_only_one_tick_is_ever_pending(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(10)
    for _ in range(4):
        assert len(scheduler.pending()) == 1
        scheduler.advance(1000)


def test_stays_at_zero_without_further_ticks(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(2)

    scheduler.advance(10_000)

    assert timer.remaining == 0
    assert timer.is_running()
    assert scheduler.pending() == []


def test_stop_cancels_pending_tick(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(5)
    scheduler.advance(1000)

    timer.stop()
    scheduler.advance(5000)

    assert timer.remaining is None
    assert not timer.has_pending_tick()
    assert scheduler.pending() == []


def test_restart_replaces_stale_tick(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(5)
    scheduler.advance(500)

    timer.start(20)
    scheduler.advance(500)
    assert timer.remaining == 20
    scheduler.advance(500)
    assert timer.remaining == 19
    assert len(scheduler.pending()) == 1


def test_start_at_zero_schedules_nothing(scheduler):
    timer = CountdownTimer(scheduler)
    timer.start(0)
    assert timer.remaining == 0
    assert scheduler.pending() == []


def test_negative_start_is_rejected(scheduler):
    with pytest.raises(ValueError):
        CountdownTimer(scheduler).start(-1)
