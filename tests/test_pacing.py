import pytest

from blockfall.pacing import FramePacer


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        return self.current


def test_wait_blocks_for_one_frame():
    clock = FakeClock()
    sleeps = []

    def sleep(seconds):
        sleeps.append(seconds)
        clock.advance(0.125)

    pacer = FramePacer(4, clock=clock, sleep=sleep)
    assert pacer.wait() == 0.0
    assert pacer.wait() == pytest.approx(0.25)
    assert len(sleeps) == 2
    assert clock.current == pytest.approx(0.25)


def test_wait_does_not_sleep_when_frame_overran():
    clock = FakeClock()
    sleeps = []
    pacer = FramePacer(60, clock=clock, sleep=sleeps.append)
    pacer.wait()
    clock.advance(0.5)
    assert pacer.wait() == pytest.approx(0.5)
    assert sleeps == []


def test_pacers_keep_independent_timing():
    clock = FakeClock()
    first = FramePacer(4, clock=clock, sleep=lambda _s: clock.advance(0.125))
    second = FramePacer(4, clock=clock, sleep=lambda _s: clock.advance(0.125))
    first.wait()
    clock.advance(1.0)
    assert second.wait() == 0.0
    assert first.wait() == pytest.approx(1.0)


def test_fps_must_be_positive():
    with pytest.raises(ValueError):
        FramePacer(0)
