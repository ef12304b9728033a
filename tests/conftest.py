"""
Shared fixtures: deterministic clocks, seeds and terminal fakes
"""

import pytest


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SteppingClock:
    """Clock that moves forward by a fixed step on every read"""

    def __init__(self, step: float):
        self.step = step
        self.now = 0.0

    def __call__(self) -> float:
        self.now += self.step
        return self.now


class ScriptedKeyboard:
    """Keyboard replaying a fixed list of poll results, then timing out"""

    def __init__(self, events=None):
        self.events = list(events or [])
        self.timeouts: list[float] = []

    def poll(self, timeout):
        self.timeouts.append(timeout)
        if self.events:
            return self.events.pop(0)
        return None


class RecordingRenderer:
    """Renderer keeping a snapshot of every frame it was asked to draw"""

    def __init__(self):
        self.frames = []

    def draw(self, paddles, ball, score):
        self.frames.append(
            {
                "paddles": [(p.x, p.y) for p in paddles],
                "ball": (ball.x, ball.y),
                "score": list(score),
            }
        )


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def fixed_seed():
    return lambda: 42


@pytest.fixture
def scripted_keyboard():
    return ScriptedKeyboard


@pytest.fixture
def recording_renderer():
    return RecordingRenderer()


@pytest.fixture
def stepping_clock():
    return SteppingClock
