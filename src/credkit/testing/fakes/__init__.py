"""Testing fakes – deterministic doubles for the clock and random source."""
from credkit.kernel.time import FrozenClock
from credkit.testing.fakes.clock import FAKE_NOW, FakeClock
from credkit.testing.fakes.random import RecordingRandom, fixed_random

__all__ = ["FAKE_NOW", "FakeClock", "FrozenClock", "RecordingRandom", "fixed_random"]
