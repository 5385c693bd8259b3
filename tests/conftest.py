"""Shared fixtures: scripted randomness and ready-made channels."""
import random

import pytest

from studiosim.channel import Channel, new_channel


class FixedRandom(random.Random):
    """Random source whose ``random()`` returns queued values, then a default.

    ``uniform(a, b)`` goes through ``random()``, so it follows the queue too.
    """

    def __init__(self, *values: float, default: float = 0.5) -> None:
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self) -> float:
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom instances."""
    return FixedRandom


@pytest.fixture
def channel() -> Channel:
    return new_channel("Test Channel", channel_id="test")
