"""Shared fixtures."""

from datetime import datetime, timedelta

import pytest


class FakeClock:
    """Manually advanced time source for occupancy durations."""

    def __init__(self, start: datetime = datetime(2024, 5, 1, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
