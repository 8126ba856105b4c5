"""Pytest configuration and fixtures for candlechart testing."""

from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

import pytest

from candlechart.schemas.market import Bar

START = datetime(2024, 1, 2, 5, 0, tzinfo=timezone.utc)


def make_bars(closes: Sequence[float], start: datetime = START) -> list[Bar]:
    """One daily bar per close, oldest first."""
    return [
        Bar(
            timestamp=start + timedelta(days=i),
            open=close,
            high=close + 1,
            low=close - 1,
            close=close,
            volume=1000 + i,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def bar_factory() -> Callable[..., list[Bar]]:
    """Factory building ascending daily bars from closes."""
    return make_bars


@pytest.fixture
def rising_bars() -> list[Bar]:
    """30 ascending daily bars with closes 1..30."""
    return make_bars([float(i) for i in range(1, 31)])


@pytest.fixture
def mixed_closes() -> list[float]:
    """40 closes that go up and down."""
    return [
        100.0, 101.5, 100.8, 102.3, 103.1, 102.0, 101.2, 103.8, 104.5, 104.1,
        105.6, 104.9, 106.2, 107.0, 106.1, 105.3, 104.8, 106.9, 108.2, 107.5,
        109.1, 108.4, 107.2, 106.5, 108.8, 110.3, 109.7, 111.2, 110.1, 112.4,
        111.8, 110.9, 112.7, 113.5, 112.2, 114.0, 113.1, 115.2, 114.6, 116.0,
    ]
