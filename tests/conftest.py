from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from domain.models.currency import Currency


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def currencies():
    return [
        Currency(code='USD', name='United States Dollar'),
        Currency(code='BRL', name='Brazilian Real'),
        Currency(code='EUR', name='Euro'),
    ]


@pytest.fixture
def mock_provider(currencies):
    provider = AsyncMock()
    provider.name = 'exchangerate-api'
    provider.fetch_supported_currencies.return_value = currencies
    provider.fetch_latest_rates.return_value = {
        'USD': Decimal('1'),
        'BRL': Decimal('5.0'),
        'EUR': Decimal('0.85'),
    }
    return provider
