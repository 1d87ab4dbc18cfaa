from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_formatter, get_rate_service
from api.main import app
from application.services import CurrencyFormatter
from domain.exceptions.currency import InvalidCurrencyError, RateNotFoundError
from domain.models.currency import Conversion, Currency


@pytest.fixture
def mock_rate_service():
    mock_service = MagicMock()
    mock_service.list_currencies = AsyncMock(return_value=[
        Currency(code='USD', name='United States Dollar'),
        Currency(code='BRL', name='Brazilian Real'),
    ])
    mock_service.convert_detailed = AsyncMock(return_value=Conversion(
        from_currency='USD',
        to_currency='BRL',
        amount=Decimal('10'),
        rate=Decimal('5.0'),
        converted_amount=Decimal('50.0'),
        fetched_at=datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC),
    ))
    return mock_service


@pytest.fixture
def client(mock_rate_service):
    # Override the real dependencies with mocks
    app.dependency_overrides[get_rate_service] = lambda: mock_rate_service
    app.dependency_overrides[get_formatter] = lambda: CurrencyFormatter('pt-BR')
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def test_list_currencies(client):
    response = client.get('/api/currencies')

    assert response.status_code == 200
    assert response.json() == {
        'currencies': [
            {'code': 'USD', 'name': 'United States Dollar'},
            {'code': 'BRL', 'name': 'Brazilian Real'},
        ]
    }


def test_convert_success(client, mock_rate_service):
    response = client.get('/api/convert/USD/BRL/10')

    assert response.status_code == 200
    data = response.json()

    assert data['from_currency'] == 'USD'
    assert data['to_currency'] == 'BRL'
    assert Decimal(data['amount']) == Decimal('10')
    assert Decimal(data['exchange_rate']) == Decimal('5.0')
    assert Decimal(data['converted_amount']) == Decimal('50')
    assert 'US$' in data['formatted_amount']
    assert '10,00' in data['formatted_amount']
    assert 'R$' in data['formatted_converted_amount']
    assert '50,00' in data['formatted_converted_amount']
    assert 'timestamp' in data

    mock_rate_service.convert_detailed.assert_awaited_once_with('USD', 'BRL', Decimal('10'))


def test_convert_lowercase_currencies_normalized(client, mock_rate_service):
    response = client.get('/api/convert/usd/brl/10')

    assert response.status_code == 200
    mock_rate_service.convert_detailed.assert_awaited_once_with('USD', 'BRL', Decimal('10'))


def test_convert_negative_amount(client):
    response = client.get('/api/convert/USD/BRL/-1')
    assert response.status_code == 422


def test_convert_short_currency_code(client):
    response = client.get('/api/convert/US/BRL/10')
    assert response.status_code == 422


def test_convert_invalid_currency_returns_400(client, mock_rate_service):
    mock_rate_service.convert_detailed.side_effect = InvalidCurrencyError('Invalid currency: XYZ')

    response = client.get('/api/convert/XYZ/BRL/10')

    assert response.status_code == 400
    assert response.json() == {'detail': 'Invalid currency: XYZ'}


def test_convert_rate_not_found_returns_404(client, mock_rate_service):
    mock_rate_service.convert_detailed.side_effect = RateNotFoundError(
        'Exchange rate not found for USD to BRL'
    )

    response = client.get('/api/convert/USD/BRL/10')

    assert response.status_code == 404


def test_convert_unavailable_returns_503(client, mock_rate_service):
    mock_rate_service.convert_detailed.return_value = None

    response = client.get('/api/convert/USD/BRL/10')

    assert response.status_code == 503
    assert response.json() == {'detail': 'Conversion unavailable'}


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'ok'}
