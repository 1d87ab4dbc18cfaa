from decimal import Decimal, InvalidOperation

import httpx

from domain.exceptions.currency import ConfigurationError, ProviderError
from domain.models.currency import ConversionRateTable, Currency


class ExchangeRateAPIProvider:
	BASE_URL = 'https://v6.exchangerate-api.com/v6'

	def __init__(
		self,
		api_key: str,
		client: httpx.AsyncClient | None = None,
		base_url: str | None = None,
		timeout: int = 10,
	):
		if not api_key:
			raise ConfigurationError('API key is required')
		self.api_key = api_key
		self.base_url = (base_url or self.BASE_URL).rstrip('/')
		self._client = client or httpx.AsyncClient(timeout=timeout)

	@property
	def name(self) -> str:
		return 'exchangerate-api'

	async def _request(self, endpoint: str) -> dict:
		url = f'{self.base_url}/{self.api_key}/{endpoint}'

		try:
			response = await self._client.get(url)
			response.raise_for_status()
			data = response.json()
		except httpx.HTTPStatusError as e:
			raise ProviderError(
				f'ExchangeRate-API HTTP error {e.response.status_code}: {e.response.text[:200]}'
			) from e
		except httpx.RequestError as e:
			raise ProviderError(f'ExchangeRate-API request failed: {e.__class__.__name__}') from e
		except Exception as e:
			raise ProviderError(f'ExchangeRate-API response parsing error: {str(e)}') from e

		if not isinstance(data, dict) or data.get('result') != 'success':
			error_type = data.get('error-type', 'unknown-error') if isinstance(data, dict) else 'unknown-error'
			raise ProviderError(f'ExchangeRate-API error: {error_type}')

		return data

	async def fetch_supported_currencies(self) -> list[Currency]:
		data = await self._request('codes')
		currencies: dict[str, Currency] = {}
		try:
			for code, name in data['supported_codes']:
				currencies.setdefault(code, Currency(code=code, name=name))
		except (KeyError, TypeError, ValueError) as e:
			raise ProviderError(f'Malformed supported_codes payload: {e}') from e
		return list(currencies.values())

	async def fetch_latest_rates(self, base_currency: str) -> ConversionRateTable:
		data = await self._request(f'latest/{base_currency}')
		try:
			return {code: Decimal(str(rate)) for code, rate in data['conversion_rates'].items()}
		except KeyError as e:
			raise ProviderError(f'Missing conversion_rates for {base_currency}') from e
		except (AttributeError, InvalidOperation) as e:
			raise ProviderError(f'Malformed conversion_rates for {base_currency}: {e}') from e

	async def close(self) -> None:
		await self._client.aclose()
