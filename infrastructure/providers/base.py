from typing import Protocol

from domain.models.currency import ConversionRateTable, Currency


class ExchangeRateProvider(Protocol):
	@property
	def name(self) -> str: ...

	async def fetch_supported_currencies(self) -> list[Currency]: ...

	async def fetch_latest_rates(self, base_currency: str) -> ConversionRateTable: ...

	async def close(self) -> None: ...
