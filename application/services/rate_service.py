import logging
from datetime import timedelta
from decimal import Decimal

from domain.exceptions.currency import InvalidCurrencyError, ProviderError, RateNotFoundError
from domain.models.currency import (
    Conversion,
    ConversionRateTable,
    Currency,
    FetchStatus,
    RateLookup,
)
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers.base import ExchangeRateProvider

logger = logging.getLogger(__name__)


class RateService:
    """Lists supported currencies and converts amounts between them.

    Provider failures never escape this class: they are logged and surface
    as an empty currency list or an absent rate table. Unknown currency
    codes and missing target rates raise.
    """

    def __init__(
        self,
        provider: ExchangeRateProvider,
        cache: RateCache | None = None,
        rate_ttl: timedelta = timedelta(hours=1),
    ):
        self.provider = provider
        self.cache = cache or RateCache(rate_ttl=rate_ttl)
        self._failed_bases: set[str] = set()

    async def list_currencies(self) -> list[Currency]:
        cached = self.cache.get_supported_currencies()
        if cached is not None:
            return cached

        try:
            currencies = await self.provider.fetch_supported_currencies()
        except ProviderError as e:
            logger.error(f'Failed to fetch currencies from {self.provider.name}: {e}')
            return []

        self.cache.set_supported_currencies(currencies)
        logger.info(f'{self.provider.name} supports {len(currencies)} currencies')
        return list(currencies)

    async def list_currency_codes(self) -> list[str]:
        return [c.code for c in await self.list_currencies()]

    async def get_currency_name(self, code: str) -> str | None:
        for currency in await self.list_currencies():
            if currency.code == code:
                return currency.name
        return None

    def _is_supported(self, code: str) -> bool:
        # failures are only tracked for codes the provider lists
        cached = self.cache.get_supported_currencies() or []
        return any(c.code == code for c in cached)

    async def get_rates_result(self, base_currency: str) -> RateLookup:
        entry = self.cache.get_rates(base_currency)
        if entry is not None:
            logger.debug(f'Rate cache hit for {base_currency}')
            return RateLookup(
                base_currency=base_currency,
                status=FetchStatus.FETCHED,
                rates=dict(entry.rates),
                fetched_at=entry.fetched_at,
            )

        try:
            rates = await self.provider.fetch_latest_rates(base_currency)
        except ProviderError as e:
            logger.error(
                f'Failed to fetch rates for {base_currency} from {self.provider.name}: {e}',
                extra={'extra_data': {'provider': self.provider.name, 'base_currency': base_currency}},
            )
            if self._is_supported(base_currency):
                self._failed_bases.add(base_currency)
            return RateLookup(base_currency=base_currency, status=FetchStatus.FAILED)

        entry = self.cache.set_rates(base_currency, rates)
        self._failed_bases.discard(base_currency)
        logger.info(
            f'Refreshed {len(rates)} rates for {base_currency}',
            extra={'extra_data': {'base_currency': base_currency, 'fetched_at': entry.fetched_at}},
        )
        return RateLookup(
            base_currency=base_currency,
            status=FetchStatus.FETCHED,
            rates=dict(entry.rates),
            fetched_at=entry.fetched_at,
        )

    async def get_rates(self, base_currency: str) -> ConversionRateTable | None:
        lookup = await self.get_rates_result(base_currency)
        return lookup.rates if lookup.ok else None

    def rates_status(self, base_currency: str) -> FetchStatus:
        if base_currency in self._failed_bases:
            return FetchStatus.FAILED
        if self.cache.peek_rates(base_currency) is not None:
            return FetchStatus.FETCHED
        return FetchStatus.NOT_FETCHED

    async def convert_detailed(
        self, from_currency: str, to_currency: str, amount: Decimal | int | float
    ) -> Conversion | None:
        currencies = await self.list_currencies()
        if not currencies:
            logger.warning(f'Currency list unavailable, cannot convert {from_currency} -> {to_currency}')
            return None

        supported = {c.code for c in currencies}
        for code in (from_currency, to_currency):
            if code not in supported:
                raise InvalidCurrencyError(f'Invalid currency: {code}')

        lookup = await self.get_rates_result(from_currency)
        if not lookup.ok:
            return None

        rate = lookup.rates.get(to_currency)
        if not rate:
            raise RateNotFoundError(f'Exchange rate not found for {from_currency} to {to_currency}')

        value = Decimal(str(amount))
        return Conversion(
            from_currency=from_currency,
            to_currency=to_currency,
            amount=value,
            rate=rate,
            converted_amount=value * rate,
            fetched_at=lookup.fetched_at,
        )

    async def convert(
        self, from_currency: str, to_currency: str, amount: Decimal | int | float
    ) -> Decimal | None:
        conversion = await self.convert_detailed(from_currency, to_currency, amount)
        return conversion.converted_amount if conversion else None

    async def close(self) -> None:
        await self.provider.close()
