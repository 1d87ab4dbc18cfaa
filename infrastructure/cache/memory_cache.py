from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from domain.models.currency import ConversionRateTable, Currency, RateCacheEntry


def utc_now() -> datetime:
    return datetime.now(UTC)


class RateCache:
    """Per-instance cache for the currency list and per-base rate tables.

    Rate entries expire after ``rate_ttl``; the currency list never does.
    """

    def __init__(
        self,
        rate_ttl: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rate_ttl = rate_ttl
        self._clock = clock
        self._rates: dict[str, RateCacheEntry] = {}
        self._currencies: list[Currency] = []

    def is_stale(self, entry: RateCacheEntry) -> bool:
        return self._clock() - entry.fetched_at > self.rate_ttl

    def peek_rates(self, base_currency: str) -> RateCacheEntry | None:
        """Return the stored entry for ``base_currency`` regardless of age."""
        return self._rates.get(base_currency)

    def get_rates(self, base_currency: str) -> RateCacheEntry | None:
        entry = self._rates.get(base_currency)
        if entry is None or self.is_stale(entry):
            return None
        return entry

    def set_rates(self, base_currency: str, rates: ConversionRateTable) -> RateCacheEntry:
        entry = RateCacheEntry(
            base_currency=base_currency,
            rates=dict(rates),
            fetched_at=self._clock(),
        )
        self._rates[base_currency] = entry
        return entry

    def get_supported_currencies(self) -> list[Currency] | None:
        if not self._currencies:
            return None
        return list(self._currencies)

    def set_supported_currencies(self, currencies: list[Currency]) -> None:
        self._currencies = list(currencies)

    def clear(self) -> None:
        self._rates.clear()
        self._currencies = []
