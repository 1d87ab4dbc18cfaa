from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

# target currency code -> multiplier, scoped to one base currency
ConversionRateTable = dict[str, Decimal]


@dataclass(frozen=True)
class Currency:
    code: str
    name: str


@dataclass(frozen=True)
class RateCacheEntry:
    base_currency: str
    rates: ConversionRateTable
    fetched_at: datetime


class FetchStatus(Enum):
    NOT_FETCHED = "not_fetched"
    FAILED = "failed"
    FETCHED = "fetched"


@dataclass(frozen=True)
class RateLookup:
    base_currency: str
    status: FetchStatus
    rates: ConversionRateTable | None = None
    fetched_at: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.FETCHED and self.rates is not None


@dataclass(frozen=True)
class Conversion:
    from_currency: str
    to_currency: str
    amount: Decimal
    rate: Decimal
    converted_amount: Decimal
    fetched_at: datetime
