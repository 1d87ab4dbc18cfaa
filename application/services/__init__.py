from .currency_formatter import CurrencyFormatter, parse_amount
from .rate_service import RateService

__all__ = ['CurrencyFormatter', 'RateService', 'parse_amount']
