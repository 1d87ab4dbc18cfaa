import re
from decimal import Decimal, InvalidOperation

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from domain.exceptions.currency import ConfigurationError, InvalidCurrencyError

_NON_AMOUNT_CHARS = re.compile(r'[^\d,.]')
_LEADING_NUMBER = re.compile(r'\d*\.?\d*')


class CurrencyFormatter:
	"""Formats amounts as currency strings for one fixed locale."""

	def __init__(self, locale: str):
		if not locale:
			raise ConfigurationError('Locale is required')
		try:
			self.locale = Locale.parse(locale.replace('-', '_'))
		except (UnknownLocaleError, ValueError) as e:
			raise ConfigurationError(f'Unknown locale: {locale}') from e

	def format(self, value: Decimal | int | float, currency_code: str) -> str:
		if not currency_code:
			raise InvalidCurrencyError('Currency code is required')
		return format_currency(value, currency_code, locale=self.locale)


def parse_amount(raw: str) -> Decimal:
	"""Parse user-typed input such as ``'10,50'`` or ``'R$ 3.5'``.

	Only the leading number is kept, so ``'1.000,50'`` reads as 1.
	Returns ``Decimal(0)`` when no number leads the input.
	"""
	sanitized = _NON_AMOUNT_CHARS.sub('', raw or '').replace(',', '.', 1)
	number = _LEADING_NUMBER.match(sanitized).group()
	try:
		return Decimal(number)
	except InvalidOperation:
		return Decimal(0)
