from .responses import ConversionResponse, CurrencyItem, SupportedCurrenciesResponse

__all__ = [
	'ConversionResponse',
	'CurrencyItem',
	'SupportedCurrenciesResponse',
]
