class CurrencyException(Exception):
    pass


class ConfigurationError(CurrencyException):
    pass


class InvalidCurrencyError(CurrencyException):
    pass


class RateNotFoundError(CurrencyException):
    pass


class ProviderError(CurrencyException):
    pass
