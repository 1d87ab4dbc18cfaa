from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	amount: Decimal = Field(..., description='Original amount requested')
	exchange_rate: Decimal = Field(..., description='Exchange rate used for conversion')
	converted_amount: Decimal = Field(..., description='Converted amount')
	timestamp: datetime = Field(..., description='When the rate table was fetched')
	formatted_amount: str = Field(..., description='Original amount formatted for display')
	formatted_converted_amount: str = Field(..., description='Converted amount formatted for display')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'USD',
				'to_currency': 'BRL',
				'amount': 10,
				'exchange_rate': 5.0,
				'converted_amount': 50.0,
				'timestamp': '2025-09-27T10:30:00Z',
				'formatted_amount': 'US$ 10,00',
				'formatted_converted_amount': 'R$ 50,00',
			}
		}
	)


class CurrencyItem(BaseModel):
	code: str = Field(..., description='Currency code')
	name: str = Field(..., description='Display name')


class SupportedCurrenciesResponse(BaseModel):
	currencies: list[CurrencyItem] = Field(description='Supported currencies')

	model_config = ConfigDict(
		json_schema_extra={
			'examples': [
				{'currencies': [{'code': 'USD', 'name': 'United States Dollar'}, {'code': 'BRL', 'name': 'Brazilian Real'}]}
			]
		}
	)
