from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from api.dependencies import get_formatter, get_rate_service
from api.schemas import ConversionResponse, CurrencyItem, SupportedCurrenciesResponse
from application.services import CurrencyFormatter, RateService

router = APIRouter(prefix='/api', tags=['currency'])

CurrencyCode = Annotated[str, Path(min_length=3, max_length=5)]


@router.get(
	'/convert/{from_currency}/{to_currency}/{amount}',
	response_model=ConversionResponse,
	status_code=status.HTTP_200_OK,
	summary='Convert currency amount',
)
async def convert_currency(
	from_currency: CurrencyCode,
	to_currency: CurrencyCode,
	amount: Annotated[Decimal, Path(ge=0)],
	service: Annotated[RateService, Depends(get_rate_service)],
	formatter: Annotated[CurrencyFormatter, Depends(get_formatter)],
) -> ConversionResponse:
	from_currency = from_currency.upper()
	to_currency = to_currency.upper()

	result = await service.convert_detailed(from_currency, to_currency, amount)
	if result is None:
		raise HTTPException(
			status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail='Conversion unavailable'
		)

	return ConversionResponse(
		from_currency=result.from_currency,
		to_currency=result.to_currency,
		amount=result.amount,
		exchange_rate=result.rate,
		converted_amount=result.converted_amount,
		timestamp=result.fetched_at,
		formatted_amount=formatter.format(result.amount, result.from_currency),
		formatted_converted_amount=formatter.format(result.converted_amount, result.to_currency),
	)


@router.get(
	'/currencies',
	response_model=SupportedCurrenciesResponse,
	status_code=status.HTTP_200_OK,
	summary='List supported currencies',
)
async def get_supported_currencies(
	service: Annotated[RateService, Depends(get_rate_service)],
) -> SupportedCurrenciesResponse:
	currencies = await service.list_currencies()
	return SupportedCurrenciesResponse(
		currencies=[CurrencyItem(code=c.code, name=c.name) for c in currencies]
	)
