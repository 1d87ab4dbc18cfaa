import logging
from datetime import timedelta

from application.services import CurrencyFormatter, RateService
from config.settings import get_settings
from infrastructure.cache.memory_cache import RateCache
from infrastructure.providers import ExchangeRateAPIProvider

logger = logging.getLogger(__name__)


class AppDependencies:
	"""Container for application-wide singleton dependencies."""

	rate_service: RateService | None = None
	formatter: CurrencyFormatter | None = None


deps = AppDependencies()


def init_dependencies() -> None:
	"""Initialize all singleton dependencies. Called at app startup."""
	logger.info('Initializing dependencies...')
	settings = get_settings()

	provider = ExchangeRateAPIProvider(
		api_key=settings.EXCHANGERATE_API_KEY,
		base_url=settings.EXCHANGERATE_BASE_URL,
		timeout=settings.HTTP_TIMEOUT,
	)
	cache = RateCache(rate_ttl=timedelta(seconds=settings.RATE_CACHE_TTL_SECONDS))

	deps.rate_service = RateService(provider=provider, cache=cache)
	deps.formatter = CurrencyFormatter(settings.LOCALE)
	logger.info('Dependencies initialized')


async def cleanup_dependencies() -> None:
	logger.info('Cleaning up dependencies...')

	if deps.rate_service:
		await deps.rate_service.close()
	deps.rate_service = None
	deps.formatter = None

	logger.info('Cleanup complete')


def get_rate_service() -> RateService:
	if deps.rate_service is None:
		raise RuntimeError('Rate service not initialized')
	return deps.rate_service


def get_formatter() -> CurrencyFormatter:
	if deps.formatter is None:
		raise RuntimeError('Currency formatter not initialized')
	return deps.formatter
