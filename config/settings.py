from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	EXCHANGERATE_API_KEY: str = ''
	EXCHANGERATE_BASE_URL: str = 'https://v6.exchangerate-api.com/v6'

	# Cache
	RATE_CACHE_TTL_SECONDS: int = 3600
	HTTP_TIMEOUT: int = 10

	# Display
	LOCALE: str = 'pt-BR'

	# Application
	APP_NAME: str = 'Currency Converter API'
	DEBUG: bool = False
	LOG_LEVEL: str = 'INFO'
	LOG_JSON: bool = False

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
