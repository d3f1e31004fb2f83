"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str = "DEMO_KEY"
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    off_base_url: str = "https://world.openfoodfacts.org"
    off_user_agent: str = "FoodLookup/0.1 (food-lookup engine)"
    fatsecret_client_id: str | None = None
    fatsecret_client_secret: str | None = None
    fatsecret_token_url: str = "https://oauth.fatsecret.com/connect/token"
    fatsecret_api_url: str = "https://platform.fatsecret.com/rest/server.api"
    nutritionix_app_id: str | None = None
    nutritionix_app_key: str | None = None
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_kv_table: str = "kv_store"
    source_timeout_seconds: float = 4.0
    premium_timeout_bonus_seconds: float = 1.0
    search_page_size: int = 25
    search_cache_ttl_seconds: int = 300
    search_cache_max_entries: int = 50
    barcode_cache_max_entries: int = 200
    barcode_fast_cache_max_entries: int = 100
    barcode_fast_cache_ttl_seconds: int = 86400
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "%(levelname)s: %(name)s: %(message)s"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def fatsecret_configured(self) -> bool:
        """Return true when FatSecret credentials are present."""
        return bool(self.fatsecret_client_id and self.fatsecret_client_secret)

    @property
    def nutritionix_configured(self) -> bool:
        """Return true when Nutritionix credentials are present."""
        return bool(self.nutritionix_app_id and self.nutritionix_app_key)

    @property
    def supabase_configured(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_key)
