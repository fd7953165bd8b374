from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Listing source (synthetic today; stub_json for offline fixtures) ---
    LISTING_SOURCE: str = "synthetic"
    STUB_LISTINGS_PATH: str = "data/stub_listings/listings.json"

    # Seed for the synthetic generator. Unset => fresh randomness per request.
    RANDOM_SEED: int | None = None

    # --- Ranking ---
    TOP_DEALS_LIMIT: int = 5

    # Detail links are synthesized, there is no backing store behind them
    MARKETPLACE_ITEM_URL_BASE: str = "https://www.facebook.com/marketplace/item"


settings = Settings()
