from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PROXIFIER_")

    app_name: str = "Proxifier"
    debug: bool = False

    scryfall_base_url: str = "https://api.scryfall.com"
    user_agent: str = "Proxifier/1.0"

    # Seconds before an outbound lookup is abandoned
    lookup_timeout: float = 30.0

    # Retries are off by default; a failed lookup fails the whole request
    lookup_retries: int = 0
    lookup_retry_backoff: float = 0.5


settings = Settings()


# =============================================================================
# SCRYFALL LIMITS
# =============================================================================

# Scryfall rejects /cards/collection bodies with more identifiers than this
MAX_COLLECTION_IDENTIFIERS = 75

# Largest quantity a single decklist line may request
MAX_LINE_QUANTITY = 250
