from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    CAPI_BASE_URL: str = "https://content.guardianapis.com/"
    CAPI_API_KEY: str = "test"

    PAGE_SIZE: int = 24
    ORDER_BY: str = "newest"  # not "relevance"
    SHOW_FIELDS: list[str] = ["thumbnail", "trailText", "byline"]

    # Out-of-enum pillar ids fail validation when set, are dropped otherwise
    STRICT_PILLAR_ENUM: bool = True

    REQUEST_TIMEOUT: float | None = None

    API_HOST: str = "localhost"
    API_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

settings = Settings()
