from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BACKEND_BASE_URL: str = "http://localhost:3000/api"
    BACKEND_API_TOKEN: str | None = None
    BUSINESS_ID: str | None = None

    HTTP_TIMEOUT_SECONDS: float = 10.0
    INCLUDE_ALL_FREQUENCIES: bool = False
    MAX_PROVIDER_FANOUT: int = 10

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
