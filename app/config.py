from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    BASE_URL: str = "https://api.spacexdata.com/v4"
    REQUEST_TIMEOUT_SECONDS: float = 30
    PAYLOAD_FETCH_CONCURRENCY: int = 8
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

settings = Settings()
