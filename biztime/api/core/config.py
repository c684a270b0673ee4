from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Any SQLAlchemy URL; SQLite file in the working dir by default
    DATABASE_URL: str = "sqlite:///./biztime.db"
    SQL_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # uvicorn
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000


settings = Settings()
