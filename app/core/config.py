from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./hospital.db"

    APP_ENV: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    STATIC_DIR: str = "dist"
    DEV_SERVER_URL: str = "http://localhost:5173"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    LOG_LEVEL: str = "INFO"

    # 404 on update/delete of an id that matched no row
    STRICT_ID_CHECKS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

settings = Settings()
