import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"

    BACKEND_CORS_ORIGINS: str = '["http://localhost:5173","http://localhost:3000"]'

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Marketplace Dashboard API"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Admin list endpoints
    PAGINATION_DEFAULT_LIMIT: int = 10
    PAGINATION_MAX_LIMIT: int = 100
    # Keeps (page - 1) * limit far inside a 64-bit OFFSET
    PAGINATION_MAX_PAGE: int = 1_000_000

    # Composite dashboard
    REGIONAL_BREAKDOWN_LIMIT: int = 10
    TOP_REGIONS_LIMIT: int = 5

    # Unauthenticated dashboard counts, per client address
    PUBLIC_RATE_LIMIT: str = "60/minute"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
