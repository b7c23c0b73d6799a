"""
Application configuration management
"""

from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Seat Booking"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False  # Default to production-safe
    API_PREFIX: str = ""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database
    DATABASE_URL: str  # Must be provided via environment

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if v.startswith('postgresql://'):
            v = v.replace('postgresql://', 'postgresql+asyncpg://', 1)
        return v
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 40
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_ECHO: bool = False

    # Monitoring
    PROMETHEUS_ENABLED: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    LOG_FILE: str = "logs/app.log"

    # Booking
    MAX_SEATS_PER_BOOKING: int = 10
    BOOKING_ID_LENGTH: int = 12
    BOOKING_ID_MAX_ATTEMPTS: int = 5

    @field_validator('BOOKING_ID_LENGTH')
    @classmethod
    def validate_booking_id_length(cls, v: int) -> int:
        if v < 8:
            raise ValueError("BOOKING_ID_LENGTH must be at least 8 characters")
        return v

    # Data import
    PRICE_DATA_FILE: str = "data/seat_prices.json"
    SEAT_DATA_FILE: str = "data/seats.csv"
    IMPORT_ON_STARTUP: bool = False

    @property
    def is_testing(self) -> bool:
        return self.APP_ENV == "testing"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


# Create global settings instance
settings = Settings()
