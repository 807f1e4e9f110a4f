# app/config/settings.py

from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    ENV: str = "development"
    GROUP_SIZE_DEFAULT: int = 4
    RANDOM_SEED: Optional[int] = None  # set for reproducible allocations
    EXPORT_FILENAME: str = "coffee_roulette_groups.csv"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"

settings = Settings()
