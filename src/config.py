"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WEAPON_DATA_PATH = str(Path(__file__).resolve().parent / "data" / "weapons.json")


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Weapon catalog
    WEAPON_DATA_PATH: str = DEFAULT_WEAPON_DATA_PATH
    STARTING_DURABILITY: int = 3

    # Progression
    UPGRADE_INTERVAL: int = 3
    ENABLE_WEAPON_UNLOCKS: bool = True
    ENABLE_EFFECTS: bool = True

    # Sessions
    RNG_SEED: Optional[int] = None
    HISTORY_LIMIT: int = 50
    MAX_SESSIONS: int = 100


settings = Settings()
