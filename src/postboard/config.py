import os
from dataclasses import dataclass

DEFAULT_PORT = 3000


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes", "require")


@dataclass(frozen=True)
class Settings:
    database_url: str
    database_ssl: bool = True
    pool_min_size: int = 5
    pool_max_size: int = 20
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


def get_settings() -> Settings:
    """
    Build the service settings from the process environment.

    Raises:
        ValueError: if DATABASE_URL is not set.
    """
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise ValueError("Missing required environment variable: DATABASE_URL")

    return Settings(
        database_url=database_url,
        database_ssl=_env_flag("DATABASE_SSL", "true"),
        pool_min_size=int(os.getenv("DATABASE_POOL_MIN_SIZE", 5)),
        pool_max_size=int(os.getenv("DATABASE_POOL_MAX_SIZE", 20)),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
    )
