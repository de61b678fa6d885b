import logging

from databases import Database, DatabaseURL

from postboard.config import Settings

logger = logging.getLogger(__name__)

POSTGRES_DIALECTS = ("postgresql", "postgres")


# PostgreSQL connection setup
def create_database(settings: Settings) -> Database:
    """
    Build the connection pool for the configured database URL.

    Pool sizing and TLS only apply to PostgreSQL. Any other backend (the
    SQLite files used in tests, for instance) is opened with its defaults.
    """
    url = DatabaseURL(settings.database_url)
    if url.dialect not in POSTGRES_DIALECTS:
        return Database(url)

    options = {
        "min_size": settings.pool_min_size,
        "max_size": settings.pool_max_size,
    }
    if settings.database_ssl:
        options["ssl"] = "require"
    return Database(url, **options)


async def log_server_version(database: Database) -> None:
    try:
        async with database.connection() as connection:
            version = await connection.fetch_val("SELECT version()")
        logger.info("Database server version: %s", version)
    except Exception as e:
        logger.warning("Could not read database server version: %s", str(e))
