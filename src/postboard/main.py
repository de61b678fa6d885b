from dotenv import load_dotenv

load_dotenv()

import logging
import os
from contextlib import asynccontextmanager

# Import third-party libraries
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

log_level = os.getenv("LOG_LEVEL", "INFO").upper()

# Configure basic logging before importing application modules
logging.basicConfig(
    level=log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler()],
    force=True,
)

logging.getLogger("uvicorn.access").setLevel(log_level)
logging.getLogger("uvicorn.error").setLevel(log_level)

logger = logging.getLogger(__name__)

from postboard.api import pages_api, posts_api
from postboard.config import get_settings
from postboard.database import create_database, log_server_version
from postboard.db.post_db import PostDB


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application initialization...")

    # --- Startup code ---
    try:
        database = create_database(get_settings())
        await database.connect()
        logger.info("Database connection pool initialized successfully")
    except Exception as e:
        logger.error("Failed to initialize database connection pool: %s", str(e), exc_info=True)
        raise

    await log_server_version(database)
    app.state.post_db = PostDB(database)

    try:
        # --- Application is running ---
        yield
    finally:
        # --- Shutdown code ---
        logger.info("Closing database connection pool...")
        await database.disconnect()
        logger.info("Application shutdown complete.")


app = FastAPI(title="Postboard API", lifespan=lifespan)

app.include_router(posts_api.router)
app.include_router(pages_api.router)

app.add_exception_handler(StarletteHTTPException, pages_api.not_found_handler)

# Enable CORS for all domains
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Enable gzip compression middleware
app.add_middleware(GZipMiddleware, minimum_size=500)


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
