import logging
import sys
import signal
import contextlib
import fastapi
import uvicorn
import catalog.config
import catalog.database
import catalog.routes.health
import catalog.routes.comments
import catalog.middleware.logging as logging_middleware

settings = catalog.config.settings

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    logger.info("Starting Catalog service...")
    await catalog.database.init_db()
    logger.info("Catalog service started successfully")

    yield

    logger.info("Shutting down Catalog service...")
    await catalog.database.close_db()
    logger.info("Catalog service shut down successfully")


app = fastapi.FastAPI(
    title="Catalog API",
    description="""
    ## Catalog Service

    Read access to book comments with optional filtering and stable pagination.

    ### Features

    - Book comments, newest first, filterable by commenter and creation time
    - Per-user comment listings
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

logging_middleware.setup_logging_middleware(app)

app.include_router(catalog.routes.health.router)
app.include_router(catalog.routes.comments.router)


def handle_shutdown(signum, frame):
    logger.info(f"Received signal {signum}, initiating graceful shutdown...")
    sys.exit(0)


if __name__ == "__main__":
    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    uvicorn.run(
        "catalog.main:app",
        host=settings.catalog_host,
        port=settings.catalog_http_port,
        workers=settings.catalog_workers,
        log_level=settings.log_level.lower(),
        access_log=True
    )
