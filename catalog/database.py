import logging
import sqlalchemy.ext.asyncio
import catalog.config

logger = logging.getLogger(__name__)

engine: sqlalchemy.ext.asyncio.AsyncEngine = None
async_session_maker: sqlalchemy.ext.asyncio.async_sessionmaker = None


async def init_db() -> None:
    global engine, async_session_maker

    settings = catalog.config.settings
    engine_options = {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
        "echo": settings.debug,
    }
    # Page and count reads share one transaction; this level makes them share a snapshot.
    if settings.db_read_isolation_level:
        engine_options["isolation_level"] = settings.db_read_isolation_level

    engine = sqlalchemy.ext.asyncio.create_async_engine(settings.database_url, **engine_options)
    async_session_maker = sqlalchemy.ext.asyncio.async_sessionmaker(
        engine,
        class_=sqlalchemy.ext.asyncio.AsyncSession,
        expire_on_commit=False
    )
    logger.info(f"Database engine created for {settings.db_host}:{settings.db_port}/{settings.db_name}")


async def close_db() -> None:
    global engine
    if engine:
        await engine.dispose()
        engine = None


async def get_session() -> sqlalchemy.ext.asyncio.AsyncSession:
    async with async_session_maker() as session:
        yield session
