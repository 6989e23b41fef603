import asyncio
import typing
import sqlalchemy.exc
import catalog.config
import catalog.errors

T = typing.TypeVar("T")

_STORE_ERRORS = (
    sqlalchemy.exc.OperationalError,
    sqlalchemy.exc.InterfaceError,
    sqlalchemy.exc.TimeoutError,
    OSError,
)


async def bounded(read: typing.Awaitable[T]) -> T:
    """Await a store read under ``db_statement_timeout``.

    Timeouts and connection-level failures become ``StoreUnavailable``;
    cancellation by the caller propagates and aborts the read.
    """
    try:
        return await asyncio.wait_for(read, timeout=catalog.config.settings.db_statement_timeout)
    except asyncio.TimeoutError as e:
        raise catalog.errors.StoreUnavailable("store timed out") from e
    except _STORE_ERRORS as e:
        raise catalog.errors.StoreUnavailable(f"store unavailable: {e}") from e
