import sqlalchemy
import sqlalchemy.ext.asyncio
import catalog.models.book
import catalog.services.store


async def resolve_book(
    session: sqlalchemy.ext.asyncio.AsyncSession,
    book_id: int
) -> catalog.models.book.Book:
    stmt = sqlalchemy.select(catalog.models.book.Book).where(
        catalog.models.book.Book.book_id == book_id
    )
    result = await catalog.services.store.bounded(session.execute(stmt))
    row = result.scalar_one_or_none()
    if row is None:
        raise ValueError("book_not_found")
    return row
