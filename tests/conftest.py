import datetime
import pytest
import pytest_asyncio
import sqlalchemy
import sqlalchemy.ext.asyncio
import sqlalchemy.pool
from unittest.mock import AsyncMock, MagicMock
from sqlalchemy.ext.asyncio import AsyncSession
import catalog.models

BASE_TIME = datetime.datetime(2026, 1, 1, 12, 0, 0)

# Comment index (0..24) -> commenter user_id on book 1.
ALICE_INDEXES = {3: 1, 10: 4, 19: 1}
SHOUTING_ALICE_INDEX = 5
# Index 21 shares its timestamp with index 20.
TIED_INDEXES = (20, 21)
SINCE_INDEX = 18


@pytest.fixture
def mock_session():
    return AsyncMock(spec=AsyncSession)


def make_comment_row(
    comment_id: int = 1,
    book_id: int = 100,
    user_id: int = 10,
    author_identity: str = "reader@example.com",
    body: str = "Really enjoyed this book!",
    created_at: datetime.datetime = datetime.datetime(2026, 1, 1, 12, 0, 0)
):
    row = MagicMock()
    row.comment_id = comment_id
    row.book_id = book_id
    row.user_id = user_id
    row.author_identity = author_identity
    row.body = body
    row.created_at = created_at
    return row


@pytest.fixture
def mock_comment_row():
    return make_comment_row()


def make_list_result(items, count):
    count_result = MagicMock()
    count_result.scalar_one.return_value = count

    items_result = MagicMock()
    items_result.all.return_value = items

    return count_result, items_result


def comment_time(index: int) -> datetime.datetime:
    if index == TIED_INDEXES[1]:
        index = TIED_INDEXES[0]
    return BASE_TIME + datetime.timedelta(minutes=index)


def comment_author(index: int) -> int:
    if index in ALICE_INDEXES:
        return ALICE_INDEXES[index]
    if index == SHOUTING_ALICE_INDEX:
        return 5
    return 2 if index % 2 == 0 else 3


@pytest_asyncio.fixture
async def sqlite_engine():
    engine = sqlalchemy.ext.asyncio.create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=sqlalchemy.pool.StaticPool
    )

    @sqlalchemy.event.listens_for(engine.sync_engine, "connect")
    def _case_sensitive_like(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA case_sensitive_like = ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(catalog.models.Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine):
    session_maker = sqlalchemy.ext.asyncio.async_sessionmaker(sqlite_engine, expire_on_commit=False)
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(sqlite_session):
    """Book 1 holds 25 comments, book 2 holds 4.

    Comments are inserted evens first, then odds, so ``comment_id`` order
    differs from ``created_at`` order.
    """
    sqlite_session.add_all([
        catalog.models.User(user_id=1, email="alice@example.com"),
        catalog.models.User(user_id=2, email="bob@example.com"),
        catalog.models.User(user_id=3, email="carol@example.com"),
        catalog.models.User(user_id=4, email="malice@example.org"),
        catalog.models.User(user_id=5, email="ALICE@example.net"),
        catalog.models.Book(book_id=1, title="Dune"),
        catalog.models.Book(book_id=2, title="Emma"),
    ])
    await sqlite_session.flush()

    for index in list(range(0, 25, 2)) + list(range(1, 25, 2)):
        sqlite_session.add(catalog.models.Comment(
            book_id=1,
            user_id=comment_author(index),
            body=f"comment {index}",
            created_at=comment_time(index)
        ))
        await sqlite_session.flush()

    for index in range(4):
        sqlite_session.add(catalog.models.Comment(
            book_id=2,
            user_id=1,
            body=f"emma comment {index}",
            created_at=BASE_TIME + datetime.timedelta(days=1, minutes=index)
        ))
    await sqlite_session.commit()
    return sqlite_session
