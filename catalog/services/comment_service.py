import datetime
import typing
import sqlalchemy
import sqlalchemy.ext.asyncio
import catalog.models.comment
import catalog.models.user
import catalog.services.pagination
import catalog.services.store

Comment = catalog.models.comment.Comment
User = catalog.models.user.User

_COMMENT_ORDER = (Comment.created_at.desc(), Comment.comment_id.desc())


def _comment_columns() -> typing.Tuple[typing.Any, ...]:
    return (
        Comment.comment_id,
        Comment.book_id,
        Comment.user_id,
        User.email.label("author_identity"),
        Comment.body,
        Comment.created_at,
    )


async def _count_and_page(
    session: sqlalchemy.ext.asyncio.AsyncSession,
    conditions: typing.Sequence[sqlalchemy.ColumnElement[bool]],
    page_request: catalog.services.pagination.PageRequest
) -> typing.Tuple[typing.List[typing.Any], int]:
    count_stmt = sqlalchemy.select(sqlalchemy.func.count()).select_from(Comment).join(
        User, User.user_id == Comment.user_id
    ).where(*conditions)
    count_result = await session.execute(count_stmt)
    total_count = count_result.scalar_one()

    stmt = sqlalchemy.select(*_comment_columns()).join(
        User, User.user_id == Comment.user_id
    ).where(*conditions).order_by(*_COMMENT_ORDER).limit(page_request.size).offset(page_request.offset)

    result = await session.execute(stmt)
    return list(result.all()), total_count


async def get_book_comments(
    session: sqlalchemy.ext.asyncio.AsyncSession,
    book_id: int,
    predicate: sqlalchemy.ColumnElement[bool],
    page_request: catalog.services.pagination.PageRequest
) -> typing.Tuple[typing.List[typing.Any], int]:
    """Return one ordered page of a book's comments and the total match count.

    The count and the page are read in the same session transaction under the
    same conditions. Unless the engine runs at REPEATABLE READ or stricter, a
    comment committed between the two reads can make the count differ from
    what paging observes by the number of such inserts.
    """
    conditions = [Comment.book_id == book_id, predicate]
    return await catalog.services.store.bounded(_count_and_page(session, conditions, page_request))


async def get_user_comments(
    session: sqlalchemy.ext.asyncio.AsyncSession,
    user_id: int,
    page_request: catalog.services.pagination.PageRequest
) -> typing.Tuple[typing.List[typing.Any], int]:
    conditions = [Comment.user_id == user_id]
    return await catalog.services.store.bounded(_count_and_page(session, conditions, page_request))


async def create_comment(
    session: sqlalchemy.ext.asyncio.AsyncSession,
    user_id: int,
    book_id: int,
    body: str,
    created_at: typing.Optional[datetime.datetime] = None
) -> catalog.models.comment.Comment:
    row = Comment(
        user_id=user_id,
        book_id=book_id,
        body=body
    )
    if created_at is not None:
        row.created_at = created_at
    session.add(row)
    await session.commit()
    await session.refresh(row)
    return row
