import datetime
import logging
import typing
import fastapi
import sqlalchemy.ext.asyncio
from fastapi import Query, Path
import catalog.config
import catalog.database
import catalog.errors
import catalog.models.responses
import catalog.services.book_service
import catalog.services.comment_filters
import catalog.services.comment_service
import catalog.services.pagination
import catalog.utils.responses

logger = logging.getLogger(__name__)

router = fastapi.APIRouter(prefix="/api/v1", tags=["Comments"])

settings = catalog.config.settings


def _to_naive_utc(value: typing.Optional[datetime.datetime]) -> typing.Optional[datetime.datetime]:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc).replace(tzinfo=None)


@router.get(
    "/books/{book_id}/comments",
    response_model=catalog.models.responses.CommentsPageResponse,
    summary="Get comments for a book",
    description="""
    Retrieve a page of comments for a book, newest first.

    Comments with the same creation time are ordered by `comment_id`, newest first,
    so page boundaries are stable across repeated calls.

    **Filters (all optional, combined with AND):**
    - `author` - substring of the commenter's email (case-sensitive)
    - `since` - ISO-8601 timestamp; only comments created at or after it

    Requesting a page past the last one returns an empty `items` list together
    with the real `total_matches` and `total_pages`.

    **Examples:**
    - `/api/v1/books/7/comments?page=0&size=10`
    - `/api/v1/books/7/comments?author=alice&since=2026-01-01T00:00:00Z`
    """
)
async def get_book_comments(
    book_id: int = Path(..., gt=0, description="Book ID"),
    author: typing.Optional[str] = Query(None, max_length=255, description="Commenter email substring"),
    since: typing.Optional[datetime.datetime] = Query(None, description="Only comments created at or after this time"),
    page: int = Query(0, description="Zero-based page index"),
    size: int = Query(settings.default_page_size, le=settings.max_page_size, description="Comments per page"),
    session: sqlalchemy.ext.asyncio.AsyncSession = fastapi.Depends(catalog.database.get_session)
):
    try:
        page_request = catalog.services.pagination.make_page_request(page, size)
        await catalog.services.book_service.resolve_book(session, book_id)

        predicate = catalog.services.comment_filters.build_predicate(
            author.strip() if author else None,
            _to_naive_utc(since)
        )
        rows, total_matches = await catalog.services.comment_service.get_book_comments(
            session, book_id, predicate, page_request
        )
        return catalog.models.responses.CommentsPageResponse(
            data=catalog.services.pagination.assemble_page(rows, total_matches, page_request)
        )
    except catalog.errors.InvalidPageRequest as e:
        return catalog.utils.responses.error_response("invalid_page_request", str(e), status_code=400)
    except catalog.errors.StoreUnavailable as e:
        logger.error(f"Comment store unavailable for book {book_id}: {e}")
        return catalog.utils.responses.error_response("store_unavailable", str(e), status_code=503)
    except ValueError as e:
        if str(e) == "book_not_found":
            raise fastapi.HTTPException(status_code=404, detail=f"Book not found: {book_id}")
        raise


@router.get(
    "/users/{user_id}/comments",
    response_model=catalog.models.responses.CommentsPageResponse,
    summary="Get comments written by a user",
    description="""
    Retrieve a page of one user's comments across all books, newest first.

    **Example:** `/api/v1/users/3/comments?page=1&size=20`
    """
)
async def get_user_comments(
    user_id: int = Path(..., gt=0, description="User ID"),
    page: int = Query(0, description="Zero-based page index"),
    size: int = Query(settings.default_page_size, le=settings.max_page_size, description="Comments per page"),
    session: sqlalchemy.ext.asyncio.AsyncSession = fastapi.Depends(catalog.database.get_session)
):
    try:
        page_request = catalog.services.pagination.make_page_request(page, size)
        rows, total_matches = await catalog.services.comment_service.get_user_comments(
            session, user_id, page_request
        )
        return catalog.models.responses.CommentsPageResponse(
            data=catalog.services.pagination.assemble_page(rows, total_matches, page_request)
        )
    except catalog.errors.InvalidPageRequest as e:
        return catalog.utils.responses.error_response("invalid_page_request", str(e), status_code=400)
    except catalog.errors.StoreUnavailable as e:
        logger.error(f"Comment store unavailable for user {user_id}: {e}")
        return catalog.utils.responses.error_response("store_unavailable", str(e), status_code=503)
