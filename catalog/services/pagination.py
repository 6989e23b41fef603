import datetime
import typing
import pydantic
import catalog.errors


class PageRequest(typing.NamedTuple):
    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size


def make_page_request(page: int, size: int) -> PageRequest:
    if page < 0:
        raise catalog.errors.InvalidPageRequest(f"page must be >= 0, got {page}")
    if size < 1:
        raise catalog.errors.InvalidPageRequest(f"size must be >= 1, got {size}")
    return PageRequest(page=page, size=size)


class CommentItem(pydantic.BaseModel):
    comment_id: int
    book_id: int
    user_id: int
    author_identity: str
    body: str
    created_at: datetime.datetime

    model_config = pydantic.ConfigDict(from_attributes=True)


class CommentsPage(pydantic.BaseModel):
    items: typing.List[CommentItem]
    page: int
    size: int
    total_matches: int
    total_pages: int


def count_pages(total_matches: int, size: int) -> int:
    if total_matches <= 0:
        return 0
    return -(-total_matches // size)


def assemble_page(
    rows: typing.Sequence[typing.Any],
    total_matches: int,
    page_request: PageRequest
) -> CommentsPage:
    total_pages = count_pages(total_matches, page_request.size)

    # Past the last page is an empty page, not an error.
    if page_request.page >= total_pages:
        items = []
    else:
        items = [CommentItem.model_validate(row) for row in rows[:page_request.size]]

    return CommentsPage(
        items=items,
        page=page_request.page,
        size=page_request.size,
        total_matches=total_matches,
        total_pages=total_pages
    )
