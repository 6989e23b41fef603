import typing
import pydantic
import catalog.services.pagination


class ErrorDetail(pydantic.BaseModel):
    code: str
    message: str
    details: typing.Dict[str, typing.Any] = pydantic.Field(default_factory=dict)


class APIResponse(pydantic.BaseModel):
    success: bool
    data: typing.Optional[typing.Any] = None
    error: typing.Optional[ErrorDetail] = None


class CommentsPageResponse(pydantic.BaseModel):
    success: bool = True
    data: catalog.services.pagination.CommentsPage
    error: typing.Optional[ErrorDetail] = None

    model_config = pydantic.ConfigDict(
        json_schema_extra={
            "example": {
                "success": True,
                "data": {
                    "items": [
                        {
                            "comment_id": 42,
                            "book_id": 7,
                            "user_id": 3,
                            "author_identity": "alice@example.com",
                            "body": "Loved the second half.",
                            "created_at": "2026-01-01T12:00:00"
                        }
                    ],
                    "page": 0,
                    "size": 20,
                    "total_matches": 1,
                    "total_pages": 1
                },
                "error": None
            }
        }
    )


class HealthResponse(pydantic.BaseModel):
    status: str
    service: str
    version: str
    timestamp: str
