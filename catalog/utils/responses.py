import typing
import fastapi
import catalog.models.responses


def error_response(
    code: str,
    message: str,
    details: typing.Dict[str, typing.Any] = None,
    status_code: int = 400
) -> fastapi.responses.JSONResponse:
    response = catalog.models.responses.APIResponse(
        success=False,
        data=None,
        error=catalog.models.responses.ErrorDetail(
            code=code,
            message=message,
            details=details or {}
        )
    )
    return fastapi.responses.JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json")
    )
