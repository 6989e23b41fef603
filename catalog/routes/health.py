import datetime
import fastapi
import catalog.models.responses

router = fastapi.APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    response_model=catalog.models.responses.HealthResponse,
    summary="Basic health check",
    description="Returns basic health status of the catalog service"
)
async def health():
    return catalog.models.responses.HealthResponse(
        status="healthy",
        service="catalog",
        version="1.0.0",
        timestamp=datetime.datetime.now().isoformat()
    )
