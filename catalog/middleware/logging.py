import time
import logging
import fastapi
import starlette.middleware.base

logger = logging.getLogger(__name__)


class LoggingMiddleware(starlette.middleware.base.BaseHTTPMiddleware):
    async def dispatch(self, request: fastapi.Request, call_next):
        start_time = time.perf_counter()
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        logger.info(f"Request: {request.method} {target}")

        response = await call_next(request)

        process_time = time.perf_counter() - start_time
        log = logger.warning if response.status_code >= 500 else logger.info
        log(
            f"Response: {request.method} {target} "
            f"- Status: {response.status_code} - Duration: {process_time:.3f}s"
        )

        response.headers["X-Process-Time"] = f"{process_time:.6f}"

        return response


def setup_logging_middleware(app: fastapi.FastAPI):
    app.add_middleware(LoggingMiddleware)
