import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Mount

from tubescout.config import get_settings
from tubescout.exceptions import FetchError, InputValidationError, ParseError, RateLimitError
from tubescout.logging_config import configure_logging
from tubescout.mcp_server import mcp
from tubescout.routers.youtube import router as youtube_router


# --- Localhost-only middleware ---

class LocalhostOnlyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        client_host = request.client.host if request.client else None
        if client_host not in ("127.0.0.1", "::1", "localhost"):
            return JSONResponse(
                status_code=403,
                content={"error_code": "forbidden", "message": "Localhost access only"},
            )
        return await call_next(request)


# --- FastAPI app ---

api = FastAPI(title="Tubescout", version="0.1.0")
api.include_router(youtube_router)


@api.get("/api/status")
def api_status() -> dict:
    settings = get_settings()
    return {
        "ready": True,
        "throttle_seconds": settings.throttle_seconds,
        "max_execution_seconds": settings.max_execution_seconds,
    }


# --- Exception handlers ---

@api.exception_handler(InputValidationError)
async def input_error_handler(request: Request, exc: InputValidationError):
    return JSONResponse(status_code=400, content={"error_code": "invalid_input", "message": str(exc)})


@api.exception_handler(RateLimitError)
async def rate_limit_error_handler(request: Request, exc: RateLimitError):
    return JSONResponse(status_code=429, content={"error_code": "rate_limit", "message": str(exc)})


@api.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError):
    return JSONResponse(status_code=502, content={"error_code": "fetch_error", "message": str(exc)})


@api.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError):
    return JSONResponse(status_code=502, content={"error_code": "parse_error", "message": str(exc)})


# --- Starlette root app ---

mcp_app = mcp.http_app(path="/", stateless_http=True)

app = Starlette(
    middleware=[Middleware(LocalhostOnlyMiddleware)],
    routes=[
        Mount("/mcp", app=mcp_app),
        Mount("/", app=api),
    ],
)


def run():
    settings = get_settings()
    configure_logging(settings)
    uvicorn.run(
        "tubescout.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
