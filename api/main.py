import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from authors import router as authors_router
from comments import router as comments_router
from core import db, settings
from posts import router as posts_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def route_table(app: FastAPI) -> list[tuple[str, str]]:
    """
    (METHOD, path) pairs for every documented endpoint, sorted by path.
    """
    routes = []
    for path, operations in app.openapi()["paths"].items():
        for method in operations:
            routes.append((method.upper(), path))
    return sorted(routes, key=lambda r: (r[1], r[0]))


def _log_routes(app: FastAPI) -> None:
    logger.info("Available endpoints:")
    for method, path in route_table(app):
        logger.info("  %-6s %s", method, path)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared by every request.
    app.state.pool = await db.create_pool()
    _log_routes(app)
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


app = FastAPI(title="blog-api", lifespan=lifespan)

# Cross-origin browser access only for origins listed in CORS_ORIGINS.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def handle_invalid_body(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("invalid_request_body errors=%s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request body."},
    )


app.include_router(posts_router.router, tags=["posts"])
app.include_router(authors_router.router, tags=["authors"])
app.include_router(comments_router.router, tags=["comments"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Starting blog server on port %s...", settings.port())
    uvicorn.run(app, host=settings.host(), port=settings.port())
