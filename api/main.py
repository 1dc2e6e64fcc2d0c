from contextlib import asynccontextmanager
import logging
import os
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import router as auth_router
from core import db
from core.errors import install_error_handlers
from core.middleware import register_middleware
from users import router as users_router

DEFAULT_PORT = 4001


def log_level() -> int:
    raw = os.environ.get("LOG_LEVEL", "").strip().upper()
    level = logging.getLevelName(raw) if raw else logging.INFO
    # getLevelName returns a "Level X" string for unknown names.
    if not isinstance(level, int):
        return logging.INFO
    return level


logging.basicConfig(
    level=log_level(),
    format="%(asctime)s  %(levelname)-8s  %(name)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def listen_port() -> int:
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_PORT


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "*").strip() or "*"
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool and table once per process.
    await db.init_pool()
    await db.init_schema(db.pool())
    try:
        yield
    finally:
        await db.close_pool()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Simple SignOn API",
        version="1.0.0",
        description="User registration, login and lookup.",
        terms_of_service="http://example.com/terms/",
        contact={
            "name": "API Support",
            "url": "http://www.example.com/support",
            "email": "support@example.com",
        },
        servers=[
            {
                "url": f"http://localhost:{listen_port()}",
                "description": "Simple SignOn API Documentation",
            }
        ],
        docs_url="/api-docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    # Any origin may call the API.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_middleware(app)
    install_error_handlers(app)

    app.include_router(users_router.router, prefix="/api", tags=["Users"])
    app.include_router(auth_router.router, prefix="/api", tags=["Users"])

    @app.get("/health", include_in_schema=False)
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/", include_in_schema=False)
    def root() -> dict:
        return {"message": "simple signon api"}

    return app


app = create_app()


def run() -> None:
    port = listen_port()
    logger.info("Server runs on port %d", port)
    uvicorn.run(
        "main:app",
        host=os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=port,
    )


if __name__ == "__main__":
    run()
