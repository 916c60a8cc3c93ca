"""Maze Solver API application."""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware

from maze_solver.config import get_settings
from maze_solver.api.routes import maze, solve
from maze_solver.core.library import get_maze_library

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("maze_solver")

limiter = Limiter(key_func=get_remote_address)


def client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Reply 429 once a client has used up its solve quota."""
    logger.warning(f"Throttled {client_host(request)} on {request.url.path}")
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many solve requests, try again later",
            "retry_after": str(exc.detail),
        },
    )


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tags each request with a short id and logs its outcome."""

    async def dispatch(self, request: Request, call_next):
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        started = time.perf_counter()
        outcome = "failed"

        try:
            response = await call_next(request)
            outcome = str(response.status_code)
            response.headers["X-Request-ID"] = request_id
            return response
        except Exception as e:
            outcome = f"failed ({type(e).__name__}: {e})"
            raise
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log = logger.error if outcome.startswith("failed") else logger.info
            log(
                f"[{request_id}] {request.method} {request.url.path} "
                f"{client_host(request)} -> {outcome} in {elapsed_ms:.1f}ms"
            )


@asynccontextmanager
async def lifespan(app: FastAPI):
    library = get_maze_library()
    logger.info(
        f"{settings.app_name} {settings.app_version} up, "
        f"{len(library)} bundled mazes"
    )
    yield
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Right-hand rule (wall follower) maze solver",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_middleware(RequestIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(maze.router, prefix="/v1")
app.include_router(solve.router, prefix="/v1")


@app.get("/health")
async def health_check() -> dict:
    return {"status": "ok", "version": settings.app_version}


@app.get("/")
async def root() -> dict:
    """Service name, version and docs location."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
