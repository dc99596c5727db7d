from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.endpoints.channels import router as channels_router
from app.api.v1.endpoints.health import router as health_router
from app.api.v1.endpoints.subtasks import router as subtasks_router
from app.api.v1.endpoints.tags import router as tags_router
from app.api.v1.endpoints.tasks import router as tasks_router
from app.core.database import DatabaseSessionManager
from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import require_api_key
from app.utils.seed import seed_defaults

from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address
import logging
from contextlib import asynccontextmanager
from app.core.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=settings.RATE_LIMIT_ENABLED,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""

    session_manager = DatabaseSessionManager(settings.DATABASE_URL, echo=settings.DB_ECHO)
    try:
        logger.info("🚀 Starting task board API...")

        logger.info("🔌 Initializing database connection pool...")
        await session_manager.init()
        app.state.db = session_manager
        logger.info("✅ Database ready")

        if settings.SEED_ON_STARTUP:
            logger.info("🌱 Seeding default tags and channels...")
            async with session_manager.get_session() as session:
                created = await seed_defaults(session)
            logger.info(f"✅ Seeding complete: {created}")

    except Exception as e:
        logger.critical(f"🔥 Application startup failed: {str(e)}")
        await session_manager.close()
        raise

    try:
        logger.info("🏁 Task board API startup complete")
        yield
    finally:
        logger.info("🛑 Beginning application shutdown...")
        logger.info("🔌 Closing database connections...")
        await session_manager.close()
        logger.info("👋 Application shutdown complete")


app = FastAPI(
    title="Task Board API",
    description="REST API for tasks, subtasks, tags and channels",
    version="1.0.0",
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "x-api-key"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation Error: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(NotFoundError)
async def not_found_exception_handler(request: Request, exc: NotFoundError):
    logger.info(f"Not found: {exc.message}")
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_exception_handler(request: Request, exc: ConflictError):
    logger.warning(f"Conflict: {exc.message}")
    return JSONResponse(status_code=409, content={"detail": exc.message})


protected = [Depends(require_api_key)]

app.include_router(health_router, prefix=settings.API_PREFIX)
app.include_router(tasks_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(subtasks_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(tags_router, prefix=settings.API_PREFIX, dependencies=protected)
app.include_router(channels_router, prefix=settings.API_PREFIX, dependencies=protected)

logger.info(f"✅ Loaded {len(app.routes)} routes")
