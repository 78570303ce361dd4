from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

import models  # noqa: F401  registers tables on Base.metadata
from api import children, exercises, languages, scores
from core.config import settings
from core.database import engine, Base
from core.logging import SERVICE_VERSION, configure_logging, get_logger
from core.middleware import RequestLoggingMiddleware
from core.errors import register_error_handlers
from languages.french import check_tables

# Initialize logging before anything else
configure_logging(
    level=settings.LOG_LEVEL,
    json_logs=settings.LOG_JSON,
    log_sql=settings.LOG_SQL,
)

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info("startup", message="SoSchool API starting up")

    # Broken conjugation tables must stop the app, not surface per request
    check_tables()
    log.info("tables_checked", message="French tables are consistent")

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("database_connected", message="Database tables initialized")
    except SQLAlchemyError as e:
        log.warning("database_unavailable", error=str(e), message="App starting without database")

    yield

    log.info("shutdown", message="SoSchool API shutting down")
    await engine.dispose()
    log.debug("database_disposed", message="Database connections closed")


app = FastAPI(
    title="SoSchool API",
    description="French conjugation exercises (avoir, être, aller) for young learners, with per-child best scores",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

# Register structured error handlers
register_error_handlers(app)

# Middleware (order matters: last added = first executed)
app.add_middleware(RequestLoggingMiddleware, slow_threshold_ms=settings.SLOW_REQUEST_MS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(exercises.router, prefix="/api/exercises", tags=["exercises"])
app.include_router(children.router, prefix="/api/children", tags=["children"])
app.include_router(scores.router, prefix="/api/scores", tags=["scores"])
app.include_router(languages.router, prefix="/api/languages", tags=["languages"])


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": SERVICE_VERSION}


if __name__ == "__main__":
    import uvicorn

    log.info("server_config", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT, debug=settings.APP_DEBUG)
    uvicorn.run(
        "main:app",
        host=settings.BACKEND_HOST,
        port=settings.BACKEND_PORT,
        reload=settings.APP_DEBUG,
        log_config=None,  # Disable uvicorn's default logging, we handle it
    )
