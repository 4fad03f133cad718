from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from swot_scorer.api import router
from swot_scorer.core import get_logger, settings
from swot_scorer.services import get_container

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Iniciando SWOT Scorer [{settings.app_env}]")
    yield
    await get_container().aclose()
    logger.info("Cerrando SWOT Scorer")


app = FastAPI(
    title="SWOT Scenario Scorer",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {type(exc).__name__}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


app.include_router(router, prefix="/api", tags=["SWOT"])


@app.get("/health")
async def health_check():
    return {"status": "ok", "env": settings.app_env}
