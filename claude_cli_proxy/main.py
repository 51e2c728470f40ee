import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import APP_VERSION, LOG_LEVEL_FROM_ENV, CORS_ALLOW_ORIGINS
from .core.logging_utils import configure_logging
from .api import admin as admin_router
from .api import cli_input as cli_input_router
from .services.conversion import list_model_ids

configure_logging(LOG_LEVEL_FROM_ENV)

logger = logging.getLogger("ClaudeCliProxy.Main")


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    logger.info(f"Lifespan: starting Claude CLI Proxy v{APP_VERSION}")
    logger.info(f"Lifespan: {len(list_model_ids())} model ids registered")
    yield
    logger.info("Lifespan: shutdown complete.")


app = FastAPI(
    title="Claude CLI Proxy",
    description=f"OpenAI chat request to Claude CLI input adapter, version: {APP_VERSION}",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(cli_input_router.router)
logger.info("Conversion routes loaded at /v1/cli-input and /v1/models")

app.include_router(admin_router.router, prefix="/admin", tags=["Admin"])
logger.info("Admin routes loaded at /admin")


@app.get("/", status_code=200, include_in_schema=False, tags=["Utilities"])
async def root():
    return {
        "message": "Claude CLI Proxy is running",
        "version": APP_VERSION,
        "status": "ok",
        "endpoints": {
            "cli_input": "/v1/cli-input",
            "models": "/v1/models",
            "logs": "/admin/logs",
            "health": "/health",
            "docs": "/docs",
        }
    }


@app.get("/health", status_code=200, include_in_schema=False, tags=["Utilities"])
async def health_check():
    return {"status": "ok", "app_version": APP_VERSION}
