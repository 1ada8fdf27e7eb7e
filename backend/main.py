from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import estimates

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("cocomo")

app = FastAPI(
    title=settings.APP_NAME,
    description="COCOMO software effort, schedule and staffing estimates",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(estimates.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "cocomo-estimator"}


@app.on_event("startup")
def log_startup():
    logger.info("%s started, default project class %s",
                settings.APP_NAME, settings.DEFAULT_PROJECT_CLASS)
