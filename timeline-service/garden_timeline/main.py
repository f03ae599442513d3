import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import garden_timeline.core.startup as startup
from garden_timeline.api.timeline import router as timeline_router
from garden_timeline.core.config import CORS_ORIGINS, LOG_LEVEL, SERVICE_NAME

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Topic dictionaries are small; load them before serving
    logger.info("[LIFESPAN] Loading topic dictionaries...")
    startup.load_resources()
    yield


app = FastAPI(
    title=SERVICE_NAME,
    version="1.0.0",
    lifespan=lifespan
)

# ===== MIDDLEWARE =====
@app.middleware("http")
async def log_requests(request, call_next):
    start_time = time.time()
    path = request.url.path
    logger.info("📥 [REQUEST] %s %s", request.method, path)
    response = await call_next(request)
    duration = time.time() - start_time
    logger.info(
        "📤 [RESPONSE] %s %s | Status: %s | %.3fs",
        request.method, path, response.status_code, duration,
    )
    return response

# ===== CORS =====
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ===== ROUTER =====
app.include_router(timeline_router, prefix="/api")

# ===== HEALTH CHECK =====
@app.get("/health")
def health():
    """Basic health check for load balancers."""
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "service": SERVICE_NAME,
        "status": "ready" if startup.is_ready() else "loading",
        "ready": startup.is_ready(),
        "languages": startup.supported_languages(),
        "error": startup.LOADING_ERROR,
    }
