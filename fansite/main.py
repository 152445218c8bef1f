import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fansite.api.routes_audit import router as audit_router
from fansite.api.routes_content import router as content_router
from fansite.api.routes_i18n import router as i18n_router
from fansite.api.routes_logs import LOG_FORMAT, log_handler, router as logs_router
from fansite.api.routes_settings import router as settings_router
from fansite.api.routes_videos import router as videos_router
from fansite.config import get_config
from fansite.fixtures import get_fixture_store
from fansite.middleware.api_guard import ApiGuardMiddleware, ConfigCORSMiddleware

__version__ = "1.2.0"

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    stream=sys.stdout,
)
logging.getLogger().addHandler(log_handler)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_config()
    store = get_fixture_store()
    logger.info(
        "Fan site API starting (default locale %s, dev mode %s, data %s)",
        config.default_locale, config.dev_mode, store.data_dir,
    )
    yield


app = FastAPI(title="Yang Hansen Fan Site", version=__version__, lifespan=lifespan)

app.add_middleware(ApiGuardMiddleware)
app.add_middleware(
    ConfigCORSMiddleware,
    allow_origins=get_config().api_guard.allowed_origins,
    allow_credentials=True,  # locale cookie
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept-Language"],
)

app.include_router(content_router)
app.include_router(videos_router)
app.include_router(settings_router)
app.include_router(i18n_router)
app.include_router(audit_router)
app.include_router(logs_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
