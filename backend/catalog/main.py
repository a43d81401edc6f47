from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.errors import register_error_handlers
from catalog.api.health import router as health_router
from catalog.api.routes_catalogue import router as catalogue_router
from catalog.config import settings
from catalog.db import init_db
from catalog.utils.log import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    log = configure_logging(settings.LOG_LEVEL)
    init_db(reset=settings.RESET_DB)
    log.info("Catalog service ready")
    yield


app = FastAPI(title="Product Catalog - Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health_router, prefix=settings.API_PREFIX, tags=["health"])

app.include_router(
    catalogue_router, prefix=f"{settings.API_PREFIX}/products", tags=["catalogue"]
)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)
