from __future__ import annotations
import logging
import time

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from parcelplot.core.config import settings, configure_cors
from parcelplot.core.exceptions import validation_exception_handler

# Routers (import once, include once)
from parcelplot.api.v1.boundaries import router as boundaries_router
from parcelplot.api.v1.convert import router as convert_router
from parcelplot.api.v1.counties import router as counties_router
from parcelplot.api.v1.geometry import router as geometry_router
from parcelplot.api.v1.parsing import router as parsing_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
configure_cors(app)

# Global exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)

app.include_router(parsing_router)
app.include_router(geometry_router)
app.include_router(boundaries_router)
app.include_router(counties_router)
app.include_router(convert_router)


@app.middleware("http")
async def _log_requests(request, call_next):
    started = time.perf_counter()
    resp = await call_next(request)
    logger.info("%s %s -> %s (%.1f ms)", request.method, request.url.path,
                resp.status_code, (time.perf_counter() - started) * 1000)
    return resp
