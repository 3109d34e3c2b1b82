from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exception_handlers import (
    http_exception_handler,
    request_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.api.access_log import AccessLogMiddleware
from catalog.api.images.router import images_router
from catalog.api.items.router import items_router
from catalog.app.config_reader import config
from database import engine, init_db
from models.message import MessageOutput

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Create tables once per process
    await init_db(engine)
    try:
        yield
    finally:
        await engine.dispose()


app = FastAPI(
    title="Item catalog API server",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_allowed_origins(),
    allow_methods=["GET", "PUT", "POST", "DELETE"],
)
app.add_middleware(AccessLogMiddleware)

app.include_router(items_router)
app.include_router(images_router)


@app.get("/", response_model=MessageOutput)
async def root():
    return MessageOutput(message="Hello, world!")


@app.exception_handler(StarletteHTTPException)
async def custom_http_exception_handler(request, exc: StarletteHTTPException):
    logger.debug(f"{exc.__class__.__name__}: {repr(exc.detail)}")
    return await http_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    logger.debug(f"Request validation error: {exc}")
    return await request_validation_exception_handler(request, exc)
