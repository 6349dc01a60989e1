import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from doctranslate import __version__
from doctranslate.api import router as documents_router
from doctranslate.config import get_settings
from doctranslate.errors import DocumentTranslatorError
from doctranslate.logging_config import configure_logging
from doctranslate.telemetry import emit_app_startup_event, emit_exception

configure_logging(get_settings().log_level)

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Document Translator API", version=__version__)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Content-Disposition"],
)
app.include_router(documents_router)


@app.on_event("startup")
async def _startup() -> None:
    emit_app_startup_event()


@app.exception_handler(DocumentTranslatorError)
async def _document_error_handler(request: Request, exc: DocumentTranslatorError) -> JSONResponse:
    if exc.status_code >= 500:
        emit_exception(module=__name__, error=exc, path=request.url.path)
    else:
        LOGGER.info("Rejected %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOGGER.info("Malformed request body for %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "Malformed request body"})


@app.exception_handler(Exception)
async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    emit_exception(module=__name__, error=exc, path=request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/", response_class=PlainTextResponse)
def read_root() -> str:
    """Healthcheck endpoint for the service."""
    return "ok"


@app.get("/healthz", response_class=PlainTextResponse)
def healthcheck() -> str:
    """Liveness probe used by container orchestrators."""
    return "ok"
