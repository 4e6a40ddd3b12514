"""
Muro - social content backend
Main FastAPI application: accounts, stories, posts, likes, comments and uploads
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from muro.core import config
from muro.core.db.engine import RecordStore, store
from muro.core.db.session import get_store
from muro.core.errors import AppError
from muro.core.logger import configure_app_logging, get_logger
from muro.core.middleware import SecurityHeadersMiddleware, RequestLoggingMiddleware
from muro.api.router import router as api_router

# Configure application logging
configure_app_logging(level=config.LOG_LEVEL, log_to_file=config.LOG_TO_FILE)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Best-effort: the app still starts when the store is down and the
    # availability gate answers for it
    if store.is_available():
        logger.info("Record store connected")
        if config.CREATE_TABLES:
            try:
                store.create_tables()
            except SQLAlchemyError as e:
                logger.error(f"Could not create tables: {e}")
    else:
        logger.error("Record store unreachable at startup")
    yield
    store.engine.dispose()


app = FastAPI(title="Muro", debug=config.DEBUG, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)

logger.info("Muro application initialized")


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"success": False, "message": message}, status_code=status_code)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
    logger.warning(f"Invalid request to {request.url.path}: {fields}")
    return error_response(400, f"Datos no válidos: {', '.join(fields)}")


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Store error on {request.method} {request.url.path}")
    underlying = getattr(exc, "orig", None) or exc
    return error_response(500, f"Error en el servidor: {underlying}")


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Driver errors SQLAlchemy does not wrap (e.g. OverflowError) and
    # filesystem failures while storing uploads land here
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, f"Error en el servidor: {exc}")


@app.get("/")
def health(record_store: RecordStore = Depends(get_store)):
    """Liveness probe; reports store reachability without gating on it"""
    return {"status": "ok", "dbConnected": record_store.is_available()}


app.include_router(api_router)
