import logging
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.logging_config import configure_logging
from app.routes import bookings, cars, travel, users
from core.config import get_settings
from core.database import init_db
from core.errors import AccountError

# Ensure .env values are loaded even if uvicorn is launched without `dotenv run`.
load_dotenv(override=True)

log = logging.getLogger("api")
access_log = logging.getLogger("api.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(get_settings())
    init_db()
    yield


app = FastAPI(title="Safar Travel Agency API", lifespan=lifespan)


app.include_router(users.router)
app.include_router(travel.router)
app.include_router(cars.router)
app.include_router(bookings.router)


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


def _describe(error: dict) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    log.info("%s %s rejected: %d validation error(s)", request.method, request.url.path, len(errors))
    return JSONResponse(
        {"message": "; ".join(_describe(e) for e in errors), "errors": jsonable_encoder(errors)},
        status_code=422,
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse({"message": exc.detail}, status_code=exc.status_code, headers=exc.headers)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    return response


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_log.info(
        '%s "%s %s" %s %.1fms',
        request.client.host if request.client else "-",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def _cors_origins():
    try:
        return get_settings().cors_origins
    except RuntimeError as exc:
        log.warning("Settings unavailable at import (%s); CORS limited to localhost:3000", exc)
        return ["http://localhost:3000"]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/", response_class=PlainTextResponse)
def root():
    log.info("Root URL Accessed")
    return "Hello, World!"
