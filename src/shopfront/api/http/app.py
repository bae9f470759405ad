"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.openapi.utils import get_openapi
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.shopfront.api.http.app_data import ApplicationDependencies
from src.shopfront.api.http.routers import health, products, users
from src.shopfront.api.utils.app_startup import configure_logging
from src.shopfront.core.exceptions import ShopfrontError
from src.shopfront.core.services import DbSessionService, PasswordHasher
from src.shopfront.runtime.context import get_config

# Initialize logging
configure_logging()

_HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}


def _error_body(code: str, message: str) -> dict[str, str]:
    return {"code": code, "message": message}


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


_docs_enabled = (
    get_config().docs.enabled and get_config().app.environment != "production"
)

app = FastAPI(
    lifespan=lifespan,
    title=get_config().docs.title,
    description=get_config().docs.description,
    version=get_config().docs.version,
    openapi_tags=[tag.model_dump() for tag in get_config().docs.tags],
    docs_url="/docs" if _docs_enabled else None,
    redoc_url="/redoc" if _docs_enabled else None,
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]


def custom_openapi() -> dict[str, Any]:
    """OpenAPI schema with external docs and the declared apiKey scheme.

    The scheme is documentation only; no route requires it.
    """
    if app.openapi_schema:
        return app.openapi_schema

    docs = get_config().docs
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=app.openapi_tags,
    )
    schema["externalDocs"] = {
        "url": docs.external_docs_url,
        "description": docs.external_docs_description,
    }
    schema.setdefault("components", {})["securitySchemes"] = {
        "apiKey": {"type": "apiKey", "name": docs.api_key_header, "in": "header"}
    }
    app.openapi_schema = schema
    return schema


app.openapi = custom_openapi


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content=_error_body("internal_error", "Internal Server Error"),
                headers={"X-Request-ID": request_id},
            )


# --- Error envelope ---
@app.exception_handler(ShopfrontError)
async def shopfront_error_handler(request: Request, exc: ShopfrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc.__cause__ or exc).error(
            "{} on {} {}", type(exc).__name__, request.method, request.url.path
        )
    else:
        logger.info("{} ({}): {}", type(exc).__name__, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    logger.info("Request validation failed: {}", message)
    return JSONResponse(status_code=400, content=_error_body("validation_error", message))


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    code = _HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(code, str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


# --- Router registration ---
app.include_router(users.router)
app.include_router(products.router)
app.include_router(health.router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config)
    database_service.create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        password_hasher=PasswordHasher(rounds=config.security.bcrypt_rounds),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


# --- Route handlers ---


@app.get("/", tags=["code"])
async def root() -> dict[str, str]:
    return {"hello": "world"}
