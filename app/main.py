"""
Main FastAPI application for the Real Estate Manager API
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.routes import properties, support, app_state, health
from app.core.config import settings
from app.core.database import check_connection
from app.core.logging import get_logger, setup_logging, RequestResponseLoggingMiddleware
from app.core.openapi import openapi_options

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'development' if settings.debug else 'production'}")
    for warning in settings.get_config_warnings():
        logger.warning(f"Configuration warning: {warning}")

    # Each request opens its own connection; this ping only reports reachability
    if not await check_connection():
        logger.warning("Database not reachable at startup (requests will retry per call)")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(lifespan=lifespan, **openapi_options())


# Allow all origins by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestResponseLoggingMiddleware)


# Centralized exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {"message": ...}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    # Convert errors to JSON serializable format
    serializable_errors = []
    for error in exc.errors():
        serializable_error = dict(error)
        for key, value in serializable_error.items():
            if key == 'ctx' and isinstance(value, dict):
                serializable_error[key] = {k: str(v) if not isinstance(v, (str, int, float, bool, type(None))) else v
                                          for k, v in value.items()}
        serializable_error.pop("input", None)
        serializable_errors.append(serializable_error)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Bad request. Check your request data.",
            "details": serializable_errors
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unexpected errors"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"}
    )


# Router registration
app.include_router(properties.router, prefix=f"{settings.api_prefix}/properties", tags=["Properties"])
app.include_router(support.router, prefix=f"{settings.api_prefix}/pages", tags=["Support"])
# Documented path for the FAQ listing
app.include_router(support.router, prefix=f"{settings.api_prefix}/support", tags=["Support"],
                   include_in_schema=False)
app.include_router(app_state.router, prefix=f"{settings.api_prefix}/viewPropertiesToggleState", tags=["AppState"])
app.include_router(health.router, prefix=settings.api_prefix, tags=["Health"])


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.version,
        "docs": settings.docs_url,
        "health": f"{settings.api_prefix}/health"
    }


def run():
    """Console entry point"""
    import uvicorn
    logger.info(f"Server running on port {settings.port}")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )


if __name__ == "__main__":
    run()
