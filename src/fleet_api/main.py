import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import JSONResponse
from src.fleet_api.analytics.dependencies import get_analytics_service
from src.fleet_api.analytics.routes import analytics_router
from src.fleet_api.config import get_settings
from src.fleet_api.health_check.routes import health_router
from src.fleet_api.logging_config import setup_logging
from src.fleet_api.roster.exceptions import RosterFormatError, RosterUnavailableError

settings = get_settings()
setup_logging(settings.LOG_DIR)
logger = logging.getLogger(__name__)
PROJECT_NAME = settings.PROJECT_NAME
FastAPI_API_KEY_HEADER = settings.FASTAPI_API_KEY_HEADER
ALL_CORS_ORIGINS = settings.all_cors_origins


# Custom OpenAPI schema to include API key security
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=PROJECT_NAME,
        version="0.1.0",
        description="Fuel efficiency and financial impact analytics for a fleet roster",
        routes=app.routes,
    )

    if "components" not in openapi_schema:
        openapi_schema["components"] = {}

    openapi_schema["components"]["securitySchemes"] = {
        "APIKeyHeader": {
            "type": "apiKey",
            "in": "header",
            "name": FastAPI_API_KEY_HEADER,
        }
    }

    for path in openapi_schema["paths"].values():
        for method in path.values():
            method.setdefault("security", []).append({"APIKeyHeader": []})

    app.openapi_schema = openapi_schema
    return app.openapi_schema


@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    try:
        service = get_analytics_service()
        records = service.roster_repo.fetch_all()
        logger.info(
            "Roster ready: %d vehicles, %d-day window",
            len(records),
            service.config.window_days,
        )
        logger.info("Startup complete")
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}")
        raise

    yield

    logger.info("Shutdown complete")


app = FastAPI(title=PROJECT_NAME, version="0.1.0", lifespan=lifespan)
app.openapi = custom_openapi  # type: ignore[method-assign]


@app.exception_handler(RosterUnavailableError)
async def roster_unavailable_handler(request: Request, exc: RosterUnavailableError):
    return JSONResponse(
        status_code=HTTPStatus.SERVICE_UNAVAILABLE,
        content={
            "detail": "Vehicle roster is not available. Please try again later.",
            "error": str(exc),
        },
    )


@app.exception_handler(RosterFormatError)
async def roster_format_handler(request: Request, exc: RosterFormatError):
    return JSONResponse(
        status_code=HTTPStatus.BAD_GATEWAY,
        content={
            "detail": "Vehicle roster contains invalid data.",
            "error": str(exc),
        },
    )


# Set all CORS enabled origins
if ALL_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALL_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# API Routes
api_router = APIRouter(prefix="/api")
api_router.include_router(analytics_router)
app.include_router(api_router)
app.include_router(health_router)
