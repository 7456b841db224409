from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi import Request
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from airwatch.core.config import settings
from airwatch.core.database import check_connection, create_tables, engine
from airwatch.core.logger import get_logger
from airwatch.routers import auth, profile
from airwatch.routers import device

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a store that is down at startup is logged, not fatal
    if check_connection() and settings.db_create_tables:
        create_tables()
    yield
    engine.dispose()


app = FastAPI(title="AirWatch API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(device.router)

@app.get("/")
def root():
    return {"status": "AirWatch backend running"}


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(
        "database_error",
        exc_info=exc,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"}
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "unhandled_error",
        exc_info=exc,
        method=request.method,
        path=request.url.path,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}

    # schema of the endpoint body, if any
    route = request.scope.get("route")
    body_model = None

    if route is not None and hasattr(route, "dependant"):
        for dep in route.dependant.body_params:
            dep_type = getattr(dep, "type_", None)
            if isinstance(dep_type, type) and issubclass(dep_type, BaseModel):
                body_model = dep_type

    for err in exc.errors():
        loc = err["loc"]

        # whole body missing
        if tuple(loc) == ("body",) and body_model:
            for field in body_model.model_fields.keys():
                errors[field] = "Field required"
        else:
            field = loc[-1]
            errors[field] = err["msg"]

    return JSONResponse(
        status_code=422,
        content={
            "code": 422,
            "message": "Validation error",
            "errors": errors
        }
    )
