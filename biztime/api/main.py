from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.api.core.db import init_db
from biztime.api.core.exceptions import BizTimeError
from biztime.api.core.logging_config import configure_logging
from biztime.api.schemas.common_schema import ErrorDetail, ErrorResponse

# Routers
from biztime.api.routes import companies, invoices, system

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="BizTime API",
    version="1.0.0",
)


# ==========================
# Startup Event
# ==========================
@app.on_event("startup")
def startup_event():
    init_db()
    logger.info("BizTime API is running")


# ==========================
# Error handlers
# ==========================
def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=ErrorDetail(message=message, status=status_code)
        ).model_dump(),
    )


@app.exception_handler(BizTimeError)
async def biztime_error_handler(request: Request, exc: BizTimeError):
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error_response(500, problems or "Invalid request")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(500, "Internal server error")


# ==========================
# Routers
# ==========================
app.include_router(system.router, prefix="/system", tags=["system"])
app.include_router(companies.router, prefix="/companies", tags=["companies"])
app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])


# ==========================
# Root Endpoint
# ==========================
@app.get("/")
def root():
    return {
        "service": "biztime-api",
        "status": "running",
        "endpoints": {
            "system": "/system/health",
            "companies": "/companies/",
            "invoices": "/invoices/",
        },
    }
