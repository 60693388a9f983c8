# main.py
import logging
import time
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import config
import database
from routes import records
from services.errors import RecordError

logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()

app = FastAPI(title="Student Records API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(records.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms:.1f} ms)")
    return response


@app.exception_handler(RecordError)
async def record_error_handler(request: Request, exc: RecordError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": "Validation failed", "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    message = "Endpoint not found" if exc.status_code == 404 else str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"success": False, "message": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    content = {"success": False, "message": "Internal server error"}
    if config.DEBUG:
        content["error"] = str(exc)
    return JSONResponse(status_code=500, content=content)


@app.get("/health", tags=["health"])
async def health():
    connected = await database.ping(database.db)
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if connected else "disconnected",
        "uptime": round(time.monotonic() - STARTED_AT, 3),
    }


@app.get("/", tags=["health"])
async def root():
    return {
        "service": "Student Records API",
        "health": "/health",
        "endpoints": [
            "POST /api/records",
            "GET /api/records",
            "GET /api/records/{id}",
            "PUT /api/records/{id}",
            "DELETE /api/records/{id}",
        ],
    }


@app.on_event("startup")
async def startup_event():
    try:
        await database.connect()
    except Exception:
        logger.exception("MongoDB connection error")
        raise
    logger.info(f"API available at http://{config.HOST}:{config.PORT}/api")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down gracefully...")
    await database.close()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=config.HOST, port=config.PORT, reload=config.DEBUG)
