import logging
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .routers import panchang as panchang_router
from .middleware.logging import LoggingMiddleware
from .services.ephem import init_paths
from .services.validation import PanchangValidationError


logger = logging.getLogger(__name__)

init_paths(os.getenv("SE_EPHE_PATH"))

app = FastAPI(title="panchang", version="0.1.0")

# Configure CORS - localhost for development, production domains for production
app_env = os.getenv("APP_ENV")
is_dev = app_env is None or app_env.lower() in {"dev", "development"}

if is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        max_age=86400,
    )
else:
    allowed = [origin for origin in os.getenv("ALLOWED_ORIGINS", "").split(",") if origin]
    preview = os.getenv("PREVIEW_ORIGIN")  # e.g. a deploy preview URL
    if preview:
        allowed.append(preview)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        max_age=86400,
    )

app.add_middleware(LoggingMiddleware)

app.include_router(panchang_router.router)


@app.exception_handler(PanchangValidationError)
def _validation_error(request: Request, exc: PanchangValidationError):
    return JSONResponse({"error": str(exc)}, status_code=400)


@app.exception_handler(Exception)
def _unexpected_error(request: Request, exc: Exception):
    logger.exception("panchang.request.failed", extra={"endpoint": request.url.path})
    return JSONResponse({"error": "Failed to calculate Panchang"}, status_code=500)


@app.get("/__health")
def health():
    return {"ok": True}
