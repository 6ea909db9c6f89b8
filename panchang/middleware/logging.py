import os
import json
import logging
import time
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware


logger = logging.getLogger("panchang.access")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        if os.getenv("LOGGING_ENABLED", "false").lower() != "true":
            return await call_next(request)

        start = time.time()
        response = await call_next(request)
        elapsed = round((time.time() - start) * 1000, 2)
        log = {
            "ts": time.time(),
            "ip": request.client.host if request.client else None,
            "method": request.method,
            "endpoint": request.url.path,
            "query": str(request.url.query) or None,
            "status": response.status_code,
            "latency_ms": elapsed,
        }
        logger.info(json.dumps(log))
        return response
