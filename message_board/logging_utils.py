import logging
import sys
import time
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from pythonjsonlogger import jsonlogger

from message_board.metrics import record_http_request


# Context variable to store request_id for the current request
request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding an ISO-8601 `ts`, the level and request_id."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("ts"):
            log_record["ts"] = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
        log_record["level"] = record.levelname

        if "request_id" not in log_record:
            req_id = request_id_ctx.get()
            if req_id:
                log_record["request_id"] = req_id


def setup_logging(log_level: str = "INFO"):
    """
    Setup structured JSON logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Configure root logger
    logger = logging.getLogger()
    logger.setLevel(log_level.upper())

    # Remove existing handlers
    logger.handlers = []

    # JSON handler for stdout
    json_handler = logging.StreamHandler(sys.stdout)
    json_handler.setFormatter(CustomJsonFormatter("%(ts)s %(level)s %(name)s %(message)s"))
    logger.addHandler(json_handler)

    # Route Uvicorn loggers through the same JSON handler
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers = []
        uvicorn_logger.addHandler(json_handler)
        uvicorn_logger.propagate = False

    # Request lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").disabled = True

    return logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all HTTP requests in structured JSON format.

    Every request line carries:
    - ts, level, request_id
    - method, path, status, latency_ms

    Requests that touched the store also carry the fields attached with
    log_operation_data():
    - operation: messages or addMessage
    - message_id: id of the created message (when present)
    - result: listed, created, validation_error
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Generate unique request ID
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        # Set request_id in context for all loggers to use
        token = request_id_ctx.set(request_id)

        # Record start time
        start_time = time.perf_counter()

        try:
            # Process request
            response = await call_next(request)

            # Add request ID to response headers
            response.headers["X-Request-ID"] = request_id

            # Calculate latency
            latency_seconds = time.perf_counter() - start_time

            # Keep scrapes out of their own numbers
            if request.url.path != "/metrics":
                record_http_request(
                    method=request.method,
                    path=request.url.path,
                    status=response.status_code,
                    latency_seconds=latency_seconds
                )

            # Build log data
            log_data = {
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "latency_ms": round(latency_seconds * 1000, 2),
            }

            # Add store operation fields if present in request state
            if hasattr(request.state, "operation_log_data"):
                log_data.update(request.state.operation_log_data)

            logger = logging.getLogger("message_board.requests")

            if response.status_code >= 500:
                logger.error("Request completed", extra=log_data)
            elif response.status_code >= 400:
                logger.warning("Request completed", extra=log_data)
            else:
                logger.info("Request completed", extra=log_data)

            return response
        finally:
            # Reset context
            request_id_ctx.reset(token)


def log_operation_data(request: Request, operation: str, message_id: str = None, result: str = None):
    """
    Attach store-operation logging data to the request state.
    This data will be included in the request log by the middleware.

    Args:
        request: Incoming request object
        operation: Store operation name (messages, addMessage)
        message_id: Id of the created message
        result: Processing result (listed, created, validation_error)
    """
    operation_data = {"operation": operation}

    if message_id is not None:
        operation_data["message_id"] = message_id

    if result is not None:
        operation_data["result"] = result

    request.state.operation_log_data = operation_data
