import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response, Request, Depends, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from message_board.config import settings
from message_board.errors import MessageStoreError
from message_board.storage import MessageStore, init_store, check_store_health, get_store
from message_board.logging_utils import setup_logging, RequestLoggingMiddleware, log_operation_data
from message_board.metrics import record_message_operation, record_store_size, get_metrics, get_metrics_content_type
from message_board.graphql_schema import create_graphql_router
from message_board.schemas import (
    AddMessageRequest,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    MessagesListResponse,
)


# Setup structured JSON logging
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    - Startup: create an empty message store for this app instance
    - Shutdown: drop the store; messages are not persisted
    """
    # Startup
    app.state.store = init_store()
    # Gauge is process-wide, a new store starts it over
    record_store_size(app.state.store.count())
    logger.info(f"Server started, GraphQL at {settings.GRAPHQL_PATH}")
    yield
    # Shutdown
    held = app.state.store.count()
    app.state.store = None
    logger.info(f"Server stopped, discarded {held} messages")


app = FastAPI(
    title="Message Board API",
    description="In-memory message board exposed over GraphQL and REST",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(MessageStoreError)
async def message_store_error_handler(request: Request, exc: MessageStoreError) -> JSONResponse:
    """Render store errors with the status code they carry."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# =============================================================================
# Health Check Routes
# =============================================================================

@app.get("/health/live", response_model=HealthResponse)
async def health_live() -> HealthResponse:
    """
    Liveness probe - always returns 200 once the app is running.
    """
    return HealthResponse(status="ok")


@app.get("/health/ready", response_model=HealthResponse)
async def health_ready(request: Request, response: Response) -> HealthResponse:
    """
    Readiness probe - returns 200 only once the message store is attached.
    Otherwise returns 503 (Service Unavailable).
    """
    # Store is attached by the lifespan and removed at shutdown
    if not check_store_health(getattr(request.app.state, "store", None)):
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return HealthResponse(
            status="not_ready",
            reason="Message store not initialized"
        )

    return HealthResponse(status="ready")


# =============================================================================
# Messages Routes
# =============================================================================

@app.get("/messages", response_model=MessagesListResponse)
def list_messages(
    request: Request,
    store: MessageStore = Depends(get_store)
) -> MessagesListResponse:
    """
    List every stored message in insertion order.

    Response:
        - data: messages, oldest first
        - total: number of messages
    """
    # Snapshot of the collection, taken under the store lock
    messages = store.list_messages()

    record_message_operation("messages", "listed")
    log_operation_data(request, operation="messages", result="listed")
    logger.info(f"GET /messages: returned {len(messages)} messages")

    return MessagesListResponse(
        data=[MessageResponse.model_validate(m) for m in messages],
        total=len(messages)
    )


@app.post(
    "/messages",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ErrorResponse, "description": "Empty or missing content"},
    }
)
def add_message(
    request: Request,
    body: AddMessageRequest,
    store: MessageStore = Depends(get_store)
) -> MessageResponse:
    """
    Append a message to the board.

    Blank content is rejected with 422; anything else is stored verbatim
    and returned with its new id.
    """
    # Store rejects blank content with ValidationError
    try:
        message = store.append(body.content)
    except MessageStoreError as e:
        logger.error(f"POST /messages rejected: {e.message}")
        record_message_operation("addMessage", "validation_error")
        log_operation_data(request, operation="addMessage", result="validation_error")
        raise

    record_message_operation("addMessage", "created", stored=store.count())
    log_operation_data(request, operation="addMessage", message_id=message.id, result="created")
    logger.info(f"POST /messages: created message {message.id}")

    return MessageResponse.model_validate(message)


# =============================================================================
# GraphQL Route
# =============================================================================

app.include_router(create_graphql_router(), prefix=settings.GRAPHQL_PATH)


# =============================================================================
# Metrics Route
# =============================================================================

@app.get("/metrics")
async def metrics() -> Response:
    """
    Expose Prometheus-style metrics.

    Returns metrics in Prometheus text exposition format including:
    - http_requests_total: Total HTTP requests by method, path, status
    - message_operations_total: Store operations by outcome
    - request_latency_seconds: Request latency histogram
    - messages_stored: Current store size
    """
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type()
    )


def run() -> None:
    """Start the server with uvicorn using the configured host and port."""
    uvicorn.run(
        "message_board.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )


if __name__ == "__main__":
    run()
