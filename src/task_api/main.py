from __future__ import annotations

import logging
from typing import Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .errors import INVALID_TASK_INPUT, TaskServiceError
from .repositories import InMemoryTaskRepository, TaskRepository
from .routers import tasks as tasks_router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "tasks",
        "description": "CRUD operations over the in-memory task collection.",
    },
]

# Bodies for framework-raised errors, in the wording clients of the service expect
_HTTP_ERROR_MESSAGES = {
    404: "404 page not found",
    405: "Method not allowed",
}


def plain_text_error(
    message: str,
    status_code: int,
    headers: Optional[Mapping[str, str]] = None,
) -> PlainTextResponse:
    """
    Build a plain-text error response: the message plus a trailing newline,
    marked nosniff so browsers keep treating it as text.
    """
    response = PlainTextResponse(f"{message}\n", status_code=status_code, headers=dict(headers or {}))
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


async def task_service_error_handler(request: Request, exc: TaskServiceError) -> PlainTextResponse:
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return plain_text_error(exc.message, exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """
    Malformed JSON and wrongly typed fields are both reported as 400 'Invalid task input'.
    """
    logger.debug("%s %s -> 400 %s", request.method, request.url.path, exc.errors())
    return plain_text_error(INVALID_TASK_INPUT, 400)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    message = _HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
    return plain_text_error(message, exc.status_code, headers=exc.headers)


# PUBLIC_INTERFACE
def create_app(
    store: Optional[TaskRepository] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Task store to serve. A fresh InMemoryTaskRepository when omitted.
        settings: Settings to apply. Read from the environment when omitted.

    Returns:
        A configured FastAPI instance with the store available as app.state.task_store.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Task Store Service",
        description="In-memory CRUD service for task records.",
        version="0.1.0",
        openapi_tags=openapi_tags,
        # '/tasks/' is an item path with an empty id, not an alias of '/tasks'
        redirect_slashes=False,
    )
    app.state.task_store = store if store is not None else InMemoryTaskRepository()

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskServiceError, task_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    # PUBLIC_INTERFACE
    @app.get("/", summary="Health Check", tags=["health"])
    def health_check(request: Request):
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the number of stored tasks.
        """
        return {"message": "Healthy", "tasks": request.app.state.task_store.count()}

    app.include_router(tasks_router.router)
    return app


app = create_app()
