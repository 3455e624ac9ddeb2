from typing import Optional

from fastapi import Depends, FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .repositories import InMemoryTaskStore, TaskStore
from .routers import tasks as tasks_router
from .routers.tasks import get_store
from .settings import get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "tasks",
        "description": "Create, list, fetch and delete tasks held in memory.",
    },
]


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Map request decoding failures to 400 with a consistent JSON structure.

    Response format:
        {
            "error": "ValidationError",
            "message": "Invalid task id" | "Invalid task payload",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    errors = exc.errors()
    if any(tuple(err.get("loc", ()))[:1] == ("path",) for err in errors):
        message = "Invalid task id"
    else:
        message = "Invalid task payload"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "ValidationError",
            "message": message,
            "detail": jsonable_encoder(errors),
        },
    )


# PUBLIC_INTERFACE
def health_check(store: TaskStore = Depends(get_store)):
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health and the number of stored tasks.
    """
    return {"message": "Healthy", "tasks": store.count()}


# PUBLIC_INTERFACE
def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """
    Build the FastAPI application around a single task store.

    The store is created here once (or taken from the caller) and exposed to
    handlers through app.state, so each app instance owns its own tasks.
    """
    settings = get_settings()

    app = FastAPI(
        title="Tasks Backend",
        description="Minimal HTTP service for managing tasks held in memory.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.store = store if store is not None else InMemoryTaskStore()

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_api_route("/", health_check, methods=["GET"], summary="Health Check", tags=["health"])
    app.include_router(tasks_router.router)
    return app


app = create_app()
