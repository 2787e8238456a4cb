from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from budgetbook.config import HOST, PORT
from budgetbook.database import engine, init_db
from budgetbook.logging_setup import configure_logging, get_logger
from budgetbook.routes.auth_routes import router as auth_router
from budgetbook.routes.resource_routes import routers as resource_routers

logger = get_logger(__name__)

NOT_ALLOWED = "Not allowed!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Starting the application...")
    init_db()
    yield
    engine.dispose()


# No trailing-slash redirects: "/users/" is an unknown path, not an alias.
app = FastAPI(title="budgetbook", lifespan=lifespan, redirect_slashes=False)

for resource_router in resource_routers:
    app.include_router(resource_router)
app.include_router(auth_router)


def describe_errors(errors) -> str:
    """Flatten pydantic errors into one line, e.g. "body.pin: Input should be a valid integer"."""
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', '')}" if loc else err.get("msg", ""))
    return "; ".join(parts)


@app.exception_handler(RequestValidationError)
async def bad_request_handler(request: Request, exc: RequestValidationError):
    """Undecodable bodies are a 400, not FastAPI's default 422."""
    message = describe_errors(exc.errors())
    logger.error("Bad request on %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content=message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Error bodies are the bare message, not a {"detail": ...} object."""
    if exc.status_code == 405:
        logger.warning("Invalid Operation Requested. Ignoring request... %s %s", request.method, request.url.path)
        return JSONResponse(status_code=405, content=NOT_ALLOWED, headers=exc.headers)
    if exc.status_code == 404 and "endpoint" not in request.scope:
        logger.warning("No route for %s %s", request.method, request.url.path)
    return JSONResponse(status_code=exc.status_code, content=str(exc.detail), headers=exc.headers)


def run():
    configure_logging()
    logger.info("Handler Listening at :%d ...", PORT)
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
