# movies_api/main.py
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import settings
from .movies import movies_router
from .movies.errors import InvalidRequestError, MovieStoreError, NotFoundError
from .movies.store import MovieStore, get_store

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Movie Ratings API",
    description=(
        "In-memory catalogue of movies with user ratings: CRUD, "
        "average and top-rated ratings, and lookups by genre, "
        "director or title keyword."
    ),
    version=__version__,
)

app.include_router(movies_router)


def _error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


@app.exception_handler(StarletteHTTPException)
async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown routes (404) and unsupported methods (405).
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return _error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(MovieStoreError)
async def _movie_store_error_handler(request: Request, exc: MovieStoreError) -> JSONResponse:
    if isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, InvalidRequestError):
        status_code = 400
    else:
        status_code = 500
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc.message)
    return _error_response(status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("%s %s -> 400: invalid body %s", request.method, request.url.path, exc.errors())
    return _error_response(400, "Invalid request body")


@app.get("/")
def health_check(store: MovieStore = Depends(get_store)):
    return {"status": "ok", "movies": len(store)}


def run():
    import uvicorn

    logger.info("Server is running on http://%s:%d", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
