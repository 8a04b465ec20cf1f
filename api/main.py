# api/main.py
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.dependencies import error_body
from api.routes import authors, book_copies, books, genres
from core.catalog import CatalogStore, seed_sample_data
from core.config import configure_logging, settings

logger = logging.getLogger(__name__)


def create_app(store: Optional[CatalogStore] = None, sample_data: Optional[bool] = None) -> FastAPI:
    """Build the API around a catalog store.

    Args:
        store: Catalog to serve; a new empty one is created when omitted
        sample_data: Seed the sample rows; defaults to CATALOG_SAMPLE_DATA

    Returns:
        The FastAPI application
    """
    app = FastAPI(
        title="Library Management API",
        version="1.0.0",
        description="A REST API for managing a library system with books, authors, genres, and book copies",
        docs_url="/api-docs",
    )
    app.state.store = store if store is not None else CatalogStore()

    if settings.sample_data if sample_data is None else sample_data:
        seed_sample_data(app.state.store)

    app.include_router(authors.router)
    app.include_router(genres.router)
    app.include_router(books.router)
    app.include_router(book_copies.router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        # Only reachable for bodies that are not valid JSON
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        logger.info("Rejected request to %s: %s", request.url.path, message)
        return JSONResponse(status_code=400, content=error_body(400, message))

    @app.get("/health")
    def health():
        return {"status": "healthy", "counts": app.state.store.counts()}

    return app


app = create_app()


# Main execution
if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run("api.main:app", host=settings.host, port=settings.port)
