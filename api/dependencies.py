# api/dependencies.py
from http import HTTPStatus
from typing import Any, Dict

from fastapi import HTTPException, Request, status

from core.catalog import CatalogStore, Outcome, StoreResult

_ERROR_STATUS = {
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.INVALID: status.HTTP_400_BAD_REQUEST,
}


def get_store(request: Request) -> CatalogStore:
    """FastAPI dependency returning the catalog owned by the running app."""
    return request.app.state.store


def unwrap(result: StoreResult) -> Any:
    """Return the value of a successful result, or raise the matching HTTPException"""
    if result.ok:
        return result.value
    raise HTTPException(status_code=_ERROR_STATUS[result.outcome], detail=result.reason)


def body_or_empty(payload: Any) -> Any:
    # A request without a body is treated like an empty object
    return {} if payload is None else payload


def error_body(status_code: int, message: Any) -> Dict[str, Any]:
    return {"error": HTTPStatus(status_code).phrase, "message": message}
