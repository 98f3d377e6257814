"""Dependency injection for FastAPI endpoints"""

from fastapi import HTTPException, Request

from atlantique_loans.domain.exceptions import DomainException, UnsupportedCurrencyError
from atlantique_loans.infrastructure.cache import TTLCache
from atlantique_loans.infrastructure.observability.logging import log_rejected_input
from atlantique_loans.infrastructure.observability.metrics import record_rejection


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_schedule_cache(request: Request) -> TTLCache:
    """Provide the application's schedule cache"""
    return request.app.state.schedule_cache


def reject(request_id: str, operation: str, error: DomainException) -> HTTPException:
    """Record a refused calculation and build the matching HTTP error"""
    record_rejection(operation, error)
    log_rejected_input(request_id, operation, error)
    status_code = 400 if isinstance(error, UnsupportedCurrencyError) else 422
    return HTTPException(status_code=status_code, detail=str(error))
