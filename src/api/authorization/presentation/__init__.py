"""Authorization presentation layer.

Decision endpoints live under ``/authorization``; the guarded record reads
keep their own ``/records`` prefix.
"""

from __future__ import annotations

from fastapi import APIRouter

from authorization.presentation.checks import routes as check_routes
from authorization.presentation.records import routes as record_routes

router = APIRouter(
    prefix="/authorization",
)

router.include_router(check_routes.router)

records_router = record_routes.router

__all__ = ["records_router", "router"]
