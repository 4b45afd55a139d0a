"""HTTP routes for authorization decisions.

Allow and deny are both answers, so both return 200. A missing resource
and an unreachable store are not answers and map to 404 and 503.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from authorization.application.services import AuthorizationEngine
from authorization.dependencies.authentication import get_current_subject_id
from authorization.dependencies.engine import get_authorization_engine
from authorization.domain.decisions import Allow, Deny, NotFound, StoreUnavailable
from authorization.domain.value_objects import ResourceId, SubjectId
from authorization.presentation.checks.models import (
    DecisionResponse,
    PermissionCheckRequest,
    RelationshipCheckRequest,
)

router = APIRouter(
    tags=["authorization"],
)

_STORE_UNAVAILABLE_DETAIL = "Authorization data is temporarily unavailable"


@router.post(
    "/permissions/check",
    summary="Check a permission",
    description="Decide whether the caller holds a permission through any role",
    responses={
        200: {"description": "Decision made"},
        401: {"description": "Authentication required"},
        503: {"description": "Authorization store unavailable"},
    },
)
async def check_permission(
    request: PermissionCheckRequest,
    subject_id: Annotated[SubjectId, Depends(get_current_subject_id)],
    engine: Annotated[AuthorizationEngine, Depends(get_authorization_engine)],
) -> DecisionResponse:
    """Check a role-based permission for the authenticated subject."""
    match await engine.check_permission(subject_id, request.permission):
        case Allow() | Deny() as decision:
            return DecisionResponse.from_domain(decision)
        case StoreUnavailable():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=_STORE_UNAVAILABLE_DETAIL,
            )


@router.post(
    "/relationships/check",
    summary="Check a relationship",
    description=(
        "Decide whether the caller owns a resource or holds the given "
        "relationship to its owner"
    ),
    responses={
        200: {"description": "Decision made"},
        401: {"description": "Authentication required"},
        404: {"description": "Resource not found"},
        503: {"description": "Authorization store unavailable"},
    },
)
async def check_relationship(
    request: RelationshipCheckRequest,
    subject_id: Annotated[SubjectId, Depends(get_current_subject_id)],
    engine: Annotated[AuthorizationEngine, Depends(get_authorization_engine)],
) -> DecisionResponse:
    """Check a relationship-based rule for the authenticated subject.

    Raises:
        HTTPException: 404 if the resource does not exist
        HTTPException: 503 if the authorization store cannot be read
    """
    decision = await engine.check_relationship(
        subject_id, ResourceId(value=request.resource_id), request.relation
    )
    match decision:
        case Allow() | Deny():
            return DecisionResponse.from_domain(decision)
        case NotFound(resource_id=resource_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Resource with ID {resource_id} not found",
            )
        case StoreUnavailable():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=_STORE_UNAVAILABLE_DETAIL,
            )
