"""Route guards built on the authorization engine.

``require_permission`` and ``require_relationship`` return FastAPI
dependencies that run a decision and turn anything but Allow into the
matching HTTP error:

    Deny             -> 403
    NotFound         -> 404
    StoreUnavailable -> 503
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, Path, status

from authorization.application.services import AuthorizationEngine
from authorization.dependencies.authentication import get_current_subject_id
from authorization.dependencies.engine import get_authorization_engine
from authorization.domain.decisions import (
    Allow,
    Decision,
    Deny,
    NotFound,
    StoreUnavailable,
)
from authorization.domain.value_objects import ResourceId, SubjectId


def raise_for_decision(decision: Decision) -> None:
    """Raise the HTTP error matching a non-Allow decision.

    Raises:
        HTTPException: 403 for Deny, 404 for NotFound, 503 for StoreUnavailable
    """
    match decision:
        case Allow():
            return
        case Deny(reason=reason):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=reason)
        case NotFound(resource_id=resource_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Resource with ID {resource_id} not found",
            )
        case StoreUnavailable():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Authorization data is temporarily unavailable",
            )


def require_permission(permission: str) -> Callable[..., Awaitable[SubjectId]]:
    """Create a dependency requiring a role-based permission.

    Args:
        permission: Permission name, e.g. ``record:read``

    Returns:
        Dependency resolving to the authorized subject's id
    """

    async def dependency(
        subject_id: Annotated[SubjectId, Depends(get_current_subject_id)],
        engine: Annotated[AuthorizationEngine, Depends(get_authorization_engine)],
    ) -> SubjectId:
        raise_for_decision(await engine.check_permission(subject_id, permission))
        return subject_id

    return dependency


def require_relationship(relation_type: str) -> Callable[..., Awaitable[SubjectId]]:
    """Create a dependency requiring a relationship to the owner of ``{resource_id}``.

    The route must declare a ``resource_id`` path parameter.

    Args:
        relation_type: Required edge type, e.g. ``assigned_to``

    Returns:
        Dependency resolving to the authorized subject's id
    """

    async def dependency(
        resource_id: Annotated[int, Path(gt=0)],
        subject_id: Annotated[SubjectId, Depends(get_current_subject_id)],
        engine: Annotated[AuthorizationEngine, Depends(get_authorization_engine)],
    ) -> SubjectId:
        decision = await engine.check_relationship(
            subject_id, ResourceId(value=resource_id), relation_type
        )
        raise_for_decision(decision)
        return subject_id

    return dependency
