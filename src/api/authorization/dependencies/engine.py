"""Dependency providers for the authorization engine.

FastAPI caches dependencies per request, so every check made while
handling one request shares a single read session and a single
request-scoped store. Nothing built here outlives the request.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from authorization.application.observability import (
    DecisionProbe,
    DefaultDecisionProbe,
)
from authorization.application.services import AuthorizationEngine
from authorization.dependencies.authentication import get_current_subject_id
from authorization.domain.value_objects import SubjectId
from authorization.infrastructure.authorization_store import AuthorizationStore
from authorization.infrastructure.request_scoped_store import (
    RequestScopedAuthorizationStore,
)
from authorization.ports.repositories import IAuthorizationStore
from infrastructure.database.dependencies import get_read_session
from shared_kernel.observability_context import ObservationContext


def get_authorization_store(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IAuthorizationStore:
    """Get the request-scoped authorization store.

    Args:
        session: Read session for this request

    Returns:
        Store memoizing subject lookups for this request only
    """
    return RequestScopedAuthorizationStore(AuthorizationStore(session=session))


def get_decision_probe(
    subject_id: Annotated[SubjectId, Depends(get_current_subject_id)],
) -> DecisionProbe:
    """Get a DecisionProbe bound to the authenticated subject."""
    context = ObservationContext(subject_id=str(subject_id))
    return DefaultDecisionProbe().with_context(context)


def get_authorization_engine(
    store: Annotated[IAuthorizationStore, Depends(get_authorization_store)],
    probe: Annotated[DecisionProbe, Depends(get_decision_probe)],
) -> AuthorizationEngine:
    """Get AuthorizationEngine instance.

    Args:
        store: Request-scoped authorization store
        probe: Decision probe for observability

    Returns:
        AuthorizationEngine instance
    """
    return AuthorizationEngine(store=store, probe=probe)
