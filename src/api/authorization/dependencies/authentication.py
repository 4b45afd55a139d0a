"""Bearer token authentication dependencies.

Resolves the authenticated subject from a JWT. Credential checks and token
issuance belong to the identity service; this only verifies tokens.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from authorization.domain.value_objects import SubjectId
from infrastructure.settings import get_auth_settings
from shared_kernel.auth import InvalidTokenError, JWTValidator
from shared_kernel.auth.observability import DefaultJWTValidatorProbe

bearer_scheme = HTTPBearer(auto_error=False)

_WWW_AUTHENTICATE = {"WWW-Authenticate": "Bearer"}


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached JWT validator configured from auth settings."""
    settings = get_auth_settings()
    return JWTValidator(
        secret=settings.jwt_secret.get_secret_value(),
        probe=DefaultJWTValidatorProbe(),
        algorithm=settings.jwt_algorithm,
        audience=settings.audience,
        issuer=settings.issuer,
    )


def get_current_subject_id(
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ] = None,
) -> SubjectId:
    """Authenticate the request and return the subject it acts for.

    Raises:
        HTTPException 401: If the token is missing, invalid, or its subject
            claim is not a subject id
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
            headers=_WWW_AUTHENTICATE,
        )

    try:
        claims = validator.validate_token(credentials.credentials)
    except InvalidTokenError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers=_WWW_AUTHENTICATE,
        ) from e

    try:
        return SubjectId.from_string(claims.sub)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid subject claim",
            headers=_WWW_AUTHENTICATE,
        ) from e
