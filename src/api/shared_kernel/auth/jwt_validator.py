"""JWT validation for bearer tokens.

Tokens are issued by the identity service (outside this application) and
signed with a shared secret. This module only verifies them and extracts
the subject identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from jose import JWTError, jwt
from jose.exceptions import ExpiredSignatureError, JWTClaimsError

if TYPE_CHECKING:
    from shared_kernel.auth.observability import JWTValidatorProbe


@dataclass(frozen=True)
class TokenClaims:
    """Validated JWT claims. Only the subject is used."""

    sub: str


class InvalidTokenError(Exception):
    """Raised when JWT validation fails."""

    pass


class JWTValidator:
    """Validates JWT tokens signed with a shared secret.

    Validates token signature and expiry, and audience/issuer when they
    are configured.
    """

    def __init__(
        self,
        secret: str,
        probe: JWTValidatorProbe,
        algorithm: str = "HS256",
        audience: str | None = None,
        issuer: str | None = None,
        subject_claim: str = "sub",
    ):
        """Initialize the JWT validator.

        Args:
            secret: Shared signing secret.
            probe: Observability probe for logging events.
            algorithm: Signing algorithm (default: HS256).
            audience: Expected audience claim value, or None to skip the check.
            issuer: Expected issuer claim value, or None to skip the check.
            subject_claim: JWT claim holding the subject id (default: sub).
        """
        self._secret = secret
        self._probe = probe
        self._algorithm = algorithm
        self._audience = audience
        self._issuer = issuer
        self._subject_claim = subject_claim

    def validate_token(self, token: str) -> TokenClaims:
        """Validate JWT and return claims.

        Args:
            token: The JWT token string.

        Returns:
            TokenClaims containing the validated claims.

        Raises:
            InvalidTokenError: If token is invalid, expired, or verification fails.
        """
        try:
            unverified_header = jwt.get_unverified_header(token)
        except JWTError as e:
            self._probe.token_validation_failed(reason=f"Malformed token: {e}")
            raise InvalidTokenError(f"Invalid token format: {e}") from e

        if not unverified_header:
            self._probe.token_validation_failed(reason="Missing token header")
            raise InvalidTokenError("Invalid token: missing header")

        decode_kwargs: dict[str, Any] = {}
        if self._audience is not None:
            decode_kwargs["audience"] = self._audience
        if self._issuer is not None:
            decode_kwargs["issuer"] = self._issuer

        try:
            claims = jwt.decode(
                token=token,
                key=self._secret,
                algorithms=[self._algorithm],
                options={
                    "verify_signature": True,
                    "verify_aud": self._audience is not None,
                    "verify_iss": self._issuer is not None,
                    "verify_exp": True,
                },
                **decode_kwargs,
            )
        except ExpiredSignatureError as e:
            self._probe.token_validation_failed(reason="Token expired")
            raise InvalidTokenError("Token has expired") from e
        except JWTClaimsError as e:
            error_msg = str(e).lower()
            if "audience" in error_msg:
                self._probe.token_validation_failed(reason="Invalid audience")
                raise InvalidTokenError("Invalid audience claim") from e
            if "issuer" in error_msg:
                self._probe.token_validation_failed(reason="Invalid issuer")
                raise InvalidTokenError("Invalid issuer claim") from e
            self._probe.token_validation_failed(reason=f"Claims error: {e}")
            raise InvalidTokenError(f"Invalid token claims: {e}") from e
        except JWTError as e:
            error_msg = str(e).lower()
            if "signature" in error_msg:
                self._probe.token_validation_failed(reason="Invalid signature")
                raise InvalidTokenError("Invalid token signature") from e
            self._probe.token_validation_failed(reason=f"JWT error: {e}")
            raise InvalidTokenError(f"Invalid token: {e}") from e

        subject = claims.get(self._subject_claim)
        if subject is None:
            self._probe.token_validation_failed(
                reason=f"Missing {self._subject_claim} claim"
            )
            raise InvalidTokenError(f"Missing required claim: {self._subject_claim}")

        self._probe.token_validated(subject_id=str(subject))
        return TokenClaims(sub=str(subject))
