"""Domain exceptions for the authorization context.

Decision outcomes (deny, not found) are values, not exceptions. These
exceptions cover store failures and violations of the administrative
invariants.
"""


class StoreUnavailableError(Exception):
    """Raised when the authorization store cannot be read.

    Carries the underlying failure as ``cause`` so callers can tell an
    infrastructure outage apart from a policy decision.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DuplicateRelationshipError(Exception):
    """Raised when a ``(subject_id, object_id, type)`` edge already exists.

    Relationship triples are unique; a second identical edge is never
    created.
    """

    pass


class DuplicateRoleError(Exception):
    """Raised when creating a role whose name already exists."""

    pass


class DuplicatePermissionError(Exception):
    """Raised when creating a permission whose name already exists."""

    pass


class SubjectNotFoundError(Exception):
    """Raised when an administrative operation references an unknown subject.

    Resources must be owned by an existing subject; dangling ownership is
    rejected with this error.
    """

    pass


class RoleNotFoundError(Exception):
    """Raised when an administrative operation references an unknown role."""

    pass


class PermissionNotFoundError(Exception):
    """Raised when an administrative operation references an unknown permission."""

    pass
