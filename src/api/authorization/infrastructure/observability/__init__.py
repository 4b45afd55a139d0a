"""Domain-Oriented Observability for authorization infrastructure."""

from authorization.infrastructure.observability.record_probe import (
    DefaultRecordRepositoryProbe,
    RecordRepositoryProbe,
)
from authorization.infrastructure.observability.store_probe import (
    AuthorizationStoreProbe,
    DefaultAuthorizationStoreProbe,
)

__all__ = [
    "AuthorizationStoreProbe",
    "DefaultAuthorizationStoreProbe",
    "DefaultRecordRepositoryProbe",
    "RecordRepositoryProbe",
]
