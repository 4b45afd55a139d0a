"""Domain-Oriented Observability for the authorization application layer."""

from authorization.application.observability.administration_probe import (
    AdministrationProbe,
    DefaultAdministrationProbe,
)
from authorization.application.observability.decision_probe import (
    DecisionProbe,
    DefaultDecisionProbe,
)

__all__ = [
    "AdministrationProbe",
    "DefaultAdministrationProbe",
    "DecisionProbe",
    "DefaultDecisionProbe",
]
