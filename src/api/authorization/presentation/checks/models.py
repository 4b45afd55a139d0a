"""Pydantic models for authorization check requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from authorization.domain.decisions import Allow, Deny


class PermissionCheckRequest(BaseModel):
    """Request model for a role-based permission check.

    The subject is the authenticated caller, taken from the bearer token.
    """

    permission: str = Field(
        ..., description="Permission name, e.g. record:read", min_length=1
    )


class RelationshipCheckRequest(BaseModel):
    """Request model for a relationship check against a resource's owner."""

    resource_id: int = Field(..., description="Resource ID", gt=0)
    relation: str = Field(
        ..., description="Required relation type, e.g. assigned_to", min_length=1
    )


class DecisionResponse(BaseModel):
    """Response model for an allow or deny decision."""

    decision: Literal["allow", "deny"] = Field(..., description="Decision outcome")
    reason: str = Field(..., description="What granted access, or why it was denied")
    permission: str | None = Field(None, description="Permission checked")
    relation: str | None = Field(None, description="Relation type checked")
    resource_id: int | None = Field(None, description="Resource checked")
    owner_id: int | None = Field(None, description="Owner of the resource checked")

    @classmethod
    def from_domain(cls, decision: Allow | Deny) -> DecisionResponse:
        """Convert a domain decision to an API response.

        Args:
            decision: Allow or Deny decision

        Returns:
            DecisionResponse carrying the decision details
        """
        if isinstance(decision, Allow):
            return cls(decision="allow", reason=decision.reason.value)

        return cls(
            decision="deny",
            reason=decision.reason,
            permission=decision.permission,
            relation=decision.relation_type,
            resource_id=decision.resource_id.value if decision.resource_id else None,
            owner_id=decision.owner_id.value if decision.owner_id else None,
        )
