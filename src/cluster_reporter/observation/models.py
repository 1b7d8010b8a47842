"""Structured models for the cluster state shown in a report."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field

EXPECTED_CLAIM_PHASE = "Bound"


class ResourceKind(str, Enum):
    """Resource collections counted on every sweep."""

    PODS = "pods"
    NAMESPACES = "namespaces"
    NODES = "nodes"
    EVENTS = "events"
    PERSISTENT_VOLUME_CLAIMS = "persistentvolumeclaims"


class ResourceCount(BaseModel):
    """Number of objects of one kind across all namespaces."""

    kind: ResourceKind
    count: int = Field(..., ge=0)


class QueryFailure(BaseModel):
    """A query that failed; the report shows the error instead of a count."""

    kind: ResourceKind
    error: str


class ClaimSummary(BaseModel):
    """Persistent volume claim identity and phase."""

    name: str
    namespace: str
    phase: str | None = None  # Pending | Bound | Lost


class ClaimAudit(BaseModel):
    """All claims in the cluster, checked against the expected phase."""

    claims: list[ClaimSummary] = Field(default_factory=list)
    expected_phase: str = EXPECTED_CLAIM_PHASE

    @property
    def total(self) -> int:
        return len(self.claims)

    @property
    def unbound(self) -> list[ClaimSummary]:
        return [c for c in self.claims if c.phase != self.expected_phase]


class PodDetail(BaseModel):
    """Status of the inspected pod."""

    name: str
    namespace: str
    phase: str = ""
    pod_ip: str = ""
    node_name: str = ""


class LookupStatus(str, Enum):
    """Every outcome of fetching the inspected pod."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    API_ERROR = "api_error"
    TRANSPORT_ERROR = "transport_error"


class PodLookup(BaseModel):
    """Result of fetching one pod by namespace and name."""

    namespace: str
    name: str
    status: LookupStatus
    pod: PodDetail | None = None
    message: str | None = Field(
        default=None,
        description="Server message for api_error, error text for transport_error",
    )


class ClusterSnapshot(BaseModel):
    """Everything collected during one sweep."""

    pods: ResourceCount | QueryFailure
    namespaces: ResourceCount | QueryFailure
    nodes: ResourceCount | QueryFailure
    events: ResourceCount | QueryFailure
    claims: ClaimAudit | QueryFailure
    target_pod: PodLookup
    collected_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
