"""Observation layer: query the cluster and gather a snapshot for the report."""

from cluster_reporter.observation.collector import ClusterCollector
from cluster_reporter.observation.gateway import ClusterGateway, KubernetesGateway
from cluster_reporter.observation.models import (
    ClaimAudit,
    ClaimSummary,
    ClusterSnapshot,
    LookupStatus,
    PodDetail,
    PodLookup,
    QueryFailure,
    ResourceCount,
    ResourceKind,
)

__all__ = [
    "ClaimAudit",
    "ClaimSummary",
    "ClusterCollector",
    "ClusterGateway",
    "ClusterSnapshot",
    "KubernetesGateway",
    "LookupStatus",
    "PodDetail",
    "PodLookup",
    "QueryFailure",
    "ResourceCount",
    "ResourceKind",
]
