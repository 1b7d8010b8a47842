"""Collect cluster counts, claim phases and the inspected pod's status."""

from __future__ import annotations

import logging
from typing import Any

from cluster_reporter.errors import ApiStatusError, ClusterQueryError, NotFoundError
from cluster_reporter.observation.gateway import ClusterGateway
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

logger = logging.getLogger(__name__)

COUNTED_KINDS = (
    ResourceKind.PODS,
    ResourceKind.NAMESPACES,
    ResourceKind.NODES,
    ResourceKind.EVENTS,
)


def _build_claim_summary(pvc: Any) -> ClaimSummary:
    """Build ClaimSummary from V1PersistentVolumeClaim."""
    return ClaimSummary(
        name=pvc.metadata.name,
        namespace=pvc.metadata.namespace or "default",
        phase=getattr(pvc.status, "phase", None) if pvc.status else None,
    )


def _build_pod_detail(pod: Any) -> PodDetail:
    """Build PodDetail from V1Pod."""
    status = pod.status
    spec = pod.spec
    return PodDetail(
        name=pod.metadata.name,
        namespace=pod.metadata.namespace or "default",
        phase=(getattr(status, "phase", None) or "") if status else "",
        pod_ip=(getattr(status, "pod_ip", None) or "") if status else "",
        node_name=(getattr(spec, "node_name", None) or "") if spec else "",
    )


class ClusterCollector:
    """Runs one sweep of read-only queries and gathers the results into a snapshot.

    Every query is independent: a failing query is recorded as a QueryFailure
    (or a non-found PodLookup) and the sweep continues with the next one.
    """

    def __init__(self, gateway: ClusterGateway, namespace: str, pod_name: str) -> None:
        self.gateway = gateway
        self.namespace = namespace
        self.pod_name = pod_name

    def collect(self) -> ClusterSnapshot:
        """Collect counts for every resource kind, audit claims and inspect the pod."""
        counts = {kind: self.count(kind) for kind in COUNTED_KINDS}
        snapshot = ClusterSnapshot(
            pods=counts[ResourceKind.PODS],
            namespaces=counts[ResourceKind.NAMESPACES],
            nodes=counts[ResourceKind.NODES],
            events=counts[ResourceKind.EVENTS],
            claims=self.audit_claims(),
            target_pod=self.inspect_pod(),
        )
        logger.debug("Sweep finished at %s", snapshot.collected_at.isoformat())
        return snapshot

    def count(self, kind: ResourceKind) -> ResourceCount | QueryFailure:
        try:
            items = self.gateway.list_resources(kind)
        except ClusterQueryError as e:
            logger.warning("Failed to list %s: %s", kind.value, e)
            return QueryFailure(kind=kind, error=str(e))
        return ResourceCount(kind=kind, count=len(items))

    def audit_claims(self) -> ClaimAudit | QueryFailure:
        kind = ResourceKind.PERSISTENT_VOLUME_CLAIMS
        try:
            items = self.gateway.list_resources(kind)
        except ClusterQueryError as e:
            logger.warning("Failed to list %s: %s", kind.value, e)
            return QueryFailure(kind=kind, error=str(e))
        return ClaimAudit(claims=[_build_claim_summary(pvc) for pvc in items])

    def inspect_pod(self) -> PodLookup:
        """Fetch the configured pod and classify the outcome."""
        lookup = {"namespace": self.namespace, "name": self.pod_name}
        try:
            pod = self.gateway.read_pod(self.namespace, self.pod_name)
        except NotFoundError:
            return PodLookup(**lookup, status=LookupStatus.NOT_FOUND)
        except ApiStatusError as e:
            logger.warning("API error reading pod %s/%s: %s", self.namespace, self.pod_name, e.message)
            return PodLookup(**lookup, status=LookupStatus.API_ERROR, message=e.message)
        except ClusterQueryError as e:
            logger.warning("Failed to read pod %s/%s: %s", self.namespace, self.pod_name, e)
            return PodLookup(**lookup, status=LookupStatus.TRANSPORT_ERROR, message=str(e))
        return PodLookup(**lookup, status=LookupStatus.FOUND, pod=_build_pod_detail(pod))
