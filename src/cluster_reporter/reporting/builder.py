"""Turn a cluster snapshot into report lines."""

from __future__ import annotations

from cluster_reporter.observation.models import (
    ClaimAudit,
    ClusterSnapshot,
    LookupStatus,
    PodLookup,
    QueryFailure,
    ResourceCount,
    ResourceKind,
)
from cluster_reporter.reporting import messages

# Names used in "Error while listing ..." lines
KIND_LABELS: dict[ResourceKind, str] = {
    ResourceKind.PODS: "pods",
    ResourceKind.NAMESPACES: "namespaces",
    ResourceKind.NODES: "nodes",
    ResourceKind.EVENTS: "events",
    ResourceKind.PERSISTENT_VOLUME_CLAIMS: "PersistentVolumeClaims",
}

COUNT_TEMPLATES: dict[ResourceKind, str] = {
    ResourceKind.PODS: messages.POD_COUNT,
    ResourceKind.NAMESPACES: messages.NAMESPACE_COUNT,
    ResourceKind.NODES: messages.NODE_COUNT,
    ResourceKind.EVENTS: messages.EVENT_COUNT,
}


def failure_lines(failure: QueryFailure) -> list[str]:
    return [messages.LIST_FAILED.format(label=KIND_LABELS[failure.kind], error=failure.error)]


def count_lines(result: ResourceCount | QueryFailure) -> list[str]:
    """One line with the count, or the failure diagnostic."""
    if isinstance(result, QueryFailure):
        return failure_lines(result)
    if result.kind == ResourceKind.NODES and result.count == 0:
        return [messages.NO_NODES]
    return [COUNT_TEMPLATES[result.kind].format(count=result.count)]


def claim_lines(result: ClaimAudit | QueryFailure) -> list[str]:
    """Total claim count followed by one line per claim not in the expected phase."""
    if isinstance(result, QueryFailure):
        return failure_lines(result)
    lines = [messages.CLAIM_COUNT.format(count=result.total)]
    lines.extend(
        messages.CLAIM_NOT_IN_PHASE.format(name=claim.name, phase=result.expected_phase)
        for claim in result.unbound
    )
    return lines


def pod_lines(lookup: PodLookup) -> list[str]:
    """Lines describing the inspected pod for each lookup outcome."""
    where = {"name": lookup.name, "namespace": lookup.namespace}
    if lookup.status == LookupStatus.NOT_FOUND:
        return [messages.POD_NOT_FOUND.format(**where)]
    if lookup.status == LookupStatus.API_ERROR:
        return [messages.POD_API_ERROR.format(**where, message=lookup.message or "")]
    if lookup.status == LookupStatus.TRANSPORT_ERROR:
        return [messages.POD_TRANSPORT_ERROR.format(error=lookup.message or "")]
    if lookup.status == LookupStatus.FOUND and lookup.pod is not None:
        pod = lookup.pod
        return [
            messages.POD_FOUND.format(**where),
            messages.POD_PHASE.format(phase=pod.phase),
            messages.POD_IP.format(pod_ip=pod.pod_ip),
            messages.POD_NODE.format(node_name=pod.node_name),
        ]
    raise ValueError(f"Unhandled pod lookup: status={lookup.status}, pod={lookup.pod!r}")


def build_report(snapshot: ClusterSnapshot) -> list[str]:
    """
    Render one sweep as report lines, without the trailing separator.

    Pure function of the snapshot; printing and sleeping belong to the poller.
    """
    lines = [messages.REPORT_HEADER]
    for result in (snapshot.pods, snapshot.namespaces, snapshot.nodes, snapshot.events):
        lines.extend(count_lines(result))
    lines.extend(claim_lines(snapshot.claims))
    lines.extend(["", messages.POD_SECTION_HEADER])
    lines.extend(pod_lines(snapshot.target_pod))
    return lines
