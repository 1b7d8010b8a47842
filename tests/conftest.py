"""Pytest fixtures: a fake cluster gateway and Kubernetes object stand-ins."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from cluster_reporter.config import Settings
from cluster_reporter.errors import NotFoundError
from cluster_reporter.observation.models import ResourceKind

TARGET_NAMESPACE = "default"
TARGET_POD = "alpine-deployment-548dbddc9b-dnq9r"


def make_object(name: str, namespace: str | None = "default") -> MagicMock:
    """Minimal object with metadata.name / metadata.namespace."""
    obj = MagicMock()
    obj.metadata.name = name
    obj.metadata.namespace = namespace
    return obj


def make_claim(name: str, phase: str | None, namespace: str = "default") -> MagicMock:
    pvc = make_object(name, namespace)
    pvc.status.phase = phase
    return pvc


def make_pod(
    name: str = TARGET_POD,
    namespace: str = TARGET_NAMESPACE,
    phase: str = "Running",
    pod_ip: str | None = "10.244.0.12",
    node_name: str | None = "worker-1",
) -> MagicMock:
    pod = make_object(name, namespace)
    pod.status.phase = phase
    pod.status.pod_ip = pod_ip
    pod.spec.node_name = node_name
    return pod


class FakeGateway:
    """In-memory ClusterGateway.

    ``lists`` maps a ResourceKind to a list of objects or to an exception to
    raise; ``pod`` is the object returned by read_pod, or an exception.
    """

    def __init__(
        self,
        lists: dict[ResourceKind, Any] | None = None,
        pod: Any = None,
    ) -> None:
        self.lists: dict[ResourceKind, Any] = {kind: [] for kind in ResourceKind}
        self.lists.update(lists or {})
        self.pod = pod
        self.calls: list[tuple[str, Any]] = []

    def list_resources(self, kind: ResourceKind) -> list[Any]:
        self.calls.append(("list", kind))
        result = self.lists[kind]
        if isinstance(result, BaseException):
            raise result
        return list(result)

    def read_pod(self, namespace: str, name: str) -> Any:
        self.calls.append(("read_pod", (namespace, name)))
        if self.pod is None:
            raise NotFoundError("pod", name, namespace)
        if isinstance(self.pod, BaseException):
            raise self.pod
        return self.pod


@pytest.fixture
def settings() -> Settings:
    return Settings(
        namespace=TARGET_NAMESPACE,
        pod_name=TARGET_POD,
        poll_interval=10,
        _env_file=None,
    )


@pytest.fixture
def scenario_gateway() -> FakeGateway:
    """3 pods, 2 namespaces, 0 nodes, 5 events, 2 claims (one Bound, one Pending)."""
    return FakeGateway(
        lists={
            ResourceKind.PODS: [make_object(f"pod-{i}") for i in range(3)],
            ResourceKind.NAMESPACES: [make_object(n, None) for n in ("default", "kube-system")],
            ResourceKind.NODES: [],
            ResourceKind.EVENTS: [make_object(f"event-{i}") for i in range(5)],
            ResourceKind.PERSISTENT_VOLUME_CLAIMS: [
                make_claim("data-bound", "Bound"),
                make_claim("data-pending", "Pending"),
            ],
        },
        pod=make_pod(),
    )
