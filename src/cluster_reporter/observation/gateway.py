"""Access to the Kubernetes API server: session bootstrap and read-only queries."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, Protocol

from kubernetes import client, config
from kubernetes.client.rest import ApiException

from cluster_reporter.errors import (
    ApiStatusError,
    NotFoundError,
    SessionBootstrapError,
    TransportError,
)
from cluster_reporter.observation.models import ResourceKind

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 500


class ClusterGateway(Protocol):
    """Read-only operations the reporter needs from the cluster.

    Implementations raise a ClusterQueryError subclass on failure:
    NotFoundError, ApiStatusError or TransportError.
    """

    def list_resources(self, kind: ResourceKind) -> list[Any]:
        """Return every object of ``kind`` across all namespaces."""
        ...

    def read_pod(self, namespace: str, name: str) -> Any:
        """Return a single pod by namespace and name."""
        ...


def _load_kube_config(kubeconfig_path: str | None, context: str | None) -> client.Configuration:
    """Load in-cluster or kubeconfig-based configuration."""
    if not kubeconfig_path and not context:
        try:
            config.load_incluster_config()
            return client.Configuration.get_default_copy()
        except config.ConfigException:
            pass
    kwargs: dict[str, Any] = {}
    if kubeconfig_path:
        kwargs["config_file"] = str(kubeconfig_path)
    if context:
        kwargs["context"] = context
    config.load_kube_config(**kwargs)
    return client.Configuration.get_default_copy()


def _status_message(exc: ApiException) -> str:
    """Extract the Status message from an API error, falling back to the HTTP reason."""
    if exc.body:
        try:
            body = json.loads(exc.body)
        except (TypeError, ValueError):
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
    if exc.reason:
        return str(exc.reason)
    return f"HTTP {exc.status}"


class KubernetesGateway:
    """ClusterGateway backed by the official kubernetes client."""

    def __init__(
        self,
        core: client.CoreV1Api,
        page_size: int = DEFAULT_PAGE_SIZE,
        request_timeout: float | None = None,
    ) -> None:
        self._core = core
        self.page_size = page_size
        self.request_timeout = request_timeout
        self._list_calls: dict[ResourceKind, Callable[..., Any]] = {
            ResourceKind.PODS: core.list_pod_for_all_namespaces,
            ResourceKind.NAMESPACES: core.list_namespace,
            ResourceKind.NODES: core.list_node,
            ResourceKind.EVENTS: core.list_event_for_all_namespaces,
            ResourceKind.PERSISTENT_VOLUME_CLAIMS: core.list_persistent_volume_claim_for_all_namespaces,
        }

    @classmethod
    def connect(
        cls,
        kubeconfig: str | None = None,
        context: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        request_timeout: float | None = None,
    ) -> KubernetesGateway:
        """Build a gateway from kubeconfig or in-cluster credentials.

        Raises SessionBootstrapError when the configuration cannot be loaded.
        """
        try:
            cfg = _load_kube_config(kubeconfig, context)
            core = client.CoreV1Api(client.ApiClient(cfg))
        except Exception as e:
            raise SessionBootstrapError(f"Cannot load Kubernetes configuration: {e}") from e
        logger.debug("Connected to API server at %s", cfg.host)
        return cls(core, page_size=page_size, request_timeout=request_timeout)

    def list_resources(self, kind: ResourceKind) -> list[Any]:
        """Return every object of ``kind``, following continue tokens until the last page."""
        list_call = self._list_calls[kind]
        items: list[Any] = []
        token: str | None = None
        pages = 0
        while True:
            kwargs: dict[str, Any] = {"limit": self.page_size}
            if token:
                kwargs["_continue"] = token
            page = self._call(list_call, kind=kind.value, **kwargs)
            pages += 1
            items.extend(page.items or [])
            token = page.metadata._continue if page.metadata else None
            if not token:
                break
        logger.debug("Listed %d %s in %d page(s)", len(items), kind.value, pages)
        return items

    def read_pod(self, namespace: str, name: str) -> Any:
        return self._call(
            self._core.read_namespaced_pod,
            kind="pod",
            name=name,
            namespace=namespace,
        )

    def _call(
        self,
        func: Callable[..., Any],
        kind: str,
        name: str | None = None,
        namespace: str | None = None,
        **kwargs: Any,
    ) -> Any:
        """Invoke one API call and translate client errors into ClusterQueryError."""
        if name is not None:
            kwargs["name"] = name
        if namespace is not None:
            kwargs["namespace"] = namespace
        if self.request_timeout is not None:
            kwargs["_request_timeout"] = self.request_timeout
        try:
            return func(**kwargs)
        except ApiException as e:
            if e.status == 404 and name is not None:
                raise NotFoundError(kind, name, namespace) from e
            raise ApiStatusError(_status_message(e), status=e.status, reason=e.reason) from e
        except Exception as e:
            # urllib3 and OS errors, and credential plugin failures during token refresh
            raise TransportError(e) from e

