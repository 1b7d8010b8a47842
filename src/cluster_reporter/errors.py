"""Errors raised while talking to the cluster."""

from __future__ import annotations


class SessionBootstrapError(Exception):
    """Kubernetes configuration could not be loaded or the client could not be built."""


class ClusterQueryError(Exception):
    """Base class for a single failed query against the API server."""


class NotFoundError(ClusterQueryError):
    """The requested object does not exist."""

    def __init__(self, kind: str, name: str, namespace: str | None = None) -> None:
        self.kind = kind
        self.name = name
        self.namespace = namespace
        where = f" in namespace {namespace}" if namespace else ""
        super().__init__(f"{kind} {name} not found{where}")


class ApiStatusError(ClusterQueryError):
    """The API server rejected or failed the request with a Status object."""

    def __init__(self, message: str, status: int | None = None, reason: str | None = None) -> None:
        self.message = message
        self.status = status
        self.reason = reason
        super().__init__(message)


class TransportError(ClusterQueryError):
    """The request never produced an API response (connection, TLS, timeout, ...)."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause) or cause.__class__.__name__)
