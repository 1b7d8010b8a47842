"""Cluster Reporter: periodic plain-text status reports for a Kubernetes cluster."""

__version__ = "0.1.0"
