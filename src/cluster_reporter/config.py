"""Configuration and environment for the cluster reporter."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_POD_NAME = "alpine-deployment-548dbddc9b-dnq9r"


class Settings(BaseSettings):
    """Reporter settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_prefix="CLUSTER_REPORTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Kubernetes
    kubeconfig: Path | None = Field(
        default=None,
        description="Path to kubeconfig; uses KUBECONFIG env or default location if unset",
    )
    context: str | None = Field(default=None, description="Kubernetes context to use")
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; client default if unset",
    )
    list_page_size: int = Field(
        default=500,
        ge=1,
        description="Items requested per page when listing resources",
    )

    # Inspected pod
    namespace: str = Field(default="default", min_length=1, description="Namespace of the inspected pod")
    pod_name: str = Field(default=DEFAULT_POD_NAME, min_length=1, description="Name of the inspected pod")

    # Loop behavior
    poll_interval: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to sleep between two reports",
    )


def get_settings() -> Settings:
    """Return validated settings instance."""
    return Settings()
