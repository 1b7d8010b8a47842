"""Tests for Settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cluster_reporter.config import DEFAULT_POD_NAME, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "KUBECONFIG",
        "CONTEXT",
        "NAMESPACE",
        "POD_NAME",
        "POLL_INTERVAL",
        "LIST_PAGE_SIZE",
        "REQUEST_TIMEOUT",
    ):
        monkeypatch.delenv(f"CLUSTER_REPORTER_{var}", raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)

        assert settings.kubeconfig is None
        assert settings.namespace == "default"
        assert settings.pod_name == DEFAULT_POD_NAME
        assert settings.poll_interval == 10.0
        assert settings.list_page_size == 500
        assert settings.request_timeout is None

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLUSTER_REPORTER_KUBECONFIG", "/etc/kube/admin.conf")
        monkeypatch.setenv("CLUSTER_REPORTER_NAMESPACE", "payments")
        monkeypatch.setenv("CLUSTER_REPORTER_POD_NAME", "api-0")
        monkeypatch.setenv("CLUSTER_REPORTER_POLL_INTERVAL", "2.5")

        settings = Settings(_env_file=None)

        assert settings.kubeconfig == Path("/etc/kube/admin.conf")
        assert settings.namespace == "payments"
        assert settings.pod_name == "api-0"
        assert settings.poll_interval == 2.5

    @pytest.mark.parametrize(
        "overrides",
        [
            {"poll_interval": 0},
            {"poll_interval": -1},
            {"list_page_size": 0},
            {"namespace": ""},
            {"request_timeout": 0},
        ],
    )
    def test_invalid_values_rejected(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_immutable(self) -> None:
        settings = Settings(_env_file=None)

        with pytest.raises(ValidationError):
            settings.namespace = "other"
