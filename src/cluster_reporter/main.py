"""CLI entrypoint for the cluster reporter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cluster_reporter import __version__
from cluster_reporter.config import get_settings
from cluster_reporter.errors import SessionBootstrapError
from cluster_reporter.observation import KubernetesGateway
from cluster_reporter.poller import run_forever


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cluster Reporter: print Kubernetes cluster counts and pod status on a fixed interval.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="(optional) absolute path to the kubeconfig file (default: KUBECONFIG env or ~/.kube/config)",
    )
    parser.add_argument(
        "--context",
        default=None,
        help="Kubernetes context to use",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for cluster-reporter CLI."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
    )
    logger = logging.getLogger("cluster_reporter")
    if not args.verbose:
        logger.setLevel(logging.WARNING)

    try:
        return _run(args, logger)
    except KeyboardInterrupt:
        return 130


def _run(args: argparse.Namespace, logger: logging.Logger) -> int:
    """Bootstrap the gateway and poll until interrupted."""
    try:
        settings = get_settings()
        overrides = {}
        if args.kubeconfig:
            overrides["kubeconfig"] = args.kubeconfig
        if args.context:
            overrides["context"] = args.context
        if overrides:
            settings = settings.model_copy(update=overrides)

        gateway = KubernetesGateway.connect(
            kubeconfig=str(settings.kubeconfig) if settings.kubeconfig else None,
            context=settings.context,
            page_size=settings.list_page_size,
            request_timeout=settings.request_timeout,
        )
    except (SessionBootstrapError, ValidationError) as e:
        logger.debug("Startup failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 2

    run_forever(gateway, settings, Console())
    return 0


if __name__ == "__main__":
    sys.exit(main())
