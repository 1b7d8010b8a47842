"""Poll loop: collect → build report → print → sleep, repeated."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from rich.console import Console

from cluster_reporter.config import Settings
from cluster_reporter.observation import ClusterCollector, ClusterGateway
from cluster_reporter.reporting import build_report
from cluster_reporter.reporting.messages import SEPARATOR

logger = logging.getLogger(__name__)


def print_report(lines: list[str], console: Console | None = None) -> None:
    """Print report lines verbatim, with no Rich markup or highlighting."""
    c = console or Console()
    for line in lines:
        c.print(line, markup=False, highlight=False, soft_wrap=True)


def run_once(collector: ClusterCollector, console: Console | None = None) -> list[str]:
    """Run a single sweep, print its report followed by the separator, and return the lines."""
    lines = build_report(collector.collect())
    lines.extend(["", SEPARATOR])
    print_report(lines, console)
    return lines


def run_forever(
    gateway: ClusterGateway,
    settings: Settings,
    console: Console | None = None,
    sleep: Callable[[float], None] = time.sleep,
    iterations: int | None = None,
) -> int:
    """
    Report on the cluster every ``settings.poll_interval`` seconds.

    Runs until the process is stopped; ``iterations`` caps the number of
    sweeps (used by tests). Returns the number of sweeps completed.
    """
    c = console or Console()
    collector = ClusterCollector(
        gateway,
        namespace=settings.namespace,
        pod_name=settings.pod_name,
    )
    done = 0
    while iterations is None or done < iterations:
        run_once(collector, c)
        done += 1
        logger.debug("Sweep %d done; sleeping %.1fs", done, settings.poll_interval)
        sleep(settings.poll_interval)
    return done
