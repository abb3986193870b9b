"""Domain ports — abstract interfaces for workload retrieval and reporting.

Only stdlib (abc) and domain.models imports allowed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from domain.models import ComponentVersion, SkippedWorkload, WorkloadRecord


class WorkloadRetrievalError(RuntimeError):
    """Workloads could not be retrieved; the whole batch is lost."""


# ── Source Ports ──────────────────────────────────────────────────────────


class WorkloadSource(ABC):
    """Port for retrieving deployed workloads.

    Implementations raise WorkloadRetrievalError when the batch cannot be read.
    """

    @abstractmethod
    def list_workloads(self) -> Iterable[WorkloadRecord]: ...


# ── Output Ports ──────────────────────────────────────────────────────────


class ReportSink(ABC):
    """Port receiving evaluation results, one call per workload."""

    @abstractmethod
    def emit(self, component: ComponentVersion) -> None: ...

    @abstractmethod
    def skip(self, skipped: SkippedWorkload) -> None: ...

    def close(self) -> None:
        """Flush anything buffered. No-op by default."""
