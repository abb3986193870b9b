"""Domain models — pure Python, zero external dependencies.

Only stdlib imports allowed: dataclasses, enum, typing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Union


class SkipReason(Enum):
    """Why a workload was left out of the report."""

    NO_VERSION = "no_version"
    NAME_MISMATCH = "name_mismatch"


# ── Value Objects ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class LabelKeys:
    """Label keys read from each workload (Kubernetes recommended labels)."""

    instance: str = "app.kubernetes.io/instance"
    name: str = "app.kubernetes.io/name"
    component: str = "app.kubernetes.io/component"
    version: str = "app.kubernetes.io/version"


# ── Entities ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class WorkloadRecord:
    """A deployed workload as returned by the cluster: its name and labels."""

    name: str
    labels: Mapping[str, str] = field(default_factory=dict)
    namespace: str | None = None
    kind: str | None = None

    def label(self, key: str) -> str:
        """Return the label value, or an empty string when the label is absent."""
        value = self.labels.get(key)
        return "" if value is None else str(value)


# ── Result Value Objects ────────────────────────────────────────────────


@dataclass(frozen=True)
class ComponentVersion:
    """A primary component and its normalized version, ready to be reported."""

    name: str
    version: str


@dataclass(frozen=True)
class SkippedWorkload:
    """A workload excluded from the report, with the reason."""

    workload: str
    reason: SkipReason
    resolved_name: str | None = None


EvaluationResult = Union[ComponentVersion, SkippedWorkload]
