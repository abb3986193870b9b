"""Domain component filtering — pure functions, zero external dependencies.

Decides, for each workload, whether it is the primary component of its
instance and, if so, which (name, version) pair to report.

Only stdlib and domain imports allowed.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from domain.models import (
    ComponentVersion,
    EvaluationResult,
    LabelKeys,
    SkippedWorkload,
    SkipReason,
    WorkloadRecord,
)
from domain.name_resolution import component_qualified_name, resolve_component_name
from domain.normalization import normalize_version

DEFAULT_LABEL_KEYS = LabelKeys()


def is_primary_component(workload_name, resolved_name, instance, component):
    """Check that a workload carries the canonical name of its instance.

    The workload also counts as primary when it is named after its component
    label, ``<instance>-<component>``.
    """
    if workload_name == resolved_name:
        return True
    qualified = component_qualified_name(instance, component)
    return qualified is not None and workload_name == qualified


def evaluate_workload(
    record: WorkloadRecord,
    label_keys: LabelKeys = DEFAULT_LABEL_KEYS,
) -> EvaluationResult:
    """Evaluate one workload into a reportable version or a skip."""
    version = record.label(label_keys.version)
    if not version.strip():
        return SkippedWorkload(workload=record.name, reason=SkipReason.NO_VERSION)

    instance = record.label(label_keys.instance)
    name = record.label(label_keys.name)
    component = record.label(label_keys.component)

    resolved = resolve_component_name(instance, name)
    if not is_primary_component(record.name, resolved, instance, component):
        return SkippedWorkload(
            workload=record.name,
            reason=SkipReason.NAME_MISMATCH,
            resolved_name=resolved,
        )
    return ComponentVersion(name=resolved, version=normalize_version(version))


def evaluate_workloads(
    records: Iterable[WorkloadRecord],
    label_keys: LabelKeys = DEFAULT_LABEL_KEYS,
) -> Iterator[EvaluationResult]:
    """Lazily evaluate workloads in input order, one result per record."""
    for record in records:
        yield evaluate_workload(record, label_keys)
