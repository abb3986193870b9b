"""Conversion of Kubernetes JSON objects (``kubectl get -o json``) into domain records."""

from __future__ import annotations

import logging
from typing import Any

from domain.models import WorkloadRecord
from domain.ports import WorkloadRetrievalError

logger = logging.getLogger(__name__)


def workload_from_item(item: dict[str, Any]) -> WorkloadRecord:
    """Convert one raw workload object into a WorkloadRecord."""
    metadata = item.get("metadata") or {}
    if not isinstance(metadata, dict):
        raise WorkloadRetrievalError(f"'metadata' must be an object, got {metadata!r}")
    raw_labels = metadata.get("labels") or {}
    labels = (
        {str(key): str(value) for key, value in raw_labels.items()}
        if isinstance(raw_labels, dict)
        else {}
    )
    namespace = metadata.get("namespace")
    kind = item.get("kind")
    return WorkloadRecord(
        name=str(metadata.get("name", "")),
        labels=labels,
        namespace=str(namespace) if namespace is not None else None,
        kind=str(kind) if kind is not None else None,
    )


def workloads_from_document(document: Any) -> list[WorkloadRecord]:
    """Convert a ``List`` document (or a single object) into WorkloadRecords.

    Raises WorkloadRetrievalError when the document is not a Kubernetes object.
    """
    if not isinstance(document, dict):
        raise WorkloadRetrievalError(
            f"Expected a JSON object, got {type(document).__name__}"
        )
    if "items" in document:
        items = document["items"] or []
        if not isinstance(items, list):
            raise WorkloadRetrievalError("'items' must be a list")
    else:
        items = [document]

    records = []
    for item in items:
        if not isinstance(item, dict):
            logger.warning("Ignoring non-object item: %r", item)
            continue
        if not isinstance(item.get("metadata") or {}, dict):
            logger.warning("Ignoring item with non-object metadata: %r", item)
            continue
        records.append(workload_from_item(item))
    return records
