"""Workload source adapter reading a saved ``kubectl get -o json`` document."""

from __future__ import annotations

import json
import logging
import sys

from domain.models import WorkloadRecord
from domain.ports import WorkloadRetrievalError, WorkloadSource
from tools.adapters.manifests import workloads_from_document

logger = logging.getLogger(__name__)


class JsonFileWorkloadSource(WorkloadSource):
    """Reads workloads from a JSON file, or from stdin when the path is ``-``."""

    def __init__(self, path: str):
        self.path = path

    def list_workloads(self) -> list[WorkloadRecord]:
        try:
            if self.path == "-":
                document = json.load(sys.stdin)
            else:
                with open(self.path, "r", encoding="utf-8") as f:
                    document = json.load(f)
        except json.JSONDecodeError as e:
            raise WorkloadRetrievalError(f"Invalid JSON in {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise WorkloadRetrievalError(f"{self.path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise WorkloadRetrievalError(f"Cannot read {self.path}: {e}") from e

        records = workloads_from_document(document)
        logger.debug("Read %d workloads from %s", len(records), self.path)
        return records
