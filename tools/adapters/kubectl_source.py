"""Workload source adapter backed by the kubectl command line."""

from __future__ import annotations

import json
import logging
import subprocess

from domain.models import WorkloadRecord
from domain.ports import WorkloadRetrievalError, WorkloadSource
from tools.adapters.manifests import workloads_from_document
from tools.config import KubectlSettings

logger = logging.getLogger(__name__)


def kubectl_duration(seconds: float) -> str:
    """Format seconds as a kubectl duration: whole seconds, else milliseconds (min 1ms)."""
    millis = max(1, round(seconds * 1000))
    if millis % 1000 == 0:
        return f"{millis // 1000}s"
    return f"{millis}ms"


class KubectlWorkloadSource(WorkloadSource):
    """Lists workloads with ``kubectl get <kinds> -o json``.

    kubectl handles authentication from the kubeconfig and pages through
    large listings itself (``--chunk-size``).
    """

    def __init__(self, settings: KubectlSettings | None = None):
        self.settings = settings or KubectlSettings()

    def build_command(self) -> list[str]:
        s = self.settings
        cmd = [s.binary, "get", ",".join(s.kinds), "-o", "json"]
        if s.namespace:
            cmd += ["--namespace", s.namespace]
        else:
            cmd.append("--all-namespaces")
        if s.kubeconfig:
            cmd += ["--kubeconfig", s.kubeconfig]
        if s.context:
            cmd += ["--context", s.context]
        cmd.append(f"--chunk-size={s.chunk_size}")
        cmd.append(f"--request-timeout={kubectl_duration(s.timeout)}")
        return cmd

    def list_workloads(self) -> list[WorkloadRecord]:
        cmd = self.build_command()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                # Leave kubectl its own request timeout before killing it.
                timeout=self.settings.timeout + 5,
            )
        except FileNotFoundError as e:
            raise WorkloadRetrievalError(
                f"{self.settings.binary} not installed or not in PATH"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise WorkloadRetrievalError(
                f"kubectl did not answer within {self.settings.timeout:g}s"
            ) from e
        except UnicodeDecodeError as e:
            raise WorkloadRetrievalError(f"kubectl output is not UTF-8 text: {e}") from e
        except OSError as e:
            raise WorkloadRetrievalError(f"Could not run kubectl: {e}") from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise WorkloadRetrievalError(stderr or "kubectl command failed")

        try:
            document = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise WorkloadRetrievalError(f"Invalid JSON from kubectl: {e}") from e

        records = workloads_from_document(document)
        logger.debug("Retrieved %d workloads", len(records))
        return records
