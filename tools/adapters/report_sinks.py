"""Report sink adapters writing evaluation results to a text stream."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from domain.models import ComponentVersion, SkippedWorkload, SkipReason
from domain.ports import ReportSink


def describe_skip(skipped: SkippedWorkload) -> str:
    """Return the one-line diagnostic for a skipped workload."""
    if skipped.reason is SkipReason.NO_VERSION:
        return f"{skipped.workload} has no version"
    return f"{skipped.workload} mismatch for {skipped.resolved_name}"


class LineReportSink(ReportSink):
    """Writes ``<name> <version>`` lines; diagnostics only in debug mode."""

    def __init__(self, stream: TextIO | None = None, debug: bool = False):
        self.stream = stream
        self.debug = debug

    def _write(self, line: str) -> None:
        print(line, file=self.stream or sys.stdout)

    def emit(self, component: ComponentVersion) -> None:
        self._write(f"{component.name} {component.version}")

    def skip(self, skipped: SkippedWorkload) -> None:
        if self.debug:
            self._write(describe_skip(skipped))


class JsonReportSink(ReportSink):
    """Buffers results and writes a single JSON document on close."""

    def __init__(self, stream: TextIO | None = None, debug: bool = False):
        self.stream = stream
        self.debug = debug
        self.components: list[dict] = []
        self.skipped: list[dict] = []

    def emit(self, component: ComponentVersion) -> None:
        self.components.append({"name": component.name, "version": component.version})

    def skip(self, skipped: SkippedWorkload) -> None:
        if self.debug:
            self.skipped.append({
                "workload": skipped.workload,
                "reason": skipped.reason.value,
                "resolved_name": skipped.resolved_name,
            })

    def close(self) -> None:
        report = {"components": self.components, "skipped": self.skipped}
        print(json.dumps(report, ensure_ascii=False, indent=2), file=self.stream or sys.stdout)
