"""Workload source and report sink adapters implementing domain ports."""

from tools.adapters.json_file_source import JsonFileWorkloadSource
from tools.adapters.kubectl_source import KubectlWorkloadSource
from tools.adapters.report_sinks import JsonReportSink, LineReportSink

__all__ = [
    "JsonFileWorkloadSource",
    "KubectlWorkloadSource",
    "JsonReportSink",
    "LineReportSink",
]
