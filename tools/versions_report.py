#!/usr/bin/env python3
"""
versions_report.py — List the primary components of a cluster with their versions.

Usage:
    python -m tools.versions_report [--debug] [--kubeconfig PATH] [--namespace NS]
    python -m tools.versions_report --input deployments.json --output json

Reads deployments (through kubectl, or from a saved ``kubectl get -o json``
document), keeps one primary workload per application instance and prints
``<name> <version>`` for each of them.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import TextIO

from domain.component_filter import evaluate_workloads
from domain.models import ComponentVersion, LabelKeys
from domain.ports import ReportSink, WorkloadRetrievalError, WorkloadSource
from tools.adapters.json_file_source import JsonFileWorkloadSource
from tools.adapters.kubectl_source import KubectlWorkloadSource
from tools.adapters.report_sinks import JsonReportSink, LineReportSink
from tools.config import ConfigError, ReportConfig, load_config

logger = logging.getLogger(__name__)

EXIT_RETRIEVAL_ERROR = 1
EXIT_CONFIG_ERROR = 2


def run_report(
    source: WorkloadSource,
    sink: ReportSink,
    label_keys: LabelKeys | None = None,
) -> dict:
    """Evaluate every workload from the source and send the results to the sink."""
    summary = {"total": 0, "reported": 0, "skipped": 0}
    results = evaluate_workloads(source.list_workloads(), label_keys or LabelKeys())
    for result in results:
        summary["total"] += 1
        if isinstance(result, ComponentVersion):
            sink.emit(result)
            summary["reported"] += 1
        else:
            sink.skip(result)
            summary["skipped"] += 1
    sink.close()
    return summary


def build_source(config: ReportConfig, input_path: str | None = None) -> WorkloadSource:
    if input_path:
        return JsonFileWorkloadSource(input_path)
    return KubectlWorkloadSource(config.kubectl)


def build_sink(config: ReportConfig, stream: TextIO | None = None) -> ReportSink:
    if config.output == "json":
        return JsonReportSink(stream, debug=config.debug)
    return LineReportSink(stream, debug=config.debug)


def apply_arguments(config: ReportConfig, args: argparse.Namespace) -> ReportConfig:
    """Override the loaded configuration with explicit command-line flags."""
    kubectl_overrides = {
        key: value
        for key, value in (
            ("kubeconfig", args.kubeconfig),
            ("context", args.context),
            ("namespace", args.namespace),
            ("kinds", tuple(args.kinds) if args.kinds else None),
        )
        if value is not None
    }
    overrides = {"kubectl": dataclasses.replace(config.kubectl, **kubectl_overrides)}
    if args.debug:
        overrides["debug"] = True
    if args.output:
        overrides["output"] = args.output
    return dataclasses.replace(config, **overrides)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Versions of the primary components deployed in a cluster"
    )
    parser.add_argument("--config", help="YAML config file (default: tools/config.yaml)")
    parser.add_argument("--debug", action="store_true", help="Also print skipped workloads")
    parser.add_argument("--kubeconfig", help="Absolute path to the kubeconfig file")
    parser.add_argument("--context", help="kubeconfig context to use")
    parser.add_argument("-n", "--namespace", help="Only this namespace (default: all)")
    parser.add_argument(
        "--kind", dest="kinds", action="append",
        help="Workload kind to list, repeatable (default: deployments)",
    )
    parser.add_argument("--input", help="Read a kubectl JSON dump instead of the cluster ('-' for stdin)")
    parser.add_argument("--output", choices=["text", "json"], help="Output format")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = apply_arguments(load_config(args.config), args)
    except ConfigError as e:
        logging.basicConfig(level=logging.WARNING, stream=sys.stderr)
        logger.error("%s", e)
        return EXIT_CONFIG_ERROR

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    source = build_source(config, args.input)
    sink = build_sink(config)
    try:
        summary = run_report(source, sink, config.labels)
    except WorkloadRetrievalError as e:
        logger.error("Could not retrieve workloads: %s", e)
        return EXIT_RETRIEVAL_ERROR

    logger.debug(
        "%d workloads: %d reported, %d skipped",
        summary["total"], summary["reported"], summary["skipped"],
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
