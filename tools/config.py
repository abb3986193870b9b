"""Configuration loading — YAML file, environment, built-in defaults.

Precedence (highest first): command-line flags (applied by the caller),
environment variables, the YAML file, defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

import yaml
from jsonschema import ValidationError, validate

from domain.models import LabelKeys

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.yaml")

_TRUTHY = {"1", "true", "yes", "on"}

_LABEL_KEY = {"type": "string", "minLength": 1}
_OPTIONAL_STRING = {"type": ["string", "null"]}

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "debug": {"type": "boolean"},
        "output": {"enum": ["text", "json"]},
        "kubectl": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "binary": {"type": "string", "minLength": 1},
                "kubeconfig": _OPTIONAL_STRING,
                "context": _OPTIONAL_STRING,
                "namespace": _OPTIONAL_STRING,
                "kinds": {
                    "type": "array",
                    "items": {"type": "string", "minLength": 1},
                    "minItems": 1,
                },
                "timeout": {"type": "number", "exclusiveMinimum": 0},
                "chunk_size": {"type": "integer", "minimum": 0},
            },
        },
        "labels": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "instance": _LABEL_KEY,
                "name": _LABEL_KEY,
                "component": _LABEL_KEY,
                "version": _LABEL_KEY,
            },
        },
    },
}


class ConfigError(ValueError):
    """The configuration file is missing, unreadable or invalid."""


@dataclass(frozen=True)
class KubectlSettings:
    """How to call kubectl to list workloads."""

    binary: str = "kubectl"
    kubeconfig: str | None = None
    context: str | None = None
    namespace: str | None = None
    kinds: tuple[str, ...] = ("deployments",)
    timeout: float = 60.0
    chunk_size: int = 500


@dataclass(frozen=True)
class ReportConfig:
    """Settings for one report run."""

    debug: bool = False
    output: str = "text"
    kubectl: KubectlSettings = field(default_factory=KubectlSettings)
    labels: LabelKeys = field(default_factory=LabelKeys)


def default_kubeconfig(environ: Mapping[str, str]) -> str:
    """``~/.kube/config`` when a home directory is known, else an empty string."""
    home = environ.get("HOME") or environ.get("USERPROFILE")
    if home:
        return os.path.join(home, ".kube", "config")
    return ""


def read_config_file(path: str | None = None) -> dict:
    """Read and validate the YAML config.

    Without an explicit path, a missing default file yields an empty config.
    """
    explicit = path is not None
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        return {}

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    if data is None:
        return {}
    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigError(f"Invalid config {path} at {location}: {e.message}") from e
    return data


def load_config(
    path: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ReportConfig:
    """Build the ReportConfig from the YAML file and the environment."""
    environ = os.environ if environ is None else environ
    data = read_config_file(path)
    kubectl = data.get("kubectl") or {}

    debug = bool(data.get("debug", False))
    env_debug = environ.get("WORKLOAD_VERSIONS_DEBUG")
    if env_debug is not None:
        debug = env_debug.strip().lower() in _TRUTHY

    # KUBECONFIG may list several files; kubectl merges them itself.
    if environ.get("KUBECONFIG"):
        kubeconfig = None
    else:
        kubeconfig = kubectl.get("kubeconfig") or default_kubeconfig(environ) or None

    defaults = KubectlSettings()
    settings = KubectlSettings(
        binary=kubectl.get("binary", defaults.binary),
        kubeconfig=kubeconfig,
        context=kubectl.get("context"),
        namespace=kubectl.get("namespace"),
        kinds=tuple(kubectl.get("kinds", defaults.kinds)),
        timeout=float(kubectl.get("timeout", defaults.timeout)),
        chunk_size=int(kubectl.get("chunk_size", defaults.chunk_size)),
    )
    return ReportConfig(
        debug=debug,
        output=data.get("output", "text"),
        kubectl=settings,
        labels=LabelKeys(**(data.get("labels") or {})),
    )
