"""Integration tests for tools.config — YAML loading, schema and precedence."""

import os

import pytest

from domain.models import LabelKeys
from tools.config import (
    CONFIG_PATH,
    ConfigError,
    KubectlSettings,
    ReportConfig,
    default_kubeconfig,
    load_config,
    read_config_file,
)


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return str(path)


class TestDefaultKubeconfig:
    def test_from_home(self):
        assert default_kubeconfig({"HOME": "/home/me"}) == os.path.join(
            "/home/me", ".kube", "config"
        )

    def test_from_userprofile(self):
        assert default_kubeconfig({"USERPROFILE": "C:/Users/me"}).startswith("C:/Users/me")

    def test_no_home(self):
        assert default_kubeconfig({}) == ""


class TestReadConfigFile:
    def test_shipped_config_is_valid(self):
        data = read_config_file(CONFIG_PATH)
        assert data["kubectl"]["kinds"] == ["deployments"]

    def test_empty_file(self, tmp_path):
        assert read_config_file(write_config(tmp_path, "")) == {}

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            read_config_file(str(tmp_path / "absent.yaml"))

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            read_config_file(write_config(tmp_path, "debug: [unclosed"))

    def test_unknown_key(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid config"):
            read_config_file(write_config(tmp_path, "verbose: true\n"))

    def test_wrong_type_reports_location(self, tmp_path):
        with pytest.raises(ConfigError, match="kubectl.timeout"):
            read_config_file(write_config(tmp_path, "kubectl:\n  timeout: soon\n"))

    def test_invalid_output(self, tmp_path):
        with pytest.raises(ConfigError):
            read_config_file(write_config(tmp_path, "output: xml\n"))


class TestLoadConfig:
    def test_defaults_from_empty_file(self, tmp_path):
        config = load_config(write_config(tmp_path, ""), environ={})
        assert config == ReportConfig()
        assert config.kubectl == KubectlSettings()
        assert config.labels == LabelKeys()

    def test_default_kubeconfig_from_home(self, tmp_path):
        config = load_config(write_config(tmp_path, ""), environ={"HOME": "/home/me"})
        assert config.kubectl.kubeconfig == os.path.join("/home/me", ".kube", "config")

    def test_kubeconfig_env_left_to_kubectl(self, tmp_path):
        environ = {"HOME": "/home/me", "KUBECONFIG": "/a:/b"}
        config = load_config(write_config(tmp_path, ""), environ=environ)
        assert config.kubectl.kubeconfig is None

    def test_kubeconfig_env_wins_over_file(self, tmp_path):
        path = write_config(tmp_path, "kubectl:\n  kubeconfig: /from/yaml\n")
        config = load_config(path, environ={"KUBECONFIG": "/from/env"})
        assert config.kubectl.kubeconfig is None

    def test_file_kubeconfig_wins_over_home_default(self, tmp_path):
        path = write_config(tmp_path, "kubectl:\n  kubeconfig: /from/yaml\n")
        config = load_config(path, environ={"HOME": "/home/me"})
        assert config.kubectl.kubeconfig == "/from/yaml"

    def test_file_values(self, tmp_path):
        path = write_config(
            tmp_path,
            "debug: true\n"
            "output: json\n"
            "kubectl:\n"
            "  kubeconfig: /etc/kube.conf\n"
            "  namespace: prod\n"
            "  kinds: [deployments, statefulsets]\n"
            "  timeout: 30\n"
            "  chunk_size: 100\n"
            "labels:\n"
            "  version: example.com/version\n",
        )
        config = load_config(path, environ={"HOME": "/home/me"})
        assert config.debug is True
        assert config.output == "json"
        assert config.kubectl.kubeconfig == "/etc/kube.conf"
        assert config.kubectl.namespace == "prod"
        assert config.kubectl.kinds == ("deployments", "statefulsets")
        assert config.kubectl.timeout == 30.0
        assert config.kubectl.chunk_size == 100
        assert config.labels.version == "example.com/version"
        assert config.labels.instance == "app.kubernetes.io/instance"

    @pytest.mark.parametrize("value", ["1", "true", "YES"])
    def test_debug_env_enables(self, tmp_path, value):
        path = write_config(tmp_path, "debug: false\n")
        config = load_config(path, environ={"WORKLOAD_VERSIONS_DEBUG": value})
        assert config.debug is True

    @pytest.mark.parametrize("value", ["0", "no", ""])
    def test_debug_env_disables(self, tmp_path, value):
        path = write_config(tmp_path, "debug: true\n")
        config = load_config(path, environ={"WORKLOAD_VERSIONS_DEBUG": value})
        assert config.debug is False
