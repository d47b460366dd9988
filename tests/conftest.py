"""Shared test fixtures for appspec tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from appspec import (
    AppSpec,
    EnvironmentDestinationSpec,
    EnvironmentSpec,
    GitVersionSpec,
    MemoryByteStore,
    RegistryRefSpec,
)

SAMPLE_APP_YAML = """\
apiVersion: 0.1.0
kind: ksonnet.io/app
name: guestbook
version: 0.0.1
authors:
  - alice@example.com
registries:
  incubator:
    protocol: github
    uri: github.com/ksonnet/parts/tree/master/incubator
    gitVersion:
      refSpec: master
      commitSha: 40285d8a14f1ac5787e405e1023cf0c07f6aa28c
environments:
  default:
    k8sVersion: v1.8.0
    path: default
    destination:
      server: https://127.0.0.1:6443
      namespace: default
libraries:
  redis:
    name: redis
    registry: incubator
    gitVersion:
      refSpec: master
      commitSha: 40285d8a14f1ac5787e405e1023cf0c07f6aa28c
"""


@pytest.fixture
def sample_app_yaml() -> str:
    return SAMPLE_APP_YAML


@pytest.fixture
def app_root() -> Path:
    return Path("/work/guestbook")


@pytest.fixture
def memory_store() -> MemoryByteStore:
    return MemoryByteStore()


@pytest.fixture
def empty_spec() -> AppSpec:
    return AppSpec.new("guestbook")


@pytest.fixture
def make_environment() -> Callable[..., EnvironmentSpec]:
    def _make(**overrides: object) -> EnvironmentSpec:
        defaults: dict[str, object] = {
            "name": "dev",
            "kubernetes_version": "1.8.0",
            "path": "environments/dev",
            "destination": EnvironmentDestinationSpec(
                server="https://x", namespace="default"
            ),
            "targets": ["components/app"],
        }
        defaults.update(overrides)
        return EnvironmentSpec(**defaults)  # pyright: ignore[reportArgumentType]

    return _make


@pytest.fixture
def make_registry() -> Callable[..., RegistryRefSpec]:
    def _make(**overrides: object) -> RegistryRefSpec:
        defaults: dict[str, object] = {
            "name": "incubator",
            "protocol": "github",
            "uri": "github.com/ksonnet/parts/tree/master/incubator",
            "git_version": GitVersionSpec(ref_spec="master", commit_sha="abc123"),
        }
        defaults.update(overrides)
        return RegistryRefSpec(**defaults)  # pyright: ignore[reportArgumentType]

    return _make
