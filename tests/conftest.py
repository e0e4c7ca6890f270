import pytest

from k8s_sidecar_injector.config.config import SidecarSettings
from k8s_sidecar_injector.core.types import BackendInstance, Container, Workload


@pytest.fixture
def settings():
    """Sidecar settings independent of the process environment."""
    return SidecarSettings(
        agent_image="jaegertracing/jaeger-agent",
        agent_version="1.7",
        max_cpu="500m",
        max_memory="128Mi",
    )


@pytest.fixture
def make_workload():
    """Factory for single-container workloads."""
    def _make(annotations=None, labels=None, namespace="", env=None):
        return Workload(
            name="testapp",
            namespace=namespace,
            annotations=annotations or {},
            labels=labels or {},
            containers=[Container(name="app", image="example/app:1.0", env=env or [])],
        )
    return _make


@pytest.fixture
def jaeger():
    return BackendInstance(name="my-jaeger")
