"""
Jaeger agent sidecar injector.

Decides whether a Kubernetes workload gets a ``jaeger-agent`` sidecar, which
Jaeger instance it reports to, and builds the sidecar container.
"""

from k8s_sidecar_injector.config.config import Config, SidecarSettings
from k8s_sidecar_injector.core.inject import decide, inject, needed, process, select
from k8s_sidecar_injector.core.types import BackendInstance, Container, EnvVar, Workload

__all__ = [
    "BackendInstance",
    "Config",
    "Container",
    "EnvVar",
    "SidecarSettings",
    "Workload",
    "decide",
    "inject",
    "needed",
    "process",
    "select",
]
