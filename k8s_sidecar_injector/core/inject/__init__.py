"""
Sidecar injection engine.

Decides whether a workload gets the Jaeger agent sidecar, picks the Jaeger
instance it reports to and builds the sidecar container.
"""

from k8s_sidecar_injector.core.inject.args import build_args, collector_host_port
from k8s_sidecar_injector.core.inject.eligibility import has_sidecar, needed
from k8s_sidecar_injector.core.inject.env import build_env
from k8s_sidecar_injector.core.inject.resources import limits_for, resolve_limits
from k8s_sidecar_injector.core.inject.selector import routing_annotation, select
from k8s_sidecar_injector.core.inject.sidecar import decide, inject, process

__all__ = [
    "build_args",
    "build_env",
    "collector_host_port",
    "decide",
    "has_sidecar",
    "inject",
    "limits_for",
    "needed",
    "process",
    "resolve_limits",
    "routing_annotation",
    "select",
]
