from typing import Dict, List, Mapping, Optional

from k8s_sidecar_injector.core.types import BackendInstance, OptionValue
from k8s_sidecar_injector.core.inject.constants import (
    COLLECTOR_GRPC_PORT,
    DEFAULT_NAMESPACE,
    REPORTER_GRPC_HOST_PORT,
    REPORTER_TYPE,
)


def collector_host_port(instance: BackendInstance, namespace: Optional[str] = None) -> str:
    """
    gRPC address of the instance's headless collector service.

    The instance's own namespace is used when known, otherwise the given
    (workload) namespace, otherwise ``default``.
    """
    ns = instance.namespace or namespace or DEFAULT_NAMESPACE
    return f"dns:///{instance.name}-collector-headless.{ns}:{COLLECTOR_GRPC_PORT}"


def format_option_value(value: OptionValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_args(options: Mapping[str, OptionValue], backend_host_port: str) -> List[str]:
    """
    Turn agent options into ``--key=value`` flags, sorted by key.

    When no reporter type is configured the agent reports over gRPC to
    ``backend_host_port``. Options given by the user always win, so an
    explicit ``reporter.type`` suppresses both computed defaults.
    """
    merged: Dict[str, str] = {}
    if REPORTER_TYPE not in options:
        merged[REPORTER_TYPE] = "grpc"
        if REPORTER_GRPC_HOST_PORT not in options:
            merged[REPORTER_GRPC_HOST_PORT] = backend_host_port

    for key, value in options.items():
        merged[key] = format_option_value(value)

    return [f"--{key}={merged[key]}" for key in sorted(merged)]
