from k8s_sidecar_injector.core.types import Workload
from k8s_sidecar_injector.core.inject.constants import SIDECAR_NAME
from k8s_sidecar_injector.core.inject.selector import routing_annotation


def has_sidecar(workload: Workload) -> bool:
    """True when one of the workload's containers already is the agent sidecar."""
    return any(container.name == SIDECAR_NAME for container in workload.containers)


def needed(workload: Workload) -> bool:
    """
    Decide whether the workload should receive the agent sidecar.

    A workload qualifies when it carries a non-empty current or legacy
    injection annotation and no container is already named after the sidecar.
    """
    if routing_annotation(workload) is None:
        return False
    return not has_sidecar(workload)
