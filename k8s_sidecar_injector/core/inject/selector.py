from typing import Optional, Sequence

from k8s_sidecar_injector.core.types import (
    AnyInstance,
    BackendInstance,
    NamedInstance,
    RoutingAnnotation,
    Workload,
)
from k8s_sidecar_injector.core.inject.constants import ANNOTATION, ANNOTATION_LEGACY, ANY_INSTANCE
from k8s_sidecar_injector.utils.logger import ComponentLogger

selector_logger = ComponentLogger("BACKEND_SELECTOR")


def parse_routing_annotation(value: str) -> RoutingAnnotation:
    if value == ANY_INSTANCE:
        return AnyInstance()
    return NamedInstance(name=value)


def routing_annotation(workload: Workload) -> Optional[RoutingAnnotation]:
    """
    Read the routing annotation of a workload.

    The current annotation key wins over the legacy one when both are set.
    An empty value counts as absent. Returns None when neither is set.
    """
    for key in (ANNOTATION, ANNOTATION_LEGACY):
        if workload.annotations.get(key):
            return parse_routing_annotation(workload.annotations[key])
    return None


def select(workload: Workload, candidates: Sequence[BackendInstance]) -> Optional[BackendInstance]:
    """
    Pick the Jaeger instance the workload asks for.

    A named annotation resolves to the candidate with that name. The "any"
    annotation resolves only when exactly one candidate exists; with none or
    several candidates nothing is selected.
    """
    annotation = routing_annotation(workload)
    if annotation is None:
        return None

    if isinstance(annotation, NamedInstance):
        for candidate in candidates:
            if candidate.name == annotation.name:
                return candidate
        selector_logger.log_structured(
            level="DEBUG",
            message="No Jaeger instance matches the requested name",
            workload=workload.key,
            extra={"requested": annotation.name, "candidates": len(candidates)},
        )
        return None

    if len(candidates) == 1:
        return candidates[0]

    selector_logger.log_structured(
        level="DEBUG",
        message="Cannot pick a Jaeger instance automatically",
        workload=workload.key,
        extra={"candidates": len(candidates)},
    )
    return None
