from typing import Dict, Optional, Tuple

from k8s_sidecar_injector.config.config import SidecarSettings
from k8s_sidecar_injector.core.quantity import Quantity, parse_quantity
from k8s_sidecar_injector.core.types import Workload
from k8s_sidecar_injector.core.inject.constants import (
    ANNOTATION_LIMIT_CPU,
    ANNOTATION_LIMIT_MEMORY,
    DEFAULT_CPU_LIMIT,
    DEFAULT_MEMORY_LIMIT,
)
from k8s_sidecar_injector.utils.exceptions import InvalidQuantityError
from k8s_sidecar_injector.utils.logger import ComponentLogger

resources_logger = ComponentLogger("RESOURCE_LIMITS")


def _parse_or_default(configured: Optional[str], default: str, field: str) -> Quantity:
    try:
        return parse_quantity(configured)
    except InvalidQuantityError as e:
        resources_logger.log_structured(
            level="WARNING",
            message="Invalid sidecar resource limit, using the default",
            extra={"field": field, "configured": e.value, "default": default},
        )
        return parse_quantity(default)


def resolve_limits(configured_cpu: Optional[str], configured_memory: Optional[str]) -> Tuple[Quantity, Quantity]:
    """
    Parse the configured CPU and memory limits.

    Each value falls back to its own default (500m / 128Mi) when it does not
    parse; a bad CPU value never affects memory and vice versa. Never raises.
    """
    cpu = _parse_or_default(configured_cpu, DEFAULT_CPU_LIMIT, "cpu")
    memory = _parse_or_default(configured_memory, DEFAULT_MEMORY_LIMIT, "memory")
    return cpu, memory


def limits_for(workload: Workload, settings: SidecarSettings) -> Dict[str, Quantity]:
    """Resource limits of the sidecar; workload annotations override the settings."""
    cpu, memory = resolve_limits(
        workload.annotations.get(ANNOTATION_LIMIT_CPU, settings.max_cpu),
        workload.annotations.get(ANNOTATION_LIMIT_MEMORY, settings.max_memory),
    )
    return {"cpu": cpu, "memory": memory}
