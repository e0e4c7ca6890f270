from typing import List

from k8s_sidecar_injector.core.types import EnvVar, Workload
from k8s_sidecar_injector.core.inject.constants import (
    APP_LABEL,
    DEFAULT_NAMESPACE,
    DEFAULT_PROPAGATION,
    ENV_PROPAGATION,
    ENV_SERVICE_NAME,
)


def service_name(workload: Workload) -> str:
    """DNS style "<app>.<namespace>" name, matching the convention used by Istio."""
    app = workload.labels.get(APP_LABEL, "")
    return f"{app}.{workload.namespace or DEFAULT_NAMESPACE}"


def build_env(workload: Workload) -> List[EnvVar]:
    """
    Environment of the primary container once the tracing variables are added.

    Entries the container already defines are kept as they are, in their
    original position. ``SERVICE_NAME`` and ``PROPAGATION_FORMAT`` are
    appended, in that order, only when missing.
    """
    env = [var.model_copy() for var in workload.primary_container.env]
    existing = {var.name for var in env}

    defaults = (
        EnvVar(name=ENV_SERVICE_NAME, value=service_name(workload)),
        EnvVar(name=ENV_PROPAGATION, value=DEFAULT_PROPAGATION),
    )
    for var in defaults:
        if var.name not in existing:
            env.append(var)
    return env
