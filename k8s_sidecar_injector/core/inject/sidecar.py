from typing import List, Sequence

from k8s_sidecar_injector.config.config import SidecarSettings
from k8s_sidecar_injector.core.types import (
    BackendInstance,
    Container,
    EnvVar,
    InjectionDecision,
    Workload,
)
from k8s_sidecar_injector.core.inject.args import build_args, collector_host_port
from k8s_sidecar_injector.core.inject.constants import (
    AGENT_PORTS,
    APP_LABEL,
    ENV_PROPAGATION,
    ENV_SERVICE_NAME,
    SIDECAR_NAME,
)
from k8s_sidecar_injector.core.inject.eligibility import needed
from k8s_sidecar_injector.core.inject.env import build_env
from k8s_sidecar_injector.core.inject.resources import limits_for
from k8s_sidecar_injector.core.inject.selector import select
from k8s_sidecar_injector.utils.logger import ComponentLogger

injector_logger = ComponentLogger("SIDECAR_INJECTOR")


def container(instance: BackendInstance, workload: Workload, env: List[EnvVar], settings: SidecarSettings) -> Container:
    """Build the agent sidecar reporting to ``instance``."""
    tracing_env = [var.model_copy() for var in env if var.name in (ENV_SERVICE_NAME, ENV_PROPAGATION)]
    return Container(
        name=SIDECAR_NAME,
        image=settings.image,
        env=tracing_env,
        args=build_args(instance.options, collector_host_port(instance, workload.namespace)),
        ports=[port.model_copy() for port in AGENT_PORTS],
        resource_limits=limits_for(workload, settings),
    )


def inject(workload: Workload, instance: BackendInstance, settings: SidecarSettings) -> Workload:
    """
    Return a copy of ``workload`` with the agent sidecar appended.

    The input is never modified. When the workload does not need a sidecar
    the copy is returned unchanged. The primary container gets the tracing
    environment variables when the workload has an ``app`` label; existing
    containers keep their order and the sidecar always comes last.
    """
    mutated = workload.model_copy(deep=True)
    if not needed(mutated):
        return mutated

    env = build_env(mutated) if APP_LABEL in mutated.labels else []
    if env:
        mutated.containers[0].env = env

    mutated.containers.append(container(instance, mutated, env, settings))
    injector_logger.log_structured(
        level="INFO",
        message="Injected Jaeger agent sidecar",
        workload=mutated.key,
        extra={"jaeger": instance.name, "image": settings.image},
    )
    return mutated


def decide(workload: Workload, candidates: Sequence[BackendInstance]) -> InjectionDecision:
    """Evaluate the workload against the known Jaeger instances."""
    if not needed(workload):
        return InjectionDecision.skip()

    instance = select(workload, candidates)
    if instance is None:
        injector_logger.log_structured(
            level="WARNING",
            message="No suitable Jaeger instance found, sidecar not injected",
            workload=workload.key,
            extra={"candidates": [c.name for c in candidates]},
        )
        return InjectionDecision.skip()
    return InjectionDecision.inject(instance)


def process(workload: Workload, candidates: Sequence[BackendInstance], settings: SidecarSettings) -> Workload:
    """Decide and, when an instance resolves, inject. Always returns a new workload."""
    decision = decide(workload, candidates)
    if not decision.needed:
        return workload.model_copy(deep=True)
    return inject(workload, decision.instance, settings)
