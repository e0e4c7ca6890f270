from pydantic import BaseModel, Field, ConfigDict, field_validator, field_serializer
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from k8s_sidecar_injector.core.quantity import Quantity, parse_quantity

OptionValue = Union[bool, int, float, str]


class EnvVar(BaseModel):
    """Environment variable definition"""
    name: str = Field(..., min_length=1, description="Env var name")
    value: str = Field("", description="Env var value")


class ContainerPort(BaseModel):
    """Port exposed by a container"""
    name: str = Field(..., description="Port name")
    container_port: int = Field(..., ge=1, le=65535)
    protocol: Literal["TCP", "UDP"] = Field("TCP")


class Container(BaseModel):
    """A container of a workload's pod template"""
    name: str = Field("", description="Container name")
    image: str = Field("", description="Container image with tag")
    env: List[EnvVar] = Field(default_factory=list)
    args: List[str] = Field(default_factory=list)
    ports: List[ContainerPort] = Field(default_factory=list)
    resource_limits: Dict[str, Quantity] = Field(
        default_factory=dict,
        description="Resource limits keyed by resource kind ('cpu', 'memory')"
    )

    @field_validator('resource_limits', mode='before')
    @classmethod
    def parse_limits(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return {kind: parse_quantity(q) if isinstance(q, str) else q for kind, q in v.items()}
        return v

    @field_validator('env')
    @classmethod
    def unique_env_names(cls, v: List[EnvVar]) -> List[EnvVar]:
        names = [e.name for e in v]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate environment variable names: {names}")
        return v

    @field_serializer('resource_limits')
    def serialize_limits(self, limits: Dict[str, Quantity]) -> Dict[str, str]:
        return {kind: str(q) for kind, q in limits.items()}


class Workload(BaseModel):
    """
    A deployable pod template.

    ``containers[0]`` is always the primary (application) container.
    """
    name: str = Field("", description="Workload name, used for logging only")
    namespace: str = Field("", description="Namespace; empty when unset")
    annotations: Dict[str, str] = Field(default_factory=dict)
    labels: Dict[str, str] = Field(default_factory=dict)
    containers: List[Container] = Field(..., min_length=1)

    @property
    def primary_container(self) -> Container:
        return self.containers[0]

    @property
    def key(self) -> str:
        return f"{self.namespace or 'default'}/{self.name}"


class BackendInstance(BaseModel):
    """
    A Jaeger instance the sidecar can report to.

    ``options`` holds the agent options of the instance. Nested mappings are
    flattened into dotted keys, so ``{"reporter": {"type": "grpc"}}`` becomes
    ``{"reporter.type": "grpc"}``.
    """
    name: str = Field(..., min_length=1)
    namespace: str = Field("")
    options: Dict[str, OptionValue] = Field(default_factory=dict)

    @field_validator('options', mode='before')
    @classmethod
    def flatten_options(cls, v: Any) -> Any:
        if isinstance(v, dict):
            return _flatten(v)
        return v


def _flatten(options: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    flat: Dict[str, Any] = {}
    for key, value in options.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{full_key}."))
        else:
            flat[full_key] = value
    return flat


class AnyInstance(BaseModel):
    """Routing annotation asking for the only available instance."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["any"] = "any"


class NamedInstance(BaseModel):
    """Routing annotation naming a specific instance."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["named"] = "named"
    name: str


RoutingAnnotation = Annotated[Union[AnyInstance, NamedInstance], Field(discriminator="kind")]


class InjectionDecision(BaseModel):
    """Outcome of evaluating a workload: skip it, or inject a given instance."""
    needed: bool = False
    instance: Optional[BackendInstance] = None

    @classmethod
    def skip(cls) -> "InjectionDecision":
        return cls(needed=False)

    @classmethod
    def inject(cls, instance: BackendInstance) -> "InjectionDecision":
        return cls(needed=True, instance=instance)
