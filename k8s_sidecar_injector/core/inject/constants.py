"""Names shared with workloads, tracing clients and Jaeger custom resources."""

from k8s_sidecar_injector.core.types import ContainerPort

# Workload annotations selecting the Jaeger instance, checked in this order
ANNOTATION = "sidecar.jaegertracing.io/inject"
ANNOTATION_LEGACY = "inject-jaeger-agent"

# Routing annotation value meaning "the only Jaeger instance available"
ANY_INSTANCE = "true"

# Per-workload overrides of the sidecar resource limits
ANNOTATION_LIMIT_CPU = "jaeger-agent-max-cpu"
ANNOTATION_LIMIT_MEMORY = "jaeger-agent-max-memory"

SIDECAR_NAME = "jaeger-agent"
APP_LABEL = "app"
DEFAULT_NAMESPACE = "default"

# Read by the tracing clients inside the application containers
ENV_SERVICE_NAME = "SERVICE_NAME"
ENV_PROPAGATION = "PROPAGATION_FORMAT"
DEFAULT_PROPAGATION = "jaeger,b3"

DEFAULT_CPU_LIMIT = "500m"
DEFAULT_MEMORY_LIMIT = "128Mi"

REPORTER_TYPE = "reporter.type"
REPORTER_GRPC_HOST_PORT = "reporter.grpc.host-port"
COLLECTOR_GRPC_PORT = 14250

AGENT_PORTS = (
    ContainerPort(name="zipkin-compact", container_port=5775, protocol="UDP"),
    ContainerPort(name="jaeger-compact", container_port=6831, protocol="UDP"),
    ContainerPort(name="jaeger-binary", container_port=6832, protocol="UDP"),
    ContainerPort(name="config-rest", container_port=5778, protocol="TCP"),
)
