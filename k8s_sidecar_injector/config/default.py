class DefaultConfig:
    """Default configuration for the Jaeger sidecar injector."""
    # Agent sidecar image
    JAEGER_AGENT_IMAGE: str = "jaegertracing/jaeger-agent"
    JAEGER_VERSION: str = "1.7"

    # Agent sidecar resource limits (Kubernetes quantity notation)
    JAEGER_AGENT_MAX_CPU: str = "500m"
    JAEGER_AGENT_MAX_MEMORY: str = "128Mi"

    # Logging Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "k8s_sidecar_injector.log"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    LOG_TO_CONSOLE: bool = True
    LOG_TO_FILE: bool = False
    LOG_STRUCTURED_JSON: bool = False
