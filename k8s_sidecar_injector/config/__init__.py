from k8s_sidecar_injector.config.config import Config, SidecarSettings
from k8s_sidecar_injector.config.default import DefaultConfig

__all__ = ["Config", "DefaultConfig", "SidecarSettings"]
