"""Custom exceptions for the Jaeger sidecar injector."""

from typing import Optional, Any


class SidecarInjectorError(Exception):
    """Base exception for all sidecar injector errors."""
    pass

class ValidationError(SidecarInjectorError):
    """Raised for validation errors in workloads or configuration values."""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

class InvalidQuantityError(ValidationError):
    """Raised when a string is not a valid Kubernetes resource quantity."""
    def __init__(self, value: Any, field: Optional[str] = None) -> None:
        super().__init__(f"Invalid resource quantity: {value!r}", field=field, value=value)

class ManifestError(ValidationError):
    """Raised when a manifest does not have the shape of a workload or backend instance."""
    def __init__(self, message: str, kind: Optional[str] = None, field: Optional[str] = None) -> None:
        super().__init__(message, field)
        self.kind = kind

class ConfigError(SidecarInjectorError):
    """Raised for configuration-related errors."""
    pass
