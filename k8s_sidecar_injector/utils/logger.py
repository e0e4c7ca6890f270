from colorama import Fore, Style
from enum import Enum
import logging
from datetime import datetime, timezone
from typing import Optional
import json
import sys

# Fall back to defaults when the configuration cannot be built
try:
    from k8s_sidecar_injector.config.config import Config
    config = Config()
except Exception:
    config = None

class ComponentColor(Enum):
    # Injection engine (Green Family)
    SIDECAR_INJECTOR = Fore.GREEN
    BACKEND_SELECTOR = Fore.LIGHTGREEN_EX
    RESOURCE_LIMITS = Fore.LIGHTGREEN_EX

    # Command line (Blue Family)
    INJECTOR_CLI = Fore.LIGHTBLUE_EX

    # Base/Default
    BASE = Fore.WHITE

class LogLevelColor(Enum):
    """Log level colors following traffic light semantics."""
    DEBUG = Fore.LIGHTBLACK_EX
    INFO = Fore.BLUE
    WARNING = Fore.YELLOW
    ERROR = Fore.RED
    CRITICAL = Fore.LIGHTRED_EX

class ComponentLogger:
    """Logger for injector components with color encoding and optional file output."""

    def __init__(self, component_name: str = "BASE", log_to_console: Optional[bool] = None, log_to_file: Optional[bool] = None, log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
        self.component_name = component_name
        if config:
            self.log_to_console = log_to_console if log_to_console is not None else getattr(config, 'LOG_TO_CONSOLE', True)
            self.log_to_file = log_to_file if log_to_file is not None else getattr(config, 'LOG_TO_FILE', False)
            self.log_level = log_level if log_level is not None else getattr(config, 'LOG_LEVEL', 'INFO')
            self.log_file = log_file if log_file is not None else getattr(config, 'LOG_FILE', 'k8s_sidecar_injector.log')
        else:
            self.log_to_console = log_to_console if log_to_console is not None else True
            self.log_to_file = log_to_file if log_to_file is not None else False
            self.log_level = log_level if log_level is not None else 'INFO'
            self.log_file = log_file if log_file is not None else 'k8s_sidecar_injector.log'
        self.logger = logging.getLogger(f"{__name__}.{component_name}")
        self.logger.setLevel(self.log_level)
        # Remove all handlers to avoid duplicate logs
        self.logger.handlers = []
        formatter = logging.Formatter('%(message)s')
        if self.log_to_file:
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(self.log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _get_color(self, component: str) -> str:
        """Get color for component."""
        try:
            return ComponentColor[component].value
        except KeyError:
            return ComponentColor.BASE.value

    def _get_level_color(self, level: str) -> str:
        """Get color for log level."""
        try:
            return LogLevelColor[level].value
        except KeyError:
            return Fore.WHITE

    def _enabled(self, level: str) -> bool:
        return self.logger.isEnabledFor(logging.getLevelName(level))

    def _log_to_console(self, message: str, level: str = "INFO") -> None:
        """Log to console with color, if enabled."""
        if self.log_to_console and self._enabled(level):
            component_color = self._get_color(self.component_name)
            level_color = self._get_level_color(level)
            timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "+00:00"
            formatted_message = f"{level_color}[{level}]{Style.RESET_ALL} {component_color}{self.component_name}{Style.RESET_ALL}: [{timestamp}] {message}"
            print(formatted_message, file=sys.stderr)

    def _log_to_file(self, message: str, level: str = "INFO") -> None:
        """Log to file, if enabled."""
        if self.log_to_file:
            log_method = getattr(self.logger, level.lower())
            log_method(message)

    def log_structured(
        self,
        level: str = "INFO",
        message: str = "",
        workload: Optional[str] = None,
        extra: Optional[dict] = None,
    ) -> None:
        """
        Log a structured message with context fields.
        If LOG_STRUCTURED_JSON is True, outputs JSON; otherwise, outputs a formatted string.
        Args:
            level: Log level (e.g., "INFO", "ERROR")
            message: Log message
            workload: Optional "<namespace>/<name>" of the workload being processed
            extra: Optional dict of extra fields
        """
        structured = False
        if config:
            structured = getattr(config, 'LOG_STRUCTURED_JSON', False)
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "component": self.component_name,
            "log_type": level,
            "message": message,
            "workload": workload,
        }
        if extra:
            log_entry.update(extra)
        if structured:
            msg = json.dumps(log_entry, default=str)
        else:
            parts = [
                message,
                f"workload={workload}" if workload else "",
            ]
            if extra:
                for k, v in extra.items():
                    parts.append(f"{k}={v}")
            msg = " ".join([p for p in parts if p])
        self._log_to_console(msg, level=level)
        self._log_to_file(msg, level=level)
