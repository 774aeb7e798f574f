"""recordproxy logging — hexagonal logging port and adapters."""

from recordproxy.logging.port import LoggingPort
from recordproxy.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
