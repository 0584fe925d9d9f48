"""
Observability: structured logging and context management.

Provides:
- Contextual logging with command/collection tags
- Log rotation and file management
- Third-party library log level control
"""

from infrastructure.observability.logging import (
    ContextInjectFilter,
    clear_log_context,
    configure_logging,
    set_log_context,
)

__all__ = [
    "ContextInjectFilter",
    "configure_logging",
    "set_log_context",
    "clear_log_context",
]
