"""I/O utilities: filesystem and standard stream access."""

from infrastructure.io.fs import ensure_exists, read_text

__all__ = [
    "ensure_exists",
    "read_text",
]
