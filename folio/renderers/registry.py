"""Backend registry - maps backend keys to rendering backends.

Follows the registry pattern used elsewhere in the package:
- In-memory dict keyed by backend key
- Global singleton via get_backend_registry()
"""

import logging
from typing import Optional

from .base import RenderBackend
from .html import HtmlBackend
from .json_tree import JsonBackend

logger = logging.getLogger(__name__)


class BackendRegistry:
    """Registry of available rendering backends."""

    def __init__(self):
        self._backends: dict[str, type[RenderBackend]] = {}

    def register(self, backend_cls: type[RenderBackend]) -> None:
        """Register a backend class under its key."""
        if not backend_cls.key:
            raise ValueError(f"Backend {backend_cls.__name__} has no key")
        self._backends[backend_cls.key] = backend_cls
        logger.debug(f"Registered rendering backend: {backend_cls.key}")

    def create(self, key: str) -> RenderBackend:
        """Create a fresh backend instance.

        Raises:
            ValueError: If no backend is registered under `key`
        """
        backend_cls = self._backends.get(key)
        if backend_cls is None:
            raise ValueError(
                f"Rendering backend '{key}' not found. "
                f"Available: {self.list_keys()}"
            )
        return backend_cls()

    def list_keys(self) -> list[str]:
        """List all backend keys."""
        return sorted(self._backends.keys())


# Global registry instance
_registry: Optional[BackendRegistry] = None


def get_backend_registry() -> BackendRegistry:
    """Get the global backend registry instance."""
    global _registry
    if _registry is None:
        _registry = BackendRegistry()
        _registry.register(HtmlBackend)
        _registry.register(JsonBackend)
    return _registry


def get_backend(key: str) -> RenderBackend:
    """Create a backend by key from the global registry."""
    return get_backend_registry().create(key)


def list_backends() -> list[str]:
    """List the keys of all registered backends."""
    return get_backend_registry().list_keys()
