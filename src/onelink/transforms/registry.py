"""Transform Registry for managing available URL transforms."""

import inspect
from typing import Any, Type

from onelink.transforms.base import Transform


class TransformRegistry:
    """Registry for URL transforms.

    Maps transform names to classes and provides a factory for creating
    configured instances.
    """

    def __init__(self):
        self._transforms: dict[str, Type[Transform]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register the default transforms."""
        from onelink.transforms.base64_transform import Base64Transform
        from onelink.transforms.lzstring_transform import LZStringTransform
        from onelink.transforms.zlib_transform import ZlibTransform

        self.register(ZlibTransform)
        self.register(Base64Transform)
        self.register(LZStringTransform)

    def register(self, transform_class: Type[Transform], name: str | None = None) -> None:
        """Register a transform class.

        Args:
            transform_class: The transform class to register
            name: Registry name, defaults to the class ``name`` attribute
        """
        self._transforms[(name or transform_class.name).lower()] = transform_class

    def get(self, name: str) -> Type[Transform] | None:
        """Get a transform class by name, or None if not registered."""
        return self._transforms.get(name.lower())

    def create(self, name: str, **options: Any) -> Transform:
        """Create a transform instance.

        Args:
            name: Registered transform name
            **options: Constructor options, ignored by transforms that
                take none

        Returns:
            A transform instance

        Raises:
            ValueError: If the name is not registered
        """
        transform_class = self.get(name)
        if transform_class is None:
            available = ", ".join(self.list_names())
            raise ValueError(f"Unknown transform '{name}'. Available: {available}")

        accepted = inspect.signature(transform_class).parameters
        return transform_class(**{k: v for k, v in options.items() if k in accepted})

    def list_names(self) -> list[str]:
        """List all registered transform names."""
        return list(self._transforms.keys())

    def unregister(self, name: str) -> bool:
        """Remove a transform from the registry.

        Returns:
            True if removed, False if not found
        """
        if name.lower() in self._transforms:
            del self._transforms[name.lower()]
            return True
        return False

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._transforms


_global_registry: TransformRegistry | None = None


def get_global_transform_registry() -> TransformRegistry:
    """Get the global transform registry singleton."""
    global _global_registry
    if _global_registry is None:
        _global_registry = TransformRegistry()
    return _global_registry
