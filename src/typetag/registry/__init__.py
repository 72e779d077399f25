from .core import TypeRegistry, default_registry

__all__ = ["TypeRegistry", "default_registry"]
