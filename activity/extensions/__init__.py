from .base import Extension, ExtensionRegistry, subject_table
from .files_sharing import files_sharing


def default_registry() -> ExtensionRegistry:
    registry = ExtensionRegistry()
    registry.register(files_sharing)
    return registry


__all__ = ["Extension", "ExtensionRegistry", "subject_table", "files_sharing", "default_registry"]
