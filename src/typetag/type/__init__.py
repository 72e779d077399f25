from .unset import Unset, UnsetType, is_set

__all__ = ["Unset", "UnsetType", "is_set"]
