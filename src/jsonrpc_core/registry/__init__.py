"""Method Registry - named handlers and their lookup table."""

from .registry import MethodRegistry, build_method, build_registry
from .types import Method

__all__ = [
    # Registry
    "MethodRegistry",
    "build_registry",
    # Types
    "Method",
    "build_method",
]
