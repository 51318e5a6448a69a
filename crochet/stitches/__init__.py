from .types import StitchEntry, StitchKind
from .registry import StitchRegistry, get_registry

__all__ = [
    "StitchKind",
    "StitchEntry",
    "StitchRegistry",
    "get_registry",
]
