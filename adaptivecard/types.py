"""
Adaptive Card Type Definitions

Type aliases and protocols shared across the adaptivecard package.

Usage:
    from adaptivecard.types import JsonDict, JsonList, Flattenable
"""

from typing import Any, Dict, List, Protocol, runtime_checkable

# =============================================================================
# TYPE ALIASES
# =============================================================================

JsonDict = Dict[str, Any]
"""A JSON-compatible dictionary (the flattened form of a card node)."""

JsonList = List[Any]
"""A JSON-compatible list of flattened values."""


# =============================================================================
# PROTOCOLS
# =============================================================================


@runtime_checkable
class Flattenable(Protocol):
    """Anything that can turn itself into plain JSON-ready values."""

    def flatten(self) -> JsonDict:
        """Return the wire representation of this node and its children."""
        ...


__all__ = [
    "JsonDict",
    "JsonList",
    "Flattenable",
]
