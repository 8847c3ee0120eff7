"""
Constants for the Adaptive Card builder.
"""

from typing import List

# =============================================================================
# WIRE TYPE TAGS
# =============================================================================

CARD_TYPE = "AdaptiveCard"
TEXT_BLOCK_TYPE = "TextBlock"
CONTAINER_TYPE = "Container"
FACT_SET_TYPE = "FactSet"
TABLE_TYPE = "Table"
TABLE_ROW_TYPE = "TableRow"
TABLE_CELL_TYPE = "TableCell"
MENTION_TYPE = "mention"

# Key used for the schema URL on the card root
SCHEMA_KEY = "$schema"

# =============================================================================
# ACTIONS
# =============================================================================

ACTION_OPEN_URL = "Action.OpenUrl"

# =============================================================================
# TEXT STYLES - documented values, not enforced
# =============================================================================

TEXT_WEIGHTS: List[str] = ["Lighter", "Default", "Bolder"]

TEXT_SIZES: List[str] = ["Small", "Default", "Medium", "Large", "ExtraLarge"]

# =============================================================================
# MENTIONS
# =============================================================================

MENTION_OPEN = "<at>"
MENTION_CLOSE = "</at>"


__all__ = [
    "CARD_TYPE",
    "TEXT_BLOCK_TYPE",
    "CONTAINER_TYPE",
    "FACT_SET_TYPE",
    "TABLE_TYPE",
    "TABLE_ROW_TYPE",
    "TABLE_CELL_TYPE",
    "MENTION_TYPE",
    "SCHEMA_KEY",
    "ACTION_OPEN_URL",
    "TEXT_WEIGHTS",
    "TEXT_SIZES",
    "MENTION_OPEN",
    "MENTION_CLOSE",
]
