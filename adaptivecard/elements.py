"""
Adaptive Card element tree.

Every node that can live in a card body (or inside a table cell) derives from
CardElement and knows how to flatten itself into plain JSON-ready values.
The body of a card is a heterogeneous list, so flattening is dispatched per
variant and recurses through every element-bearing field:

    Table -> TableRow -> TableCell -> Element -> ...

The set of body variants is closed and expressed as a discriminated union on
the wire ``type`` tag (see ``Element``).
"""

from typing import Annotated, Any, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import List, Literal, Optional

from adaptivecard.constants import (
    CONTAINER_TYPE,
    FACT_SET_TYPE,
    TABLE_CELL_TYPE,
    TABLE_ROW_TYPE,
    TABLE_TYPE,
    TEXT_BLOCK_TYPE,
)
from adaptivecard.types import Flattenable, JsonDict, JsonList

# =============================================================================
# Element abstraction
# =============================================================================


class CardElement(BaseModel):
    """Base class for every node of the card element tree."""

    model_config = ConfigDict(populate_by_name=True)

    def flatten(self) -> JsonDict:
        raise NotImplementedError(f"{type(self).__name__} does not implement flatten()")


def _require_element(value: Any, owner: str) -> Any:
    if not is_element(value):
        raise TypeError(
            f"{owner} only accepts card elements, got {type(value).__name__}"
        )
    return value


# =============================================================================
# TextBlock
# =============================================================================


class TextBlock(CardElement):
    """A block of text. Wraps by default."""

    type: Literal["TextBlock"] = TEXT_BLOCK_TYPE
    text: str = Field(..., description="Text to display (markdown subset and <at> mentions allowed)")
    weight: Optional[str] = Field(None, description="Font weight, e.g. Lighter, Default, Bolder")
    size: Optional[str] = Field(None, description="Font size, e.g. Small, Medium, Large")
    wrap: bool = Field(True, description="Allow text to wrap instead of being clipped")
    separator: bool = Field(False, description="Draw a separating line above the block")

    @classmethod
    def create(cls, text: str) -> "TextBlock":
        return cls(text=text)

    def with_weight(self, weight: str) -> "TextBlock":
        self.weight = weight
        return self

    def with_size(self, size: str) -> "TextBlock":
        self.size = size
        return self

    def with_separator(self) -> "TextBlock":
        self.separator = True
        return self

    def flatten(self) -> JsonDict:
        raw: JsonDict = {"type": self.type, "text": self.text}
        # Empty strings and false flags are left out of the wire shape
        if self.weight:
            raw["weight"] = self.weight
        if self.size:
            raw["size"] = self.size
        if self.wrap:
            raw["wrap"] = True
        if self.separator:
            raw["separator"] = True
        return raw


# =============================================================================
# Container
# =============================================================================


class Container(CardElement):
    """Groups child elements. Children keep their insertion order."""

    type: Literal["Container"] = CONTAINER_TYPE
    items: List["Element"] = Field(default_factory=list)
    separator: bool = False

    @classmethod
    def create(cls, *items: "Element") -> "Container":
        container = cls()
        for item in items:
            container.add_item(item)
        return container

    def add_item(self, element: "Element") -> "Container":
        self.items.append(_require_element(element, "Container"))
        return self

    def with_separator(self) -> "Container":
        self.separator = True
        return self

    def flatten(self) -> JsonDict:
        # separator is carried on the model but not written for containers
        return {"type": self.type, "items": flatten_elements(self.items)}


# =============================================================================
# FactSet
# =============================================================================


class Fact(BaseModel):
    """A title/value pair shown inside a FactSet."""

    title: str
    value: str

    def flatten(self) -> JsonDict:
        return {"title": self.title, "value": self.value}


class FactSet(CardElement):
    """A list of facts rendered as a two-column key/value table."""

    type: Literal["FactSet"] = FACT_SET_TYPE
    facts: List[Fact] = Field(default_factory=list)

    @classmethod
    def create(cls, *facts: Fact) -> "FactSet":
        return cls(facts=list(facts))

    def add_fact(self, title: str, value: str) -> "FactSet":
        self.facts.append(Fact(title=title, value=value))
        return self

    def flatten(self) -> JsonDict:
        return {"type": self.type, "facts": flatten_elements(self.facts)}


# =============================================================================
# Table
# =============================================================================


class TableColumn(BaseModel):
    """Column definition; width is passed through as given (auto, stretch, 1, 50px...)."""

    width: str

    def flatten(self) -> JsonDict:
        return {"width": self.width}


class TableCell(CardElement):
    """A table cell holding any card elements, including nested tables."""

    type: Literal["TableCell"] = TABLE_CELL_TYPE
    items: List["Element"] = Field(default_factory=list)

    @classmethod
    def create(cls, *items: "Element") -> "TableCell":
        cell = cls()
        for item in items:
            cell.add_item(item)
        return cell

    def add_item(self, element: "Element") -> "TableCell":
        self.items.append(_require_element(element, "TableCell"))
        return self

    def flatten(self) -> JsonDict:
        return {"type": self.type, "items": flatten_elements(self.items)}


class TableRow(CardElement):
    type: Literal["TableRow"] = TABLE_ROW_TYPE
    cells: List[TableCell] = Field(default_factory=list)

    def flatten(self) -> JsonDict:
        return {"type": self.type, "cells": flatten_elements(self.cells)}


class Table(CardElement):
    """
    A grid of rows and cells.

    Columns are plain width descriptors; rows hold cells and cells hold
    elements, so flattening a table walks three levels before reaching the
    nested elements themselves.
    """

    type: Literal["Table"] = TABLE_TYPE
    columns: List[TableColumn] = Field(default_factory=list)
    rows: List[TableRow] = Field(default_factory=list)
    first_row_as_headers: bool = Field(True, alias="firstRowAsHeaders")

    @classmethod
    def create(cls) -> "Table":
        return cls()

    def add_column(self, width: str) -> "Table":
        self.columns.append(TableColumn(width=width))
        return self

    def add_row(self, *cells: TableCell) -> "Table":
        for cell in cells:
            if not isinstance(cell, TableCell):
                raise TypeError(
                    f"Table rows only accept TableCell values, got {type(cell).__name__}"
                )
        self.rows.append(TableRow(cells=list(cells)))
        return self

    def flatten(self) -> JsonDict:
        return {
            "type": self.type,
            "columns": flatten_elements(self.columns),
            "rows": flatten_elements(self.rows),
        }


# =============================================================================
# Element union and helpers
# =============================================================================

Element = Annotated[
    Union[TextBlock, Container, FactSet, Table],
    Field(discriminator="type"),
]
"""Any element allowed in a card body or a table cell."""

BODY_ELEMENT_TYPES = (TextBlock, Container, FactSet, Table)


def is_element(value: Any) -> bool:
    """Check whether a value can be placed in a card body or container."""
    return isinstance(value, BODY_ELEMENT_TYPES)


def flatten_elements(elements: Iterable[Flattenable]) -> JsonList:
    """Flatten a sequence of elements (or any flattenable nodes), keeping their order."""
    return [element.flatten() for element in elements]


# Resolve the forward references to Element
Container.model_rebuild()
TableCell.model_rebuild()
TableRow.model_rebuild()
Table.model_rebuild()


__all__ = [
    "CardElement",
    "TextBlock",
    "Container",
    "Fact",
    "FactSet",
    "TableColumn",
    "TableCell",
    "TableRow",
    "Table",
    "Element",
    "BODY_ELEMENT_TYPES",
    "is_element",
    "flatten_elements",
]
