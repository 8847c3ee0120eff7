"""
Tests for Table, TableRow, TableCell and TableColumn flattening.
"""

import pytest

from adaptivecard import Container, Fact, FactSet, Table, TableCell, TextBlock


def _text(value):
    return {"type": "TextBlock", "text": value, "wrap": True}


class TestTableConstruction:
    """Table defaults and append helpers."""

    def test_create_defaults(self):
        table = Table.create()

        assert table.type == "Table"
        assert table.first_row_as_headers is True
        assert table.columns == []
        assert table.rows == []

    def test_header_flag_alias(self):
        assert Table(firstRowAsHeaders=False).first_row_as_headers is False
        assert Table(first_row_as_headers=False).first_row_as_headers is False

    def test_add_column_order(self):
        table = Table.create()
        for width in ["auto", "stretch", "2", "50px"]:
            table.add_column(width)

        assert [c["width"] for c in table.flatten()["columns"]] == ["auto", "stretch", "2", "50px"]

    def test_add_row_order(self):
        table = Table.create()
        table.add_row(TableCell.create(TextBlock.create("r1")))
        table.add_row(TableCell.create(TextBlock.create("r2")))
        table.add_row(TableCell.create(TextBlock.create("r3")))

        texts = [row["cells"][0]["items"][0]["text"] for row in table.flatten()["rows"]]
        assert texts == ["r1", "r2", "r3"]

    def test_add_row_keeps_cell_order(self):
        table = Table.create().add_row(
            TableCell.create(TextBlock.create("a")),
            TableCell.create(TextBlock.create("b")),
            TableCell.create(TextBlock.create("c")),
        )

        cells = table.flatten()["rows"][0]["cells"]
        assert [cell["items"][0]["text"] for cell in cells] == ["a", "b", "c"]

    def test_add_row_without_cells(self):
        table = Table.create().add_row()
        assert table.flatten()["rows"] == [{"type": "TableRow", "cells": []}]

    def test_add_row_rejects_non_cells(self):
        with pytest.raises(TypeError):
            Table.create().add_row(TextBlock.create("not a cell"))

    def test_cell_add_item(self):
        cell = TableCell.create(TextBlock.create("a"))
        returned = cell.add_item(TextBlock.create("b"))

        assert returned is cell
        assert [item["text"] for item in cell.flatten()["items"]] == ["a", "b"]

    def test_cell_rejects_non_elements(self):
        with pytest.raises(TypeError):
            TableCell.create(TableCell.create())


class TestTableFlatten:
    """Three-level recursive flattening."""

    def test_single_row_two_cells(self):
        table = Table.create().add_column("auto")
        table.add_row(
            TableCell.create(TextBlock.create("left")),
            TableCell.create(TextBlock.create("right")),
        )

        assert table.flatten() == {
            "type": "Table",
            "columns": [{"width": "auto"}],
            "rows": [
                {
                    "type": "TableRow",
                    "cells": [
                        {"type": "TableCell", "items": [_text("left")]},
                        {"type": "TableCell", "items": [_text("right")]},
                    ],
                }
            ],
        }

    def test_header_flag_not_written(self):
        raw = Table.create().flatten()

        assert raw == {"type": "Table", "columns": [], "rows": []}
        assert "firstRowAsHeaders" not in raw

    def test_cells_hold_any_element(self):
        nested_table = Table.create().add_column("auto")
        nested_table.add_row(TableCell.create(TextBlock.create("deep")))

        table = Table.create().add_row(
            TableCell.create(
                Container.create(TextBlock.create("in container")),
                FactSet.create(Fact(title="k", value="v")),
                nested_table,
            )
        )

        items = table.flatten()["rows"][0]["cells"][0]["items"]
        assert [item["type"] for item in items] == ["Container", "FactSet", "Table"]
        assert items[0]["items"] == [_text("in container")]
        assert items[1]["facts"] == [{"title": "k", "value": "v"}]
        assert items[2]["rows"][0]["cells"][0]["items"] == [_text("deep")]

    def test_deep_nesting_in_cell(self):
        depth = 60
        innermost = Container.create(TextBlock.create("bottom"))
        node = innermost
        for level in range(depth):
            node = Container.create(TextBlock.create(f"level-{level}"), node)

        table = Table.create().add_row(TableCell.create(node))
        raw = table.flatten()["rows"][0]["cells"][0]["items"][0]

        seen = []
        while True:
            assert raw["type"] == "Container"
            if len(raw["items"]) == 1:
                assert raw["items"] == [_text("bottom")]
                break
            first, raw = raw["items"]
            seen.append(first["text"])

        assert seen == [f"level-{level}" for level in reversed(range(depth))]

    def test_later_mutation_is_reflected(self):
        cell = TableCell.create()
        table = Table.create().add_row(cell)
        cell.add_item(TextBlock.create("added later"))

        assert table.flatten()["rows"][0]["cells"][0]["items"] == [_text("added later")]
