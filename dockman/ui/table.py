"""A simple HTML table builder filled row by row."""

from __future__ import annotations

from dockman.ui.elements import Element, attr, tag


class Table:
    """Collects column headings and rows of cells, then renders them."""

    def __init__(self) -> None:
        self._columns: list[Element] = []
        self._rows: list[list[Element]] = []

    def add_column(self, column: str) -> None:
        self._columns.append(
            tag("th", attr("class", "py-2 px-4 text-sm font-semibold text-gray-700"), column)
        )

    def add_columns(self, columns) -> None:
        for column in columns:
            self.add_column(column)

    def add_row(self) -> None:
        """Start a new row; cells added afterwards go into it."""
        self._rows.append([])

    def add_cell(self, cell: Element) -> None:
        if not self._rows:
            raise IndexError("add_row must be called before adding cells")
        self._rows[-1].append(cell)

    def add_cell_text(self, cell: str) -> None:
        self.add_cell(tag("p", cell))

    def with_cells(self, *args: Element) -> None:
        for cell in args:
            self.add_cell(cell)

    def with_cell_texts(self, *args: str) -> None:
        for cell in args:
            self.add_cell_text(cell)

    def render(self) -> Element:
        return tag(
            "table",
            attr("class", "w-full border-collapse border border-gray-300 x-overflow-auto truncate"),
            tag(
                "thead",
                tag(
                    "tr",
                    attr("class", "bg-gray-100 text-left border-b border-gray-300"),
                    list(self._columns),
                ),
            ),
            tag(
                "tbody",
                [
                    tag(
                        "tr",
                        attr("class", "border-b border-gray-300 hover:bg-gray-50"),
                        [
                            tag("td", attr("class", "py-2 px-4 text-sm text-gray-700"), cell)
                            for cell in row
                        ],
                    )
                    for row in self._rows
                ],
            ),
        )