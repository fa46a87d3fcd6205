"""
Renders query results as fixed-width text reports and numbered menus.
"""

from __future__ import annotations

from typing import Iterable

from .models import QueryKind
from .query import ReportResult

LINE_WIDTH = 80
NAME_LIMIT = 30
MENU_NAME_LIMIT = 27
ELLIPSIS = "..."

# (width, align) per column; every layout is exactly LINE_WIDTH wide
# including the leading space and single-space separators.
LAYOUTS: dict[QueryKind, tuple[tuple[int, str], ...]] = {
    QueryKind.COUNTRY: ((30, "<"), (16, ">"), (14, ">"), (16, ">")),
    QueryKind.SOURCE: ((30, ">"), (16, ">"), (14, ">"), (16, ">")),
    QueryKind.PERCENT: ((30, ">"), (16, ">"), (16, ">"), (14, ">")),
}

# Column indexes rendered with thousands separators
AMOUNT_COLUMNS: dict[QueryKind, tuple[int, ...]] = {
    QueryKind.COUNTRY: (1,),
    QueryKind.SOURCE: (1,),
    QueryKind.PERCENT: (1, 2),
}


def apply_commas(number: str) -> str:
    """
    Insert thousands separators into the integer part of a numeric string.

    The decimal part is left untouched, e.g. "1234567.89" -> "1,234,567.89".
    Strings whose integer part is not all digits are returned unchanged.
    """
    integer_part, _, decimal_part = number.partition(".")
    sign = ""
    if integer_part.startswith("-"):
        sign, integer_part = "-", integer_part[1:]
    if not (integer_part.isascii() and integer_part.isdigit()):
        return number

    groups = []
    while len(integer_part) > 3:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    groups.insert(0, integer_part)
    if not decimal_part:
        return f"{sign}{','.join(groups)}"
    return f"{sign}{','.join(groups)}.{decimal_part}"


def truncate_name(name: str, limit: int = NAME_LIMIT) -> str:
    """Shorten a name longer than `limit` to fit within it, ending in an ellipsis."""
    if len(name) <= limit:
        return name
    return name[: limit - len(ELLIPSIS)] + ELLIPSIS


def _format_row(
    cells: Iterable[str], layout: tuple[tuple[int, str], ...], clip_all: bool = False
) -> str:
    """
    Pad cells into their columns. Only the name column is clipped unless
    `clip_all` is set; numeric cells are never shortened and push the line
    wider instead.
    """
    parts = []
    for i, (cell, (width, align)) in enumerate(zip(cells, layout)):
        if i == 0 or clip_all:
            cell = truncate_name(cell, width)
        parts.append(f"{cell:{align}{width}}")
    return " " + " ".join(parts)


def format_report(result: ReportResult) -> list[str]:
    """
    Render a ReportResult as text lines no wider than LINE_WIDTH, provided
    the numeric cells fit their columns.

    Returns:
        Title, underline, header row, one line per result row, and the match count.
    """
    layout = LAYOUTS[result.kind]
    amount_columns = AMOUNT_COLUMNS[result.kind]
    title = truncate_name(result.title, LINE_WIDTH)

    lines = [title, "-" * len(title), "", _format_row(result.columns, layout, clip_all=True), ""]
    for row in result.rows:
        cells = [
            apply_commas(cell) if i in amount_columns else cell
            for i, cell in enumerate(row)
        ]
        lines.append(_format_row(cells, layout))
    lines.append("")
    lines.append(f"{result.match_count} match(es) found.")
    return lines


def format_menu(labels: Iterable[str], per_line: int = 2, name_limit: int = MENU_NAME_LIMIT) -> list[str]:
    """
    Render a 1-based numbered menu with `per_line` entries on each line.

    Entries are padded to a fixed width, so `per_line` should keep each line
    within LINE_WIDTH (two entries per line at the default name limit).
    """
    lines = []
    current = []
    for index, label in enumerate(labels, start=1):
        current.append(f"{index:>3}. {truncate_name(label, name_limit):<{name_limit}}")
        if len(current) == per_line:
            lines.append(" ".join(current).rstrip())
            current = []
    if current:
        lines.append(" ".join(current).rstrip())
    return lines


def print_report(result: ReportResult) -> None:
    print()
    for line in format_report(result):
        print(line)
