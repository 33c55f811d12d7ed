"""Output formatting for command results."""

import json
from typing import Any, Dict, Iterable, List, Sequence, TextIO


def print_json_output(data: Dict[str, Any], stream: TextIO):
    """Print formatted JSON output."""
    print(json.dumps(data, indent=2), file=stream)


def format_table(rows: Iterable[Sequence[str]], padding: int = 1) -> List[str]:
    """Left align rows into columns separated by at least ``padding`` spaces."""
    rows = [list(row) for row in rows]
    if not rows:
        return []
    
    columns = max(len(row) for row in rows)
    widths = [0] * columns
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
    
    lines = []
    for row in rows:
        # last column is never padded
        cells = [cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])]
        cells.append(row[-1])
        lines.append("".join(cells))
    return lines


def print_table(rows: Iterable[Sequence[str]], stream: TextIO):
    for line in format_table(rows):
        print(line, file=stream)
