from typing import Any

from core.flatten import flatten, row_depths
from core.ids import IdAllocator


def format_rows(rows) -> str:
    lines = []
    for depth, row in row_depths(rows):
        if row.has_children:
            marker = "+ " if row.open else "> "
        else:
            marker = "- "
        lines.append("  " * depth + marker + row.label)
    return "\n".join(lines)


def print_tree(root: Any) -> None:
    if root is None:
        print("(empty)")
        return

    # throwaway allocator, printing must not consume widget ids
    print(format_rows(flatten(root, allocator=IdAllocator())))
