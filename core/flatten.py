"""Tree flattening.

A tree is turned into a flat list of rows that a template can walk once,
front to back, and still produce properly nested markup: every interior
node row opens a children block, and a matching end marker closes it after
the last row of its subtree.
"""
import logging
from typing import Any, Iterator, List, Optional, Tuple

from core.errors import MissingFieldError, UnbalancedRowsError
from core.ids import IdAllocator, allocator as default_allocator
from core.schemas import END_BLOCK, EndBlockMarker, NodeRow
from models.node import node_field

logger = logging.getLogger(__name__)

_END = object()


def check_node(node: Any, path: Tuple[int, ...] = ()) -> Tuple[Any, Any, list]:
    """Label, value and children of ``node``; raises if label or value is missing."""
    label = node_field(node, "label")
    if label is None or label == "":
        raise MissingFieldError("label", path)

    value = node_field(node, "value")
    # 0 and "" are real values, only a missing one is an error
    if value is None:
        raise MissingFieldError("value", path)

    return label, value, list(node_field(node, "children") or [])


def validate_tree(root: Any) -> int:
    """Check every node of the tree without allocating ids. Returns the node count."""
    count = 0
    stack: list = [(root, ())]
    while stack:
        node, path = stack.pop()
        _, _, children = check_node(node, path)
        count += 1
        for idx in range(len(children) - 1, -1, -1):
            stack.append((children[idx], path + (idx,)))
    return count


def _node_row(node: Any, path: Tuple[int, ...], ids: IdAllocator) -> Tuple[NodeRow, list]:
    label, value, children = check_node(node, path)
    has_children = len(children) > 0

    row = NodeRow(
        label=str(label),
        value=value,
        id=ids.next_id(),
        open=bool(node_field(node, "open")) if has_children else False,
        has_children=has_children,
    )
    return row, children


def flatten(root: Any, allocator: Optional[IdAllocator] = None) -> List[NodeRow | EndBlockMarker]:
    """Depth-first, pre-order rows for ``root``.

    Uses an explicit stack, so deep trees do not hit the recursion limit.
    """
    ids = allocator or default_allocator
    rows: List[NodeRow | EndBlockMarker] = []

    stack: list = [(root, ())]
    while stack:
        item = stack.pop()
        if item is _END:
            rows.append(END_BLOCK)
            continue

        node, path = item
        row, children = _node_row(node, path, ids)
        rows.append(row)

        if row.has_children:
            stack.append(_END)
            for idx in range(len(children) - 1, -1, -1):
                stack.append((children[idx], path + (idx,)))

    logger.debug("flattened %d rows", len(rows))
    return rows


def row_ids(rows) -> List[int]:
    return [r.id for r in rows if isinstance(r, NodeRow)]


def check_balanced(rows) -> bool:
    """Stack check: every has_children row is closed once, in order."""
    open_ids: List[int] = []
    for pos, row in enumerate(rows):
        if isinstance(row, EndBlockMarker):
            if not open_ids:
                raise UnbalancedRowsError(f"end marker at row {pos} closes nothing")
            open_ids.pop()
        elif row.has_children:
            open_ids.append(row.id)

    if open_ids:
        raise UnbalancedRowsError(f"blocks never closed for ids {open_ids}")
    return True


def row_depths(rows) -> Iterator[Tuple[int, NodeRow]]:
    depth = 0
    for row in rows:
        if isinstance(row, EndBlockMarker):
            depth -= 1
            continue
        yield depth, row
        if row.has_children:
            depth += 1
