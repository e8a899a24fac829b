import logging
from collections import defaultdict

from sqlalchemy.orm import Session

from core.flatten import validate_tree
from db.node import TreeNodeRecord
from models.node import TreeNode, node_field

logger = logging.getLogger(__name__)


def list_roots(session: Session) -> list[TreeNodeRecord]:
    return (
        session.query(TreeNodeRecord)
        .filter(TreeNodeRecord.parent_id == None)
        .order_by(TreeNodeRecord.id.asc())
        .all()
    )


def get_node(session: Session, node_id: int) -> TreeNodeRecord | None:
    return session.query(TreeNodeRecord).filter(TreeNodeRecord.id == node_id).first()


def save_tree(session: Session, root) -> int:
    """Store a tree (TreeNode or mappings) and return the id of its root record.

    The whole tree is checked first; a node without label or value raises
    MissingFieldError and nothing is written.
    """
    validate_tree(root)

    try:
        root_id = None
        # (node, parent record id, position among siblings)
        stack: list = [(root, None, 0)]
        while stack:
            node, parent_id, position = stack.pop()
            rec = TreeNodeRecord(
                parent_id=parent_id,
                position=position,
                label=str(node_field(node, "label")),
                value=str(node_field(node, "value")),
                is_open=bool(node_field(node, "open")),
            )
            session.add(rec)
            session.flush()
            if root_id is None:
                root_id = rec.id

            children = list(node_field(node, "children") or [])
            for pos in range(len(children) - 1, -1, -1):
                stack.append((children[pos], rec.id, pos))

        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info("saved tree %s", root_id)
    return root_id


def load_tree(session: Session, root_id: int) -> TreeNode | None:
    root = get_node(session, root_id)
    if root is None:
        return None

    # one query per level keeps large trees cheap
    by_parent: dict[int, list[TreeNodeRecord]] = defaultdict(list)
    level = [root.id]
    while level:
        recs = (
            session.query(TreeNodeRecord)
            .filter(TreeNodeRecord.parent_id.in_(level))
            .order_by(TreeNodeRecord.position.asc(), TreeNodeRecord.id.asc())
            .all()
        )
        for rec in recs:
            by_parent[rec.parent_id].append(rec)
        level = [rec.id for rec in recs]

    def _node(rec: TreeNodeRecord) -> TreeNode:
        return TreeNode(label=rec.label, value=rec.value, open=rec.is_open)

    tree = _node(root)
    stack = [(root, tree)]
    while stack:
        rec, node = stack.pop()
        for ch in by_parent.get(rec.id, []):
            child = _node(ch)
            node.children.append(child)
            stack.append((ch, child))

    return tree


def delete_tree(session: Session, root_id: int) -> bool:
    root = get_node(session, root_id)
    if not root:
        return False
    session.delete(root)
    session.commit()
    return True
