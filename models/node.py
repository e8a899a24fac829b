from typing import Any, List, Mapping, Optional


class TreeNode:
    def __init__(
        self,
        label: str,
        value: Any,
        open: bool = False,
        children: Optional[List["TreeNode"]] = None,
    ):
        self.label = label
        self.value = value
        self.open = open
        self.children: List["TreeNode"] = list(children or [])

    def add_child(self, label: str, value: Any, open: bool = False) -> "TreeNode":
        child = TreeNode(label=label, value=value, open=open)
        self.children.append(child)
        return child

    @classmethod
    def from_dict(cls, data: Mapping) -> "TreeNode":
        """Build a TreeNode graph from nested mappings (label/value/open/children).

        Missing keys are kept as None so that flatten reports them.
        """

        def _node(d: Mapping) -> "TreeNode":
            return cls(label=d.get("label"), value=d.get("value"), open=bool(d.get("open", False)))

        root = _node(data)
        stack = [(data, root)]
        while stack:
            d, node = stack.pop()
            for ch in d.get("children") or []:
                child = _node(ch)
                node.children.append(child)
                stack.append((ch, child))
        return root

    def __repr__(self) -> str:
        return f"TreeNode({self.label!r}, {self.value!r}, children={len(self.children)})"


def node_field(node: Any, name: str, default: Any = None) -> Any:
    """Read a field from a TreeNode or a plain mapping."""
    if isinstance(node, Mapping):
        return node.get(name, default)
    return getattr(node, name, default)


def example_tree() -> TreeNode:
    """
    - Root
      - Top Category 1
         - Sub Category 1
         - Sub Category 2
      - Top Category 2
    """
    root = TreeNode("Root", 0, open=True)
    top1 = root.add_child("Top Category 1", 1)
    top1.add_child("Sub Category 1", 2)
    top1.add_child("Sub Category 2", 3)
    root.add_child("Top Category 2", 4)
    return root
