"""A flattened, expandable tree used as the row source of a tree view."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["TreeNode", "TreeModel"]


@dataclass(eq=False)
class TreeNode:
    """One node of the tree: its data, depth, check and expansion state."""

    data: dict[str, Any] = field(default_factory=dict)
    depth: int = 0
    checked: bool = False
    is_expanded: bool = True
    children: list[TreeNode] = field(default_factory=list, repr=False)
    parent: TreeNode | None = field(default=None, repr=False)

    def has_children(self) -> bool:
        return bool(self.children)

    def has_next_node_by_index(self, index: int) -> bool:
        """Whether the ancestor at depth ``index`` has a sibling after it."""
        node = self
        for _ in range(self.depth - index):
            if node.parent is None:
                raise ValueError(f"node has no ancestor at depth {index}")
            node = node.parent
        if node.parent is None:
            raise ValueError(f"node has no ancestor at depth {index}")
        siblings = node.parent.children
        return siblings.index(node) != len(siblings) - 1

    def is_checked(self) -> bool:
        """A leaf's own state, or whether every child is checked."""
        if not self.children:
            return self.checked
        return all(child.is_checked() for child in self.children)

    def hide_line_footer(self) -> bool:
        if self.parent is None:
            return False
        siblings = self.parent.children
        position = siblings.index(self)
        if position == len(siblings) - 1:
            return True
        return siblings[position + 1].has_children()

    def is_shown(self) -> bool:
        """True when every ancestor is expanded."""
        ancestor = self.parent
        while ancestor is not None:
            if not ancestor.is_expanded:
                return False
            ancestor = ancestor.parent
        return True

    def descendants(self) -> Iterator[TreeNode]:
        """All nodes below this one, in pre-order."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


class TreeModel:
    """Holds a tree and the list of rows currently visible in the view."""

    def __init__(self, column_source: Iterable[Mapping[str, Any]] = ()) -> None:
        self.column_source: list[dict[str, Any]] = [dict(c) for c in column_source]
        self.data_source_size = 0
        self._rows: list[TreeNode] = []
        self._data_source: list[TreeNode] = []
        self._root = TreeNode()

    @property
    def rows(self) -> list[TreeNode]:
        """A copy of the visible rows."""
        return list(self._rows)

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(self.column_source)

    def _node(self, row: int) -> TreeNode:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range")
        return self._rows[row]

    def set_data(self, nodes: Iterable[TreeNode]) -> None:
        self._rows = list(nodes)

    def set_data_source(self, data: Iterable[Mapping[str, Any]]) -> None:
        """Build the tree from nested mappings; ``children`` holds sub-items."""
        self._root = TreeNode()
        self._data_source = []
        pending: list[tuple[Mapping[str, Any], TreeNode, int]] = [
            (item, self._root, 0) for item in reversed(list(data))
        ]
        while pending:
            item, parent, depth = pending.pop()
            node = TreeNode(
                data=dict(item),
                depth=depth,
                checked=bool(item.get("checked", False)),
                is_expanded=True,
                parent=parent,
            )
            parent.children.append(node)
            self._data_source.append(node)
            children = item.get("children") or []
            pending.extend((child, node, depth + 1) for child in reversed(list(children)))
        self._rows = list(self._data_source)
        self.data_source_size = len(self._data_source)

    def remove_rows(self, row: int, count: int) -> None:
        """Drop ``count`` rows from ``row``; out-of-range requests are ignored."""
        if row < 0 or count <= 0 or row + count > len(self._rows):
            return
        del self._rows[row:row + count]

    def insert_rows(self, row: int, nodes: Iterable[TreeNode]) -> None:
        """Insert nodes before ``row``; out-of-range or empty requests are ignored."""
        nodes = list(nodes)
        if row < 0 or row > len(self._rows) or not nodes:
            return
        self._rows[row:row] = nodes

    def get_row(self, row: int) -> TreeNode:
        return self._node(row)

    def set_row(self, row: int, data: Mapping[str, Any]) -> None:
        self._node(row).data = dict(data)

    def check_row(self, row: int, checked: bool) -> None:
        """Check a leaf, or every leaf below a node with children."""
        node = self._node(row)
        if node.has_children():
            for item in node.descendants():
                if not item.has_children():
                    item.checked = checked
        else:
            node.checked = checked

    def collapse(self, row: int) -> None:
        node = self._node(row)
        if not node.is_expanded:
            return
        node.is_expanded = False
        count = 0
        for following in self._rows[row + 1:]:
            if following.depth <= node.depth:
                break
            count += 1
        self.remove_rows(row + 1, count)

    def expand(self, row: int) -> None:
        node = self._node(row)
        if node.is_expanded:
            return
        node.is_expanded = True
        self.insert_rows(row + 1, [n for n in node.descendants() if n.is_shown()])

    def hit_has_children_expanded(self, row: int) -> bool:
        node = self._node(row)
        return node.has_children() and node.is_expanded

    def all_expand(self) -> None:
        rows = []
        for node in self._root.descendants():
            if node.has_children():
                node.is_expanded = True
            rows.append(node)
        self._rows = rows

    def all_collapse(self) -> None:
        for node in self._root.descendants():
            if node.has_children():
                node.is_expanded = False
        self._rows = list(self._root.children)

    def selection(self) -> list[TreeNode]:
        """Every node of the data source that counts as checked."""
        return [node for node in self._data_source if node.is_checked()]