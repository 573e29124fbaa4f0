"""A B-tree of order 4 holding integer keys, with level-order printing."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass, field

ORDER = 4
"""Maximum number of subtrees of a node."""

MIN_KEYS = (ORDER + 1) // 2 - 1
"""Fewest keys a non-root node may hold before it must borrow or merge."""


@dataclass(eq=False)
class BTreeNode:
    """One node: sorted keys and, unless it is a leaf, one more child than keys."""

    keys: list[int] = field(default_factory=list)
    children: list[BTreeNode] = field(default_factory=list)
    parent: BTreeNode | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def _adopt(self, children: list[BTreeNode]) -> None:
        for child in children:
            child.parent = self


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search.

    When ``found`` is true, ``node.keys[index]`` is the key. Otherwise ``node``
    is the last node visited and ``index`` is where the key would go in it.
    """

    node: BTreeNode | None
    index: int
    found: bool


class BTree:
    """A B-tree of order 4 with unique integer keys."""

    def __init__(self) -> None:
        self.root: BTreeNode | None = None

    def search(self, key: int) -> SearchResult:
        """Find ``key``, reporting where it is or where it would be inserted."""
        node = self.root
        last: BTreeNode | None = None
        index = 0
        while node is not None:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return SearchResult(node, index, True)
            last = node
            node = None if node.is_leaf else node.children[index]
        return SearchResult(last, index, False)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key).found

    def insert(self, key: int) -> bool:
        """Insert ``key``; return False if it was already present."""
        if self.root is None:
            self.root = BTreeNode(keys=[key])
            return True
        result = self.search(key)
        if result.found:
            return False
        node = result.node
        assert node is not None
        node.keys.insert(result.index, key)
        while len(node.keys) == ORDER:
            node = self._split(node)
        return True

    def _split(self, node: BTreeNode) -> BTreeNode:
        mid = ORDER // 2
        median = node.keys[mid]
        right = BTreeNode(keys=node.keys[mid + 1:], children=node.children[mid + 1:])
        right._adopt(right.children)
        node.keys = node.keys[:mid]
        node.children = node.children[:mid + 1]
        parent = node.parent
        if parent is None:
            parent = BTreeNode(keys=[median], children=[node, right])
            self.root = parent
        else:
            pos = parent.children.index(node)
            parent.keys.insert(pos, median)
            parent.children.insert(pos + 1, right)
        node.parent = right.parent = parent
        return parent

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        result = self.search(key)
        if not result.found:
            return False
        node = result.node
        assert node is not None
        if node.is_leaf:
            node.keys.pop(result.index)
        else:
            leaf = node.children[result.index]
            while not leaf.is_leaf:
                leaf = leaf.children[-1]
            node.keys[result.index] = leaf.keys.pop()
            node = leaf
        self._rebalance(node)
        return True

    def _rebalance(self, node: BTreeNode) -> None:
        while len(node.keys) < MIN_KEYS or not node.keys:
            parent = node.parent
            if parent is None:
                if node.keys:
                    return
                if node.children:
                    self.root = node.children[0]
                    self.root.parent = None
                else:
                    self.root = None
                return
            pos = parent.children.index(node)
            sib_pos = 1 if pos == 0 else pos - 1
            sibling = parent.children[sib_pos]
            if len(sibling.keys) > MIN_KEYS:
                self._borrow(node, pos, sibling, sib_pos, parent)
                return
            sep = min(pos, sib_pos)
            left, right = (sibling, node) if sib_pos < pos else (node, sibling)
            left.keys.extend([parent.keys.pop(sep), *right.keys])
            left.children.extend(right.children)
            left._adopt(right.children)
            parent.children.pop(sep + 1)
            node = parent

    @staticmethod
    def _borrow(node: BTreeNode, pos: int, sibling: BTreeNode,
                sib_pos: int, parent: BTreeNode) -> None:
        if sib_pos < pos:
            node.keys.insert(0, parent.keys[pos - 1])
            parent.keys[pos - 1] = sibling.keys.pop()
            if sibling.children:
                child = sibling.children.pop()
                node.children.insert(0, child)
                child.parent = node
        else:
            node.keys.append(parent.keys[pos])
            parent.keys[pos] = sibling.keys.pop(0)
            if sibling.children:
                child = sibling.children.pop(0)
                node.children.append(child)
                child.parent = node

    def find_max(self) -> int:
        """Return the largest key."""
        if self.root is None:
            raise ValueError("find_max() of an empty tree")
        node = self.root
        while not node.is_leaf:
            node = node.children[-1]
        return node.keys[-1]

    def find_min(self) -> int:
        """Return the smallest key."""
        if self.root is None:
            raise ValueError("find_min() of an empty tree")
        node = self.root
        while not node.is_leaf:
            node = node.children[0]
        return node.keys[0]

    def __iter__(self) -> Iterator[int]:
        """Yield the keys in ascending order."""
        def walk(node: BTreeNode) -> Iterator[int]:
            if node.is_leaf:
                yield from node.keys
                return
            for child, key in zip(node.children, node.keys):
                yield from walk(child)
                yield key
            yield from walk(node.children[-1])

        if self.root is not None:
            yield from walk(self.root)

    def levels(self) -> list[list[list[int]]]:
        """Return the key lists of the nodes, level by level from the root."""
        result: list[list[list[int]]] = []
        level = [self.root] if self.root is not None else []
        while level:
            result.append([list(node.keys) for node in level])
            level = [child for node in level for child in node.children]
        return result

    def format(self) -> str:
        """Render the tree one level per line."""
        return format_tree(self)


def format_tree(tree: BTree) -> str:
    """Render ``tree`` as lines of ``[ k1 k2 ]`` groups, one line per level."""
    levels = tree.levels()
    if not levels:
        return "[ ]\n"
    return "".join(
        "".join("[ " + "".join(f"{key} " for key in keys) + "]" for keys in level) + "\n"
        for level in levels
    )