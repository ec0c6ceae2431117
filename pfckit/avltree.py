"""Ordered set kept in a balanced AVL tree with a three-way comparator."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["compare_default", "AvlTree"]

Comparator = Callable[[Any, Any], int]


def compare_default(a: Any, b: Any) -> int:
    """Three-way comparison using the items' own ordering."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class _Node:
    __slots__ = ("item", "left", "right", "depth")

    def __init__(self, item: Any) -> None:
        self.item = item
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.depth = 0


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.depth + 1


def _update(node: _Node) -> None:
    node.depth = max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.right) - _height(node.left)


def _right_up(node: _Node) -> _Node:
    """Rotate so that the right child becomes the subtree root."""
    new_root = node.right
    assert new_root is not None
    node.right = new_root.left
    new_root.left = node
    _update(node)
    _update(new_root)
    return new_root


def _left_up(node: _Node) -> _Node:
    """Rotate so that the left child becomes the subtree root."""
    new_root = node.left
    assert new_root is not None
    node.left = new_root.right
    new_root.right = node
    _update(node)
    _update(new_root)
    return new_root


def _rebalance(node: _Node) -> _Node:
    balance = _balance(node)
    if balance > 1:
        if _balance(node.right) < 0:
            node.right = _left_up(node.right)
        return _right_up(node)
    if balance < -1:
        if _balance(node.left) > 0:
            node.left = _right_up(node.left)
        return _left_up(node)
    return node


def _extract_min(node: _Node) -> tuple[Optional[_Node], _Node]:
    """Detach the leftmost node; return the new subtree root and that node."""
    if node.left is not None:
        node.left, smallest = _extract_min(node.left)
        _update(node)
        return _rebalance(node), smallest
    rest = node.right
    node.right = None
    node.depth = 0
    return rest, node


def _remove_node(node: _Node) -> Optional[_Node]:
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    new_right, swap = _extract_min(node.right)
    swap.left = node.left
    swap.right = new_right
    _update(swap)
    return swap


def _copy_tree(node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    new = _Node(node.item)
    new.depth = node.depth
    new.left = _copy_tree(node.left)
    new.right = _copy_tree(node.right)
    return new


class AvlTree:
    """A sorted collection of unique items.

    Items are ordered by ``compare(a, b)``, which returns a negative number,
    zero or a positive number. Items that compare equal are stored once.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, items: Optional[Iterable[Any]] = None, compare: Optional[Comparator] = None) -> None:
        self._compare: Comparator = compare if compare is not None else compare_default
        self._root: Optional[_Node] = None
        self._count = 0
        if items is not None:
            for item in items:
                self.add(item)

    def _insert(self, node: Optional[_Node], item: Any) -> tuple[_Node, _Node, bool]:
        if node is None:
            new = _Node(item)
            return new, new, True
        result = self._compare(node.item, item)
        if result > 0:
            node.left, found, is_new = self._insert(node.left, item)
        elif result < 0:
            node.right, found, is_new = self._insert(node.right, item)
        else:
            return node, node, False
        if is_new:
            _update(node)
            node = _rebalance(node)
        return node, found, is_new

    def _add_ex(self, item: Any) -> tuple[_Node, bool]:
        self._root, found, is_new = self._insert(self._root, item)
        if is_new:
            self._count += 1
        return found, is_new

    def add(self, item: Any) -> Any:
        """Insert ``item`` unless an equal one is present; return the stored item."""
        node, _ = self._add_ex(item)
        return node.item

    def add_check(self, item: Any) -> bool:
        """Insert ``item``; return True if the tree changed."""
        _, is_new = self._add_ex(item)
        return is_new

    def set_item(self, item: Any) -> None:
        """Insert ``item`` if no equal item is present."""
        node, is_new = self._add_ex(item)
        if is_new:
            node.item = item

    def _find_node(self, item: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            result = self._compare(node.item, item)
            if result > 0:
                node = node.left
            elif result < 0:
                node = node.right
            else:
                return node
        return None

    def find(self, item: Any) -> Any:
        """Return the stored item equal to ``item``, or None."""
        node = self._find_node(item)
        return None if node is None else node.item

    def find_nearest(self, item: Any, inclusive: bool = True, above: bool = True) -> Any:
        """Nearest stored item above (or below) ``item``, or None.

        With ``inclusive`` an item equal to ``item`` is a match.
        """
        node = self._root
        found = None
        while node is not None:
            result = self._compare(node.item, item)
            if above:
                result = -result
            if inclusive and result == 0:
                found = node.item
                break
            if result < 0:
                found = node.item
                node = node.left if above else node.right
            else:
                node = node.right if above else node.left
        return found

    def __contains__(self, item: Any) -> bool:
        return self._find_node(item) is not None

    def _remove(self, node: Optional[_Node], item: Any) -> tuple[Optional[_Node], bool]:
        if node is None:
            return None, False
        result = self._compare(node.item, item)
        if result == 0:
            replacement = _remove_node(node)
            node.left = node.right = None
            if replacement is not None:
                _update(replacement)
                replacement = _rebalance(replacement)
            return replacement, True
        if result > 0:
            node.left, removed = self._remove(node.left, item)
        else:
            node.right, removed = self._remove(node.right, item)
        if not removed:
            return node, False
        _update(node)
        return _rebalance(node), True

    def remove(self, item: Any) -> bool:
        """Remove the item equal to ``item``; return True if one was present."""
        self._root, removed = self._remove(self._root, item)
        if removed:
            self._count -= 1
        return removed

    def clear(self) -> None:
        """Remove every item."""
        self._root = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _walk(self, forward: bool) -> Iterator[Any]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if forward else node.right
            node = stack.pop()
            yield node.item
            node = node.right if forward else node.left

    def __iter__(self) -> Iterator[Any]:
        return self._walk(True)

    def __reversed__(self) -> Iterator[Any]:
        return self._walk(False)

    def _edge(self, right: bool) -> Any:
        node = self._root
        if node is None:
            return None
        while True:
            nxt = node.right if right else node.left
            if nxt is None:
                return node.item
            node = nxt

    def first(self) -> Any:
        """Smallest item, or None if the tree is empty."""
        return self._edge(False)

    def last(self) -> Any:
        """Largest item, or None if the tree is empty."""
        return self._edge(True)

    def copy(self) -> "AvlTree":
        """Return an independent tree with the same items and comparator."""
        other = AvlTree(compare=self._compare)
        other._root = _copy_tree(self._root)
        other._count = self._count
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvlTree):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"AvlTree({list(self)!r})"