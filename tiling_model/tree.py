"""An n-ary tree stored in a NodeMap, with observer notifications."""

from __future__ import annotations

import warnings
from itertools import islice
from typing import Callable, Optional

from .nodes import Node, NodeId, NodeMap


class Observer:
    """Receives notifications about structural changes to a tree.

    The default hooks only check that each notification is consistent with
    the state of the map; subclasses override what they need.
    """

    def added_to_forest(self, map: NodeMap, node: NodeId) -> None:
        """A new node was allocated."""
        if not map.contains(node):
            raise ValueError(f"{node!r} was announced but is not in the map")

    def added_to_parent(self, map: NodeMap, node: NodeId) -> None:
        """A node was attached under a new parent."""
        if map.parent(node) is None:
            raise ValueError(f"{node!r} was announced as attached but has no parent")

    def removing_from_parent(self, map: NodeMap, node: NodeId) -> None:
        """A node is about to leave its parent; the link is still present."""
        if map.parent(node) is None:
            raise ValueError(f"{node!r} is leaving a parent it does not have")

    def removed_child(self, tree: "Tree", parent: NodeId) -> None:
        """A child has left ``parent`` and the operation is complete."""
        if not tree.map.contains(parent):
            raise ValueError(f"parent {parent!r} is not in the map")

    def removed_from_forest(self, map: NodeMap, node: NodeId) -> None:
        """A node was deleted from the map."""
        if map.contains(node):
            raise ValueError(f"{node!r} was announced as removed but is still in the map")


class Tree:
    """A forest of nodes together with the observer that tracks it."""

    def __init__(self, observer: Optional[Observer] = None) -> None:
        self.map = NodeMap()
        self.data = observer if observer is not None else Observer()

    def mk_node(self) -> "UnattachedNode":
        """Allocate a new node that is not yet part of any tree."""
        node = self.map.insert()
        self.data.added_to_forest(self.map, node)
        return UnattachedNode(node, self)

    def detach(self, node: NodeId) -> "DetachedNode":
        """Begin moving or removing an attached node."""
        return DetachedNode(node, self)

    def deep_copy(self, node: NodeId) -> "UnattachedNode":
        """Copy the structure of the subtree rooted at ``node``.

        Observer events are raised for every node created.
        """
        new_root = self.mk_node().id
        stack = [(node, new_root)]
        originals = list(islice(self.map.traverse_preorder(node), 1, None))
        for old in originals:
            while self.map.parent(old) != stack[-1][0]:
                stack.pop()
            new = self.mk_node().push_back(stack[-1][1])
            stack.append((old, new))
        return UnattachedNode(new_root, self)


def _delete_recursive(tree: Tree, record: Node, node: NodeId) -> None:
    tree.data.removed_from_forest(tree.map, node)
    child = record.first_child
    while child is not None:
        child_record = tree.map.remove(child)
        _delete_recursive(tree, child_record, child)
        child = child_record.next_sibling


class UnattachedNode:
    """A freshly created node that must be attached, made a root or removed."""

    def __init__(self, node: NodeId, tree: Tree) -> None:
        self.id = node
        self.tree = tree

    def __repr__(self) -> str:
        return f"UnattachedNode({self.id!r})"

    def make_root(self, name: str) -> "OwnedNode":
        return OwnedNode.own(self.id, name)

    def _attach(self, attach: Callable[[], None]) -> NodeId:
        attach()
        self.tree.data.added_to_parent(self.tree.map, self.id)
        return self.id

    def push_back(self, parent: NodeId) -> NodeId:
        return self._attach(lambda: self.tree.map.link_under_back(self.id, parent))

    def push_front(self, parent: NodeId) -> NodeId:
        return self._attach(lambda: self.tree.map.link_under_front(self.id, parent))

    def insert_before(self, sibling: NodeId) -> NodeId:
        return self._attach(lambda: self.tree.map.link_before(self.id, sibling))

    def insert_after(self, sibling: NodeId) -> NodeId:
        return self._attach(lambda: self.tree.map.link_after(self.id, sibling))

    def remove(self) -> None:
        """Delete the node and its whole subtree."""
        if self.tree.map.parent(self.id) is not None:
            raise ValueError(f"{self.id!r} is attached to a parent")
        record = self.tree.map.remove(self.id)
        _delete_recursive(self.tree, record, self.id)


class DetachedNode:
    """An attached node in the middle of being moved or removed."""

    def __init__(self, node: NodeId, tree: Tree) -> None:
        self.id = node
        self.tree = tree

    def __repr__(self) -> str:
        return f"DetachedNode({self.id!r})"

    def _old_parent(self) -> NodeId:
        parent = self.tree.map.parent(self.id)
        if parent is None:
            raise ValueError(f"{self.id!r} is a root node and cannot be detached")
        return parent

    def _sibling_parent(self, sibling: NodeId) -> NodeId:
        parent = self.tree.map.parent(sibling)
        if parent is None:
            raise ValueError("cannot make a sibling of a root node")
        return parent

    def _attach(self, new_parent: NodeId, attach: Callable[[], None]) -> "ReattachedNode":
        old_parent = self._old_parent()
        moved = old_parent != new_parent
        if moved:
            self.tree.data.removing_from_parent(self.tree.map, self.id)
        self.tree.map.unlink(self.id)
        attach()
        if moved:
            self.tree.data.added_to_parent(self.tree.map, self.id)
        return ReattachedNode(self.id, self.tree, old_parent, new_parent)

    def push_back(self, parent: NodeId) -> "ReattachedNode":
        return self._attach(parent, lambda: self.tree.map.link_under_back(self.id, parent))

    def push_front(self, parent: NodeId) -> "ReattachedNode":
        return self._attach(parent, lambda: self.tree.map.link_under_front(self.id, parent))

    def insert_before(self, sibling: NodeId) -> "ReattachedNode":
        parent = self._sibling_parent(sibling)
        return self._attach(parent, lambda: self.tree.map.link_before(self.id, sibling))

    def insert_after(self, sibling: NodeId) -> "ReattachedNode":
        parent = self._sibling_parent(sibling)
        return self._attach(parent, lambda: self.tree.map.link_after(self.id, sibling))

    def remove(self) -> None:
        """Unlink the node from its parent and delete its whole subtree."""
        parent = self._old_parent()
        self.tree.data.removing_from_parent(self.tree.map, self.id)
        self.tree.map.unlink(self.id)
        self.tree.data.removed_child(self.tree, parent)
        record = self.tree.map.remove(self.id)
        _delete_recursive(self.tree, record, self.id)


class ReattachedNode:
    """A moved node whose old parent has not yet been told it lost a child.

    Call :meth:`finish`, or use the object as a context manager, to complete
    the move.
    """

    def __init__(self, node: NodeId, tree: Tree, old_parent: NodeId, new_parent: NodeId) -> None:
        self.id = node
        self.tree = tree
        self.old_parent = old_parent
        self.new_parent = new_parent
        self._finished = False

    def then(self, func: Callable[[NodeId, Tree], None]) -> "ReattachedNode":
        """Run ``func(node, tree)`` before the move is completed."""
        func(self.id, self.tree)
        return self

    def finish(self) -> NodeId:
        """Complete the move and return the node id."""
        if not self._finished:
            self._finished = True
            if self.old_parent != self.new_parent:
                self.tree.data.removed_child(self.tree, self.old_parent)
        return self.id

    def __enter__(self) -> "ReattachedNode":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finish()

    def __del__(self) -> None:
        if not getattr(self, "_finished", True):
            self.finish()


class OwnedNode:
    """Ownership of a root node, which must be removed explicitly."""

    def __init__(self, node: Optional[NodeId], name: str) -> None:
        self._id = node
        self.name = name

    def __repr__(self) -> str:
        return f"OwnedNode({self._id!r}, {self.name!r})"

    @staticmethod
    def new_root_in(tree: Tree, name: str) -> "OwnedNode":
        """Create a new root node in ``tree``."""
        return OwnedNode.own(tree.mk_node().id, name)

    @staticmethod
    def own(node: NodeId, name: str) -> "OwnedNode":
        return OwnedNode(node, name)

    def id(self) -> NodeId:
        if self._id is None:
            raise RuntimeError(f"OwnedNode {self.name!r} has been removed")
        return self._id

    def is_removed(self) -> bool:
        return self._id is None

    def remove(self, tree: Tree) -> None:
        """Delete the owned node and its whole subtree."""
        node = self.id()
        self._id = None
        UnattachedNode(node, tree).remove()

    def replace(self, new: UnattachedNode) -> UnattachedNode:
        """Take ownership of ``new`` and hand back the previously owned node."""
        if self._id is None:
            raise RuntimeError("Can't replace removed node")
        old = self._id
        self._id = new.id
        return UnattachedNode(old, new.tree)

    def __del__(self) -> None:
        if getattr(self, "_id", None) is not None:
            warnings.warn(
                f"OwnedNode {self.name!r} dropped without being removed: {self._id!r}",
                ResourceWarning,
                stacklevel=2,
            )