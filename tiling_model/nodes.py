"""Node identifiers, node records and the map that links them into trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True, order=True)
class NodeId:
    """Identifies a node slot; the version distinguishes reuses of a slot."""

    index: int
    version: int = 0

    def __repr__(self) -> str:
        return f"NodeId({self.index}v{self.version})"


@dataclass
class Node:
    """Structural links of a single node."""

    parent: Optional[NodeId] = None
    prev_sibling: Optional[NodeId] = None
    next_sibling: Optional[NodeId] = None
    first_child: Optional[NodeId] = None
    last_child: Optional[NodeId] = None


@dataclass(frozen=True)
class AddedToForest:
    node: NodeId


@dataclass(frozen=True)
class AddedToParent:
    node: NodeId


@dataclass(frozen=True)
class Copied:
    src: NodeId
    dest: NodeId
    dest_layout: object = None


@dataclass(frozen=True)
class RemovingFromParent:
    node: NodeId


@dataclass(frozen=True)
class RemovedFromForest:
    node: NodeId


TreeEvent = Union[AddedToForest, AddedToParent, Copied, RemovingFromParent, RemovedFromForest]


class NodeMap:
    """Holds the structure of one or more trees.

    Several trees may live in the same map, which makes moving branches
    between them straightforward.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, Node] = {}
        self._versions: List[int] = []
        self._free: List[int] = []

    # -- storage -----------------------------------------------------------

    def insert(self) -> NodeId:
        """Allocate a fresh, unlinked node and return its id."""
        if self._free:
            index = self._free.pop()
            self._versions[index] += 1
        else:
            index = len(self._versions)
            self._versions.append(0)
        node = NodeId(index, self._versions[index])
        self._nodes[node] = Node()
        return node

    def remove(self, node: NodeId) -> Node:
        """Remove a node's record from the map and return it."""
        record = self._nodes.pop(node)
        self._free.append(node.index)
        return record

    def contains(self, node: NodeId) -> bool:
        return node in self._nodes

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __getitem__(self, node: NodeId) -> Node:
        return self._nodes[node]

    def __len__(self) -> int:
        return len(self._nodes)

    # -- queries -----------------------------------------------------------

    def parent(self, node: NodeId) -> Optional[NodeId]:
        return self._nodes[node].parent

    def next_sibling(self, node: NodeId) -> Optional[NodeId]:
        return self._nodes[node].next_sibling

    def prev_sibling(self, node: NodeId) -> Optional[NodeId]:
        return self._nodes[node].prev_sibling

    def first_child(self, node: NodeId) -> Optional[NodeId]:
        return self._nodes[node].first_child

    def last_child(self, node: NodeId) -> Optional[NodeId]:
        return self._nodes[node].last_child

    def is_empty(self, node: NodeId) -> bool:
        return self._nodes[node].first_child is None

    def children(self, node: NodeId) -> Iterator[NodeId]:
        """Yield the children of a node from first to last."""
        cur = self._nodes[node].first_child
        while cur is not None:
            yield cur
            cur = self._nodes[cur].next_sibling

    def children_rev(self, node: NodeId) -> Iterator[NodeId]:
        """Yield the children of a node from last to first."""
        cur = self._nodes[node].last_child
        while cur is not None:
            yield cur
            cur = self._nodes[cur].prev_sibling

    def ancestors(self, node: NodeId) -> Iterator[NodeId]:
        """Yield the node itself and then each of its ancestors."""
        cur: Optional[NodeId] = node
        while cur is not None:
            nxt = self._nodes[cur].parent
            yield cur
            cur = nxt

    def ancestors_with_parent(self, node: NodeId) -> Iterator[Tuple[NodeId, Optional[NodeId]]]:
        """Yield (node, parent) pairs from the node up to its root."""
        cur: Optional[NodeId] = node
        while cur is not None:
            nxt = self._nodes[cur].parent
            yield cur, nxt
            cur = nxt

    def _descend_left(self, node: NodeId) -> NodeId:
        while (child := self._nodes[node].first_child) is not None:
            node = child
        return node

    def traverse_postorder(self, node: NodeId) -> Iterator[NodeId]:
        """Yield the subtree rooted at ``node`` in post-order."""
        top = node
        cur: Optional[NodeId] = self._descend_left(node)
        while cur is not None:
            current = cur
            cur = None
            if current != top:
                sibling = self._nodes[current].next_sibling
                if sibling is not None:
                    cur = self._descend_left(sibling)
                else:
                    cur = self._nodes[current].parent
            yield current

    def traverse_preorder(self, node: NodeId) -> Iterator[NodeId]:
        """Yield the subtree rooted at ``node`` in pre-order."""
        top = node
        cur: Optional[NodeId] = node
        while cur is not None:
            current = cur
            child = self._nodes[current].first_child
            if child is not None:
                cur = child
            else:
                cur = None
                for ancestor in self.ancestors(current):
                    if ancestor == top:
                        break
                    sibling = self._nodes[ancestor].next_sibling
                    if sibling is not None:
                        cur = sibling
                        break
            yield current

    # -- linking -----------------------------------------------------------

    def link_under_back(self, node: NodeId, parent: NodeId) -> None:
        """Make ``node`` the last child of ``parent``."""
        if node == parent:
            raise ValueError(f"cannot link {node!r} under itself")
        self._nodes[node].parent = parent
        parent_rec = self._nodes[parent]
        if parent_rec.first_child is None:
            parent_rec.first_child = node
        prev = parent_rec.last_child
        parent_rec.last_child = node
        if prev is not None:
            self._hlink_after(node, prev)

    def link_under_front(self, node: NodeId, parent: NodeId) -> None:
        """Make ``node`` the first child of ``parent``."""
        if node == parent:
            raise ValueError(f"cannot link {node!r} under itself")
        self._nodes[node].parent = parent
        parent_rec = self._nodes[parent]
        if parent_rec.last_child is None:
            parent_rec.last_child = node
        nxt = parent_rec.first_child
        parent_rec.first_child = node
        if nxt is not None:
            self._hlink_before(node, nxt)

    def link_before(self, node: NodeId, next_node: NodeId) -> None:
        """Place ``node`` immediately before ``next_node``."""
        parent = self._nodes[next_node].parent
        if parent is None:
            raise ValueError("cannot make a sibling of a root node")
        self._nodes[node].parent = parent
        parent_rec = self._nodes[parent]
        if parent_rec.first_child == next_node:
            parent_rec.first_child = node
        self._hlink_before(node, next_node)

    def link_after(self, node: NodeId, prev_node: NodeId) -> None:
        """Place ``node`` immediately after ``prev_node``."""
        parent = self._nodes[prev_node].parent
        if parent is None:
            raise ValueError("cannot make a sibling of a root node")
        self._nodes[node].parent = parent
        parent_rec = self._nodes[parent]
        if parent_rec.last_child == prev_node:
            parent_rec.last_child = node
        self._hlink_after(node, prev_node)

    def _hlink_after(self, node: NodeId, prev: NodeId) -> None:
        rec = self._nodes[node]
        rec.prev_sibling = prev
        nxt = self._nodes[prev].next_sibling
        self._nodes[prev].next_sibling = node
        if nxt is not None:
            self._nodes[nxt].prev_sibling = node
            rec.next_sibling = nxt

    def _hlink_before(self, node: NodeId, nxt: NodeId) -> None:
        rec = self._nodes[node]
        rec.next_sibling = nxt
        prev = self._nodes[nxt].prev_sibling
        self._nodes[nxt].prev_sibling = node
        if prev is not None:
            self._nodes[prev].next_sibling = node
            rec.prev_sibling = prev

    def unlink(self, node: NodeId) -> None:
        """Take ``node`` out of its sibling list; its parent link is kept."""
        rec = self._nodes[node]
        prev, nxt = rec.prev_sibling, rec.next_sibling
        rec.prev_sibling = None
        rec.next_sibling = None
        if prev is not None:
            self._nodes[prev].next_sibling = nxt
        if nxt is not None:
            self._nodes[nxt].prev_sibling = prev
        if rec.parent is not None:
            parent_rec = self._nodes[rec.parent]
            if parent_rec.first_child == node:
                parent_rec.first_child = nxt
            if parent_rec.last_child == node:
                parent_rec.last_child = prev