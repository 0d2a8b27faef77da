"""Tracks which child is selected at each level of a layout tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .nodes import (
    Copied,
    NodeId,
    NodeMap,
    RemovedFromForest,
    RemovingFromParent,
    TreeEvent,
)


@dataclass
class _SelectionInfo:
    selected_child: NodeId
    stop_here: bool = False


class Selection:
    """Remembers the selected child of every container node."""

    def __init__(self) -> None:
        self._nodes: Dict[NodeId, _SelectionInfo] = {}

    def current_selection(self, root: NodeId) -> NodeId:
        """Follow the selection path down from ``root``."""
        node = root
        while (info := self._nodes.get(node)) is not None:
            if info.stop_here:
                break
            node = info.selected_child
        return node

    def last_selection(self, map: NodeMap, node: NodeId) -> Optional[NodeId]:
        """The child last selected under ``node``, even if selection stops at it."""
        info = self._nodes.get(node)
        return None if info is None else info.selected_child

    def local_selection(self, map: NodeMap, node: NodeId) -> Optional[NodeId]:
        """The selected child of ``node``, unless the selection stops at ``node``."""
        info = self._nodes.get(node)
        if info is None:
            return None
        assert map.parent(info.selected_child) == node
        return None if info.stop_here else info.selected_child

    def select_locally(self, map: NodeMap, node: NodeId) -> bool:
        """Select the node within its parent; return whether that changed anything."""
        parent = map.parent(node)
        if parent is None:
            return False
        previous = self._nodes.get(parent)
        self._nodes[parent] = _SelectionInfo(node)
        return previous is None or previous.selected_child != node

    def select(self, map: NodeMap, selection: NodeId) -> None:
        """Make ``selection`` the selected node of its whole tree."""
        info = self._nodes.get(selection)
        if info is not None:
            info.stop_here = True
        node = selection
        while (parent := map.parent(node)) is not None:
            self._nodes[parent] = _SelectionInfo(node)
            node = parent

    def handle_event(self, map: NodeMap, event: TreeEvent) -> None:
        match event:
            case Copied(src=src, dest=dest):
                self._copy(map, src, dest)
            case RemovingFromParent(node=node):
                self._removing(map, node)
            case RemovedFromForest(node=node):
                self._nodes.pop(node, None)
            case _:
                pass

    def _copy(self, map: NodeMap, src: NodeId, dest: NodeId) -> None:
        info = self._nodes.get(src)
        if info is None:
            return
        selected_child = next(
            (
                dest_child
                for src_child, dest_child in zip(map.children(src), map.children(dest))
                if src_child == info.selected_child
            ),
            None,
        )
        if selected_child is None:
            raise ValueError(
                "Dest tree had different structure, or source node had "
                f"nonexistent selection: {src!r}, {dest!r}"
            )
        self._nodes[dest] = _SelectionInfo(selected_child, info.stop_here)

    def _removing(self, map: NodeMap, node: NodeId) -> None:
        parent = map.parent(node)
        if parent is None:
            raise ValueError(f"{node!r} has no parent to be removed from")
        info = self._nodes.get(parent)
        if info is None or info.selected_child != node:
            return
        replacement = map.next_sibling(node)
        if replacement is None:
            replacement = map.prev_sibling(node)
        if replacement is not None:
            info.selected_child = replacement
        else:
            del self._nodes[parent]