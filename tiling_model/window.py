"""Two-way mapping between leaf nodes and window ids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

from .nodes import (
    AddedToParent,
    Copied,
    NodeId,
    NodeMap,
    RemovedFromForest,
    TreeEvent,
)


@dataclass(frozen=True, order=True)
class WindowId:
    """A window, identified by its owning process and an index within it."""

    pid: int
    idx: int


@dataclass
class _WindowNodeInfo:
    layout: Hashable
    node: NodeId


class Window:
    """Maps leaf nodes to windows and windows to their nodes in each layout."""

    def __init__(self) -> None:
        self._windows: Dict[NodeId, WindowId] = {}
        self._window_nodes: Dict[WindowId, List[_WindowNodeInfo]] = {}

    def at(self, node: NodeId) -> Optional[WindowId]:
        return self._windows.get(node)

    def node_for(self, layout: Hashable, wid: WindowId) -> Optional[NodeId]:
        return next(
            (info.node for info in self._window_nodes.get(wid, ()) if info.layout == layout),
            None,
        )

    def set_window(self, layout: Hashable, node: NodeId, wid: WindowId) -> None:
        existing = self._windows.get(node)
        if existing is not None:
            raise ValueError(
                f"Attempted to overwrite window for node {node!r} from {existing!r} to {wid!r}"
            )
        self._windows[node] = wid
        self._window_nodes.setdefault(wid, []).append(_WindowNodeInfo(layout, node))

    def swap_windows(self, node_a: NodeId, node_b: NodeId) -> None:
        """Exchange the windows of two nodes; does nothing unless both have one."""
        a = self._windows.get(node_a)
        b = self._windows.get(node_b)
        if a is None or b is None:
            return
        self._windows[node_a] = b
        self._windows[node_b] = a
        for info in self._window_nodes.get(a, ()):
            if info.node == node_a:
                info.node = node_b
        for info in self._window_nodes.get(b, ()):
            if info.node == node_b:
                info.node = node_a

    def window_ids(self) -> Iterator[WindowId]:
        """Yield every window with a node, in sorted order."""
        yield from sorted(self._window_nodes)

    def pids(self) -> Iterator[int]:
        """Yield each process owning a window, in sorted order."""
        last: Optional[int] = None
        for wid in self.window_ids():
            if wid.pid != last:
                last = wid.pid
                yield wid.pid

    def take_nodes_for(self, wid: WindowId) -> List[Tuple[Hashable, NodeId]]:
        """Forget every node of ``wid`` and return them as (layout, node) pairs."""
        infos = self._window_nodes.pop(wid, [])
        return [(info.layout, info.node) for info in infos]

    def take_nodes_for_app(self, pid: int) -> List[Tuple[WindowId, Hashable, NodeId]]:
        """Forget every node of every window of ``pid``."""
        wids = [wid for wid in sorted(self._window_nodes) if wid.pid == pid]
        return [
            (wid, info.layout, info.node)
            for wid in wids
            for info in self._window_nodes.pop(wid)
        ]

    def handle_event(self, map: NodeMap, event: TreeEvent) -> None:
        match event:
            case AddedToParent(node=node):
                parent = map.parent(node)
                if parent is not None and parent in self._windows:
                    raise ValueError(
                        f"Window nodes are not allowed to have children: {parent!r}/{node!r}"
                    )
            case Copied(src=src, dest=dest, dest_layout=dest_layout):
                wid = self._windows.get(src)
                if wid is not None:
                    self.set_window(dest_layout, dest, wid)
            case RemovedFromForest(node=node):
                wid = self._windows.pop(node, None)
                if wid is None:
                    return
                infos = self._window_nodes.get(wid)
                if infos is not None:
                    infos[:] = [info for info in infos if info.node != node]
                    if not infos:
                        del self._window_nodes[wid]
            case _:
                pass