"""Per-node sizing weights, container kinds and fullscreen flags."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from .kinds import ContainerKind
from .nodes import (
    AddedToForest,
    AddedToParent,
    Copied,
    NodeId,
    NodeMap,
    RemovedFromForest,
    RemovingFromParent,
    TreeEvent,
)


@dataclass
class _LayoutInfo:
    # Share of the parent's size taken by this node; 1.0 once attached.
    size: float = 0.0
    # Sum of the sizes of all children.
    total: float = 0.0
    kind: ContainerKind = ContainerKind.HORIZONTAL
    last_ungrouped_kind: ContainerKind = ContainerKind.HORIZONTAL
    is_fullscreen: bool = False


def _format_number(value: float) -> str:
    if value == int(value):
        return str(int(value))
    return repr(value)


class Size:
    """Tracks how the space of each container is shared among its children."""

    def __init__(self) -> None:
        self._info: Dict[NodeId, _LayoutInfo] = {}

    def _parent_of(self, map: NodeMap, node: NodeId) -> NodeId:
        parent = map.parent(node)
        if parent is None:
            raise ValueError(f"{node!r} has no parent")
        return parent

    def handle_event(self, map: NodeMap, event: TreeEvent) -> None:
        match event:
            case AddedToForest(node=node):
                self._info[node] = _LayoutInfo()
            case AddedToParent(node=node):
                parent = self._parent_of(map, node)
                self._info[node].size = 1.0
                self._info[parent].total += 1.0
            case Copied(src=src, dest=dest):
                self._info[dest] = replace(self._info[src])
            case RemovingFromParent(node=node):
                parent = self._parent_of(map, node)
                self._info[parent].total -= self._info[node].size
            case RemovedFromForest(node=node):
                self._info.pop(node, None)
            case _:
                pass

    def assume_size_of(self, new: NodeId, old: NodeId, map: NodeMap) -> None:
        """Give ``new`` the share held by its sibling ``old``, leaving ``old`` with none."""
        if map.parent(new) != map.parent(old):
            raise ValueError(f"{new!r} and {old!r} do not share a parent")
        parent = self._parent_of(map, new)
        self._info[parent].total -= self._info[new].size
        self._info[new].size = self._info[old].size
        self._info[old].size = 0.0

    def set_kind(self, node: NodeId, kind: ContainerKind) -> None:
        info = self._info[node]
        info.kind = kind
        if not kind.is_group():
            info.last_ungrouped_kind = kind

    def kind(self, node: NodeId) -> ContainerKind:
        return self._info[node].kind

    def last_ungrouped_kind(self, node: NodeId) -> ContainerKind:
        return self._info[node].last_ungrouped_kind

    def proportion(self, map: NodeMap, node: NodeId) -> Optional[float]:
        """The fraction of its parent taken by ``node``; None for a root."""
        parent = map.parent(node)
        if parent is None:
            return None
        return self._info[node].size / self._info[parent].total

    def total(self, node: NodeId) -> float:
        return self._info[node].total

    def weight(self, node: NodeId) -> float:
        return self._info[node].size

    def take_share(self, map: NodeMap, node: NodeId, source: NodeId, share: float) -> None:
        """Move up to ``share`` of weight from sibling ``source`` to ``node``."""
        if map.parent(node) != map.parent(source):
            raise ValueError(f"{node!r} and {source!r} do not share a parent")
        share = min(share, self._info[source].size)
        share = max(share, -self._info[node].size)
        self._info[source].size -= share
        self._info[node].size += share

    def set_weight(self, node: NodeId, weight: float, map: NodeMap) -> None:
        old = self._info[node].size
        self._info[node].size = weight
        parent = map.parent(node)
        if parent is not None:
            self._info[parent].total += weight - old

    def set_fullscreen(self, node: NodeId, is_fullscreen: bool) -> None:
        self._info[node].is_fullscreen = is_fullscreen

    def is_fullscreen(self, node: NodeId) -> bool:
        return self._info[node].is_fullscreen

    def fullscreen_nodes(self, map: NodeMap, root: NodeId) -> List[NodeId]:
        """Fullscreen nodes of the subtree under ``root``, in post-order."""
        return [
            node
            for node in map.traverse_postorder(root)
            if (info := self._info.get(node)) is not None and info.is_fullscreen
        ]

    def debug(self, node: NodeId, is_container: bool) -> str:
        info = self._info[node]
        fullscreen = "; fullscreen" if info.is_fullscreen else ""
        size = _format_number(info.size)
        if is_container:
            kind = info.kind.name.title()
            return f"{kind} [size {size} total={_format_number(info.total)}{fullscreen}]"
        return f"[size {size}{fullscreen}]"