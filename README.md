# tiling_model

The in-memory data model behind the layouts of a tiling window manager.
It is plain Python and has no runtime dependencies.

## Modules

- `tiling_model.nodes`
  - `NodeMap` stores the links of an n-ary forest.
    - `insert()` allocates a node and returns its `NodeId`. Ids carry a
      version, so an id whose slot is reused is not mistaken for the new one.
    - `remove(node)` and `contains(node)` manage storage.
    - For navigation it has `parent`, `next_sibling`, `prev_sibling`,
      `first_child`, `last_child` and `is_empty`.
    - Iteration: `children` and `children_rev` walk a node's children,
      `traverse_preorder` and `traverse_postorder` walk its subtree, and
      `ancestors` and `ancestors_with_parent` walk from the node up to its
      root.
    - The low-level linking operations are `link_under_back`,
      `link_under_front`, `link_before`, `link_after` and `unlink`.
  - The event classes `AddedToForest`, `AddedToParent`, `Copied`,
    `RemovingFromParent` and `RemovedFromForest` describe structural
    changes. `Selection`, `Window` and `Size` consume them through their
    `handle_event` methods.
- `tiling_model.tree`
  - `Tree` pairs a `NodeMap` (`tree.map`) with an `Observer` (`tree.data`).
    The observer is told about every structural change. The base
    `Observer` only checks that each notification matches the map, and
    raises `ValueError` if it does not. Subclass it to react to changes.
  - `Tree.mk_node()` returns an `UnattachedNode`. It can be attached with
    `push_back`, `push_front`, `insert_before` or `insert_after`, made a
    root with `make_root`, or deleted with `remove`.
  - `Tree.detach(node)` returns a `DetachedNode`, which can be moved or
    removed.
    - A move returns a `ReattachedNode`. Its old parent gets
      `removed_child` once the move is completed by `finish()`, by leaving
      a `with` block, or when the object is collected. `then(func)` runs
      `func(node, tree)` before that happens.
  - `Tree.deep_copy(node)` copies the structure of a subtree. Observer
    events are raised for every node it creates.
  - `OwnedNode` holds a root node that must be removed explicitly with
    `remove(tree)`. If one is dropped without that, a `ResourceWarning` is
    issued.
- `tiling_model.selection`
  - `Selection` remembers the selected child of each container.
    - `select` sets the selection along the whole path from a node to its
      root.
    - `select_locally` selects a node within its parent only.
    - `current_selection` follows the selection down from a root.
    - `local_selection` and `last_selection` look at a single level.
  - When a selected node is removed, the selection moves to its next
    sibling, or to the previous one if there is no next.
- `tiling_model.window`
  - `WindowId(pid, idx)` identifies a window.
  - `Window` maps leaf nodes to windows and, for each window, to its node
    in every layout. It provides `at`, `node_for`, `set_window`,
    `swap_windows`, `window_ids`, `pids`, `take_nodes_for` and
    `take_nodes_for_app`.
- `tiling_model.kinds`
  - The enums `Orientation`, `ContainerKind` and `Direction`.
  - `ContainerKind.from_orientation` and `ContainerKind.group` pick a kind
    for an orientation.
  - `ContainerKind.is_group` is true for tabbed and stacked containers.
- `tiling_model.size`
  - `Size` keeps a weight for each node, the total of its children's
    weights, its container kind, its last ungrouped kind and a fullscreen
    flag.
  - It provides `proportion`, `take_share`, `set_weight`,
    `assume_size_of` and `fullscreen_nodes`.
  - `debug(node, is_container)` returns a short text summary of a node.
- `tiling_model.spring`
  - `SpringAnimation` animates a value along a damped spring. Times are
    `time.monotonic()` timestamps.
  - It provides `value_at`, `velocity_at`, `is_complete`, `target`,
    `current`, and `retarget`, which keeps the current value and velocity.
  - `with_defaults` gives a critically damped spring with a half-second
    response.

## Example

```python
from tiling_model.tree import Tree, OwnedNode

tree = Tree()
root = OwnedNode.new_root_in(tree, "layout")
a = tree.mk_node().push_back(root.id())
b = tree.mk_node().push_back(root.id())
assert list(tree.map.children(root.id())) == [a, b]

tree.detach(b).insert_before(a).finish()
assert list(tree.map.children(root.id())) == [b, a]

root.remove(tree)
```

```python
import time
from tiling_model.spring import SpringAnimation

spring = SpringAnimation.with_defaults(0.0, 100.0)
print(spring.current(), spring.target())
print(spring.is_complete(time.monotonic() + 2.0))
```

## What it does not do

This package is the model only. It has no layout object that combines the
tree, selection, window mapping and sizes. It does not turn weights into
window frames on a screen, and it has no group bars, gaps or
configuration. It also does not talk to any windowing system or run as a
program. Those parts are left to the code that uses it.

## Running the tests

```
pip install -e ".[test]"
pytest
```